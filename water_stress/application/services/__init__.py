"""Application services."""

from .water_monitoring_service import WaterMonitoringService, RefreshReport
from .refresh_scheduler import PeriodicRefresher

__all__ = ["WaterMonitoringService", "RefreshReport", "PeriodicRefresher"]
