"""Wiring of the monitoring service from application settings."""

import logging
from typing import List, Optional

import requests

from config.settings import (
    MONITORED_LOCATIONS,
    REFERENCE_LOCATIONS,
    USGS_STATIONS,
    NASA_POWER_SETTINGS,
    NASA_POWER_SATELLITE_SETTINGS,
    OPEN_METEO_SETTINGS,
    USGS_SETTINGS,
    MONITOR_SETTINGS,
)
from ..domain.entities.location import Location
from ..domain.entities.missing_data_policy import MissingDataPolicy
from ..domain.repositories.presentation_sink import PresentationSink
from ..infrastructure.repositories.nasa_power_observation_source import NASAPowerObservationSource
from ..infrastructure.repositories.open_meteo_observation_source import OpenMeteoObservationSource
from ..infrastructure.repositories.fallback_observation_source import FallbackObservationSource
from ..infrastructure.repositories.usgs_water_level_repository import USGSWaterLevelRepository
from ..infrastructure.repositories.nasa_power_satellite_repository import NASAPowerSatelliteRepository
from ..infrastructure.repositories.in_memory_reading_store import InMemoryReadingStore
from ..infrastructure.repositories.logging_presentation_sink import LoggingPresentationSink
from ..infrastructure.repositories.file_snapshot_sink import FileSnapshotSink
from .services.water_monitoring_service import WaterMonitoringService

logger = logging.getLogger(__name__)


def build_monitoring_service(
    missing_data_policy: Optional[str] = None,
    export_file: Optional[str] = None,
    request_delay: Optional[float] = None,
    session: Optional[requests.Session] = None,
) -> WaterMonitoringService:
    """
    Build a WaterMonitoringService backed by the live data providers.

    NASA POWER is queried first and Open-Meteo is used when it fails.

    Args:
        missing_data_policy: 'zero' or 'skip' (defaults to settings)
        export_file: Optional CSV/XLSX path written after each refresh
        request_delay: Seconds between provider requests (defaults to settings)
        session: Shared HTTP session

    Returns:
        Configured service with an empty store
    """
    session = session or requests.Session()
    policy = MissingDataPolicy(missing_data_policy or MONITOR_SETTINGS["missing_data_policy"])

    source = FallbackObservationSource(
        [
            NASAPowerObservationSource(
                session=session,
                url=NASA_POWER_SETTINGS["url"],
                parameters=NASA_POWER_SETTINGS["parameters"],
                lookback_days=NASA_POWER_SETTINGS["lookback_days"],
                community=NASA_POWER_SETTINGS["community"],
                timeout=NASA_POWER_SETTINGS["timeout"],
            ),
            OpenMeteoObservationSource(
                session=session,
                url=OPEN_METEO_SETTINGS["url"],
                past_days=OPEN_METEO_SETTINGS["past_days"],
                timeout=OPEN_METEO_SETTINGS["timeout"],
            ),
        ]
    )

    sinks: List[PresentationSink] = [LoggingPresentationSink()]
    if export_file:
        sinks.append(FileSnapshotSink(export_file))

    logger.info(
        f"Monitoring {len(MONITORED_LOCATIONS)} locations "
        f"(missing data policy: {policy.value})"
    )
    return WaterMonitoringService(
        locations=[Location.from_dict(d) for d in MONITORED_LOCATIONS],
        source=source,
        store=InMemoryReadingStore(),
        sinks=sinks,
        water_level_repo=USGSWaterLevelRepository(
            session=session,
            url=USGS_SETTINGS["url"],
            timeout=USGS_SETTINGS["timeout"],
            parameter_codes=USGS_SETTINGS["parameter_codes"],
        ),
        stations=USGS_STATIONS,
        satellite_repo=NASAPowerSatelliteRepository(
            session=session,
            url=NASA_POWER_SATELLITE_SETTINGS["url"],
            lookback_days=NASA_POWER_SATELLITE_SETTINGS["lookback_days"],
            community=NASA_POWER_SATELLITE_SETTINGS["community"],
            timeout=NASA_POWER_SATELLITE_SETTINGS["timeout"],
        ),
        reference_locations=[Location.from_dict(d) for d in REFERENCE_LOCATIONS],
        missing_data_policy=policy,
        request_delay=(
            MONITOR_SETTINGS["request_delay"] if request_delay is None else request_delay
        ),
    )
