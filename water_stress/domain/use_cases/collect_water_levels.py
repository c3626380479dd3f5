"""Use case for collecting river gauge readings."""

import logging
from typing import Dict, List, Optional
from ..entities.water_level_reading import WaterLevelReading
from ..repositories.water_level_repository import WaterLevelRepository

logger = logging.getLogger(__name__)


class CollectWaterLevelsUseCase:
    """Use case to collect the latest readings for named gauge stations."""

    def __init__(self, repository: WaterLevelRepository, stations: Dict[str, str]):
        """
        Initialize use case.

        Args:
            repository: Repository for gauge readings
            stations: Mapping of station key to site identifier
        """
        self.repository = repository
        self.stations = stations

    def execute(self, station_keys: Optional[List[str]] = None) -> List[WaterLevelReading]:
        """
        Execute the use case.

        Args:
            station_keys: Restrict to these station keys (default: all)

        Returns:
            List of WaterLevelReading entities
        """
        keys = station_keys or list(self.stations.keys())
        unknown = [k for k in keys if k not in self.stations]
        if unknown:
            raise ValueError(f"Unknown station(s): {', '.join(unknown)}")

        site_ids = [self.stations[k] for k in keys]
        logger.info(f"Collecting water levels for sites: {site_ids}")
        readings = self.repository.get_latest_readings(site_ids)
        logger.info(f"Collected {len(readings)} water level readings")
        return readings
