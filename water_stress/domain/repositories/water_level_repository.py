"""Water level repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional
from ..entities.water_level_reading import WaterLevelReading


class WaterLevelRepository(ABC):
    """Abstract repository for river gauge readings."""

    @abstractmethod
    def get_latest_readings(
        self,
        site_ids: List[str],
        parameter_codes: Optional[List[str]] = None,
    ) -> List[WaterLevelReading]:
        """
        Retrieve the most recent reading for each site and parameter.

        Args:
            site_ids: Gauge station identifiers
            parameter_codes: Parameter codes to request (optional)

        Returns:
            List of WaterLevelReading entities
        """
        pass
