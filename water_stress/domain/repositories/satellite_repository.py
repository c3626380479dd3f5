"""Satellite data repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from ..entities.location import Location
from ..entities.satellite_reading import SatelliteReading


class SatelliteRepository(ABC):
    """Abstract repository for soil moisture and evapotranspiration data."""

    @abstractmethod
    def get_latest_reading(self, location: Location) -> Optional[SatelliteReading]:
        """
        Retrieve the most recent daily satellite values for a point.

        Args:
            location: Point to query

        Returns:
            SatelliteReading, or None when the provider has nothing usable
        """
        pass
