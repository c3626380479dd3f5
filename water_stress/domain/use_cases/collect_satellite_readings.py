"""Use case for collecting satellite readings at reference points."""

import logging
from typing import List, Optional, Sequence
from ..entities.location import Location
from ..entities.satellite_reading import SatelliteReading
from ..repositories.satellite_repository import SatelliteRepository

logger = logging.getLogger(__name__)


class CollectSatelliteReadingsUseCase:
    """Use case to collect soil moisture readings for reference points."""

    def __init__(self, repository: SatelliteRepository, locations: Sequence[Location]):
        """
        Initialize use case.

        Args:
            repository: Repository for satellite data
            locations: Reference points, looked up by name
        """
        self.repository = repository
        self.locations = {loc.name: loc for loc in locations}

    def execute(self, names: Optional[List[str]] = None) -> List[SatelliteReading]:
        """
        Execute the use case.

        Args:
            names: Restrict to these reference points (default: all)

        Returns:
            Readings for the points the provider answered for
        """
        names = names or list(self.locations.keys())
        unknown = [n for n in names if n not in self.locations]
        if unknown:
            raise ValueError(f"Unknown reference location(s): {', '.join(unknown)}")

        readings = []
        for name in names:
            reading = self.repository.get_latest_reading(self.locations[name])
            if reading is None:
                logger.warning(f"No satellite reading for {name}")
                continue
            readings.append(reading)

        logger.info(f"Collected {len(readings)}/{len(names)} satellite readings")
        return readings
