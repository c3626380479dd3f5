"""Observation source interface."""

from abc import ABC, abstractmethod
from typing import Optional
from ..entities.location import Location
from ..entities.observation import Observation


class ObservationSource(ABC):
    """Abstract provider of weather observations for a location."""

    name: str = "unknown"

    @abstractmethod
    def get_observation(self, location: Location) -> Optional[Observation]:
        """
        Retrieve the latest observation for a location.

        Args:
            location: Location to observe

        Returns:
            Observation built from a single provider response, or None when
            the provider is unavailable or returned unusable data
        """
        pass
