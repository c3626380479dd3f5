"""Presentation sink interface."""

from abc import ABC, abstractmethod
from typing import List
from ..entities.location_snapshot import LocationSnapshot


class PresentationSink(ABC):
    """Abstract destination for scored locations."""

    @abstractmethod
    def publish(self, snapshot: LocationSnapshot) -> None:
        """
        Record or display a single scored location.

        Args:
            snapshot: Latest snapshot for the location
        """
        pass

    def flush(self, snapshots: List[LocationSnapshot]) -> None:
        """
        Called once after a full refresh with every current snapshot.

        Args:
            snapshots: All snapshots currently held by the store
        """
        pass
