"""Reading store interface."""

from abc import ABC, abstractmethod
from typing import List, Optional
from ..entities.location_snapshot import LocationSnapshot


class ReadingStore(ABC):
    """Abstract store holding the latest snapshot per location."""

    @abstractmethod
    def save(self, snapshot: LocationSnapshot) -> None:
        """
        Save a snapshot, replacing any previous one for the same location.

        Args:
            snapshot: Snapshot to store
        """
        pass

    @abstractmethod
    def get(self, name: str) -> Optional[LocationSnapshot]:
        """
        Get the latest snapshot for a location.

        Args:
            name: Location name

        Returns:
            The snapshot, or None if the location has never been scored
        """
        pass

    @abstractmethod
    def all(self) -> List[LocationSnapshot]:
        """Return every stored snapshot in insertion order."""
        pass

    @abstractmethod
    def remove(self, name: str) -> None:
        """Drop the snapshot for a location if present."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Drop every snapshot."""
        pass

    def __len__(self) -> int:
        return len(self.all())
