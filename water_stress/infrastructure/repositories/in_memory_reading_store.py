"""In-memory reading store implementation."""

import threading
from collections import OrderedDict
from typing import List, Optional
from ...domain.entities.location_snapshot import LocationSnapshot
from ...domain.repositories.reading_store import ReadingStore


class InMemoryReadingStore(ReadingStore):
    """Thread-safe store of the latest snapshot per location name."""

    def __init__(self):
        self._snapshots: "OrderedDict[str, LocationSnapshot]" = OrderedDict()
        self._lock = threading.Lock()

    def save(self, snapshot: LocationSnapshot) -> None:
        with self._lock:
            self._snapshots[snapshot.name] = snapshot

    def get(self, name: str) -> Optional[LocationSnapshot]:
        with self._lock:
            return self._snapshots.get(name)

    def all(self) -> List[LocationSnapshot]:
        with self._lock:
            return list(self._snapshots.values())

    def remove(self, name: str) -> None:
        with self._lock:
            self._snapshots.pop(name, None)

    def clear(self) -> None:
        with self._lock:
            self._snapshots.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._snapshots)
