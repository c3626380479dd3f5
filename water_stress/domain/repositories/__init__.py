"""Repository interfaces."""

from .observation_source import ObservationSource
from .presentation_sink import PresentationSink
from .reading_store import ReadingStore
from .water_level_repository import WaterLevelRepository
from .satellite_repository import SatelliteRepository

__all__ = [
    "ObservationSource",
    "PresentationSink",
    "ReadingStore",
    "WaterLevelRepository",
    "SatelliteRepository",
]
