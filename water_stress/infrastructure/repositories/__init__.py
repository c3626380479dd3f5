"""Concrete repository implementations."""

from .nasa_power_observation_source import NASAPowerObservationSource
from .open_meteo_observation_source import OpenMeteoObservationSource
from .fallback_observation_source import FallbackObservationSource
from .usgs_water_level_repository import USGSWaterLevelRepository
from .nasa_power_satellite_repository import NASAPowerSatelliteRepository
from .in_memory_reading_store import InMemoryReadingStore
from .logging_presentation_sink import LoggingPresentationSink
from .file_snapshot_sink import FileSnapshotSink

__all__ = [
    "NASAPowerObservationSource",
    "OpenMeteoObservationSource",
    "FallbackObservationSource",
    "USGSWaterLevelRepository",
    "NASAPowerSatelliteRepository",
    "InMemoryReadingStore",
    "LoggingPresentationSink",
    "FileSnapshotSink",
]
