"""Domain entities."""

from .location import Location
from .observation import Observation
from .severity_level import SeverityLevel
from .missing_data_policy import MissingDataPolicy
from .stress_assessment import StressAssessment
from .location_snapshot import LocationSnapshot
from .water_level_reading import WaterLevelReading
from .satellite_reading import SatelliteReading

__all__ = [
    "Location",
    "Observation",
    "SeverityLevel",
    "MissingDataPolicy",
    "StressAssessment",
    "LocationSnapshot",
    "WaterLevelReading",
    "SatelliteReading",
]
