"""Location snapshot entity."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict
from .location import Location
from .observation import Observation
from .stress_assessment import StressAssessment


@dataclass(frozen=True)
class LocationSnapshot:
    """Latest observation and assessment recorded for a location."""

    location: Location
    observation: Observation
    assessment: StressAssessment
    updated_at: datetime

    @property
    def name(self) -> str:
        return self.location.name

    def to_dict(self) -> Dict[str, Any]:
        """Flatten into a single record for export and API responses."""
        obs = self.observation
        return {
            "name": self.location.name,
            "country": self.location.country,
            "latitude": self.location.latitude,
            "longitude": self.location.longitude,
            "population_millions": self.location.population_millions,
            "precipitation_mm_per_day": obs.precipitation_mm_per_day,
            "temperature_celsius": obs.temperature_celsius,
            "relative_humidity_percent": obs.relative_humidity_percent,
            "source": obs.source,
            "water_stress": round(self.assessment.index, 1),
            "severity": self.assessment.severity_level.value,
            "severity_color": self.assessment.severity_color,
            "updated_at": self.updated_at.isoformat(),
        }
