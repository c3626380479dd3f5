"""Water level reading entity."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class WaterLevelReading:
    """Latest instantaneous value reported by a river gauge."""

    site_id: str
    site_name: str
    parameter_code: str  # '00065' gauge height, '00060' discharge
    value: float
    unit: str  # e.g. 'ft', 'ft3/s'
    timestamp: str  # ISO 8601 as reported by the provider
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    def __str__(self) -> str:
        return f"{self.site_name}: {self.value} {self.unit}"
