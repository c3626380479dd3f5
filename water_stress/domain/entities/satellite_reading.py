"""Satellite reading entity for reference points."""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class SatelliteReading:
    """Latest daily NASA POWER values for a reference point."""

    location_name: str
    latitude: float
    longitude: float
    date: str  # YYYYMMDD as reported by the provider
    precipitation_mm_per_day: Optional[float] = None
    root_zone_soil_wetness: Optional[float] = None  # GWETROOT, 0-1
    profile_soil_wetness: Optional[float] = None  # GWETPROF, 0-1
    evapotranspiration_mm_per_day: Optional[float] = None  # EVPTRNS
    source: str = "NASA POWER"

    @property
    def root_zone_moisture_percent(self) -> Optional[float]:
        if self.root_zone_soil_wetness is None:
            return None
        return round(self.root_zone_soil_wetness * 100, 1)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.location_name,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "date": self.date,
            "precipitation_mm_per_day": self.precipitation_mm_per_day,
            "root_zone_soil_wetness": self.root_zone_soil_wetness,
            "root_zone_moisture_percent": self.root_zone_moisture_percent,
            "profile_soil_wetness": self.profile_soil_wetness,
            "evapotranspiration_mm_per_day": self.evapotranspiration_mm_per_day,
            "source": self.source,
        }

    def __str__(self) -> str:
        moisture = self.root_zone_moisture_percent
        return f"{self.location_name} ({self.date}): soil moisture {'N/A' if moisture is None else f'{moisture}%'}"
