"""Location entity."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Location:
    """Represents a monitored geographic point."""

    name: str
    latitude: float
    longitude: float
    country: Optional[str] = None  # ISO 3166-1 alpha-2
    population_millions: Optional[float] = None

    @classmethod
    def from_dict(cls, definition: Dict[str, Any]) -> "Location":
        """Create Location from dictionary definition."""
        return cls(
            name=definition["name"],
            latitude=float(definition["latitude"]),
            longitude=float(definition["longitude"]),
            country=definition.get("country"),
            population_millions=definition.get("population_millions"),
        )

    @property
    def coordinates(self) -> Tuple[float, float]:
        return (self.latitude, self.longitude)

    def __str__(self) -> str:
        return self.name
