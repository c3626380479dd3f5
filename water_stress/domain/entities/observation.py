"""Observation entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Observation:
    """
    Averaged weather readings for one location from a single data provider.

    A value of ``None`` means the provider did not supply the field, which is
    not the same thing as a measured zero.
    """

    precipitation_mm_per_day: Optional[float] = None
    temperature_celsius: Optional[float] = None
    relative_humidity_percent: Optional[float] = None
    source: str = "unknown"
    observed_at: datetime = field(default_factory=_utcnow)

    @property
    def is_complete(self) -> bool:
        """True when every field needed for scoring is present."""
        return None not in (
            self.precipitation_mm_per_day,
            self.temperature_celsius,
            self.relative_humidity_percent,
        )

    @property
    def missing_fields(self) -> List[str]:
        names = {
            "precipitation_mm_per_day": self.precipitation_mm_per_day,
            "temperature_celsius": self.temperature_celsius,
            "relative_humidity_percent": self.relative_humidity_percent,
        }
        return [name for name, value in names.items() if value is None]
