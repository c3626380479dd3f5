"""Stress assessment entity."""

from dataclasses import dataclass
from typing import Any, Dict
from .severity_level import SeverityLevel


@dataclass(frozen=True)
class StressAssessment:
    """Result of scoring one observation."""

    index: float  # 0..100
    severity_level: SeverityLevel
    aridity: float = 0.0  # contribution, max 40
    per_capita: float = 0.0  # contribution, max 30
    temperature: float = 0.0  # contribution, max 20
    humidity: float = 0.0  # contribution, max 10

    @property
    def severity_color(self) -> str:
        return self.severity_level.color

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": round(self.index, 1),
            "severity": self.severity_level.value,
            "severity_color": self.severity_color,
            "components": {
                "aridity": self.aridity,
                "per_capita": self.per_capita,
                "temperature": round(self.temperature, 2),
                "humidity": round(self.humidity, 2),
            },
        }

    def __str__(self) -> str:
        return f"{self.index:.1f} ({self.severity_level.value})"
