"""Severity level enumeration."""

from enum import Enum


class SeverityLevel(str, Enum):
    """Discretization of the water stress index, ordered from least to most severe."""

    LOW = "low"
    MODERATE = "moderate"
    WARNING = "warning"
    SEVERE = "severe"
    CRITICAL = "critical"

    @classmethod
    def from_index(cls, index: float) -> "SeverityLevel":
        """Map a stress index to its level. Lower bounds are inclusive."""
        if index >= 80:
            return cls.CRITICAL
        if index >= 60:
            return cls.SEVERE
        if index >= 40:
            return cls.WARNING
        if index >= 20:
            return cls.MODERATE
        return cls.LOW

    @property
    def rank(self) -> int:
        return list(SeverityLevel).index(self)

    @property
    def color(self) -> str:
        """Display color hint."""
        mapping = {
            SeverityLevel.CRITICAL: "#ff0040",
            SeverityLevel.SEVERE: "#ff6b35",
            SeverityLevel.WARNING: "#ffa500",
            SeverityLevel.MODERATE: "#ffdd00",
            SeverityLevel.LOW: "#00d084",
        }
        return mapping[self]

    @property
    def ticker_status(self) -> str:
        """Status class used for the ticker dot."""
        if self is SeverityLevel.CRITICAL:
            return "critical"
        if self is SeverityLevel.SEVERE:
            return "warning"
        return "normal"
