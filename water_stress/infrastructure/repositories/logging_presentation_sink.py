"""Presentation sink that writes assessments to the log."""

import logging
from ...domain.entities.location_snapshot import LocationSnapshot
from ...domain.repositories.presentation_sink import PresentationSink

logger = logging.getLogger(__name__)


class LoggingPresentationSink(PresentationSink):
    """Logs one line per scored location."""

    def __init__(self, level: int = logging.INFO):
        self.level = level

    def publish(self, snapshot: LocationSnapshot) -> None:
        obs = snapshot.observation
        logger.log(
            self.level,
            f"{snapshot.name}: stress {snapshot.assessment.index:.1f} "
            f"({snapshot.assessment.severity_level.value}) | "
            f"precip={obs.precipitation_mm_per_day} mm/day, "
            f"temp={obs.temperature_celsius} C, "
            f"humidity={obs.relative_humidity_percent}% [{obs.source}]",
        )
