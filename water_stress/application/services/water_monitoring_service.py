"""Main service orchestrating observation collection, scoring and publishing."""

import logging
import threading
import time
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from ...domain.entities.location import Location
from ...domain.entities.location_snapshot import LocationSnapshot
from ...domain.entities.missing_data_policy import MissingDataPolicy
from ...domain.entities.severity_level import SeverityLevel
from ...domain.entities.stress_assessment import StressAssessment
from ...domain.entities.water_level_reading import WaterLevelReading
from ...domain.entities.satellite_reading import SatelliteReading
from ...domain.repositories.observation_source import ObservationSource
from ...domain.repositories.presentation_sink import PresentationSink
from ...domain.repositories.reading_store import ReadingStore
from ...domain.repositories.water_level_repository import WaterLevelRepository
from ...domain.repositories.satellite_repository import SatelliteRepository

# Use cases
from ...domain.use_cases.collect_observation import CollectObservationUseCase
from ...domain.use_cases.compute_water_stress import ComputeWaterStressUseCase, compute_stress
from ...domain.use_cases.collect_water_levels import CollectWaterLevelsUseCase
from ...domain.use_cases.collect_satellite_readings import CollectSatelliteReadingsUseCase

logger = logging.getLogger(__name__)

# Refresh outcomes
UPDATED = "updated"
UNAVAILABLE = "unavailable"
SKIPPED = "skipped"


@dataclass
class RefreshReport:
    """Outcome of one pass over all monitored locations."""

    updated: List[str] = field(default_factory=list)
    unavailable: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "updated": len(self.updated),
            "unavailable": self.unavailable,
            "skipped": self.skipped,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "finished_at": self.finished_at.isoformat() if self.finished_at else None,
        }


class WaterMonitoringService:
    """Polls observation sources for each location and keeps the latest assessments."""

    def __init__(
        self,
        locations: Sequence[Location],
        source: ObservationSource,
        store: ReadingStore,
        sinks: Optional[List[PresentationSink]] = None,
        water_level_repo: Optional[WaterLevelRepository] = None,
        stations: Optional[Dict[str, str]] = None,
        satellite_repo: Optional[SatelliteRepository] = None,
        reference_locations: Optional[Sequence[Location]] = None,
        missing_data_policy: MissingDataPolicy = MissingDataPolicy.ZERO,
        request_delay: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        names = [loc.name for loc in locations]
        duplicates = [name for name, count in Counter(names).items() if count > 1]
        if duplicates:
            raise ValueError(f"Duplicate location names: {', '.join(duplicates)}")

        self.locations = {loc.name: loc for loc in locations}
        self.store = store
        self.sinks = list(sinks or [])
        self.request_delay = request_delay
        self.sleep = sleep
        self.clock = clock

        self.collect_uc = CollectObservationUseCase(source)
        self.scoring_uc = ComputeWaterStressUseCase(missing_data_policy)
        self.water_levels_uc = (
            CollectWaterLevelsUseCase(water_level_repo, stations or {})
            if water_level_repo is not None
            else None
        )
        self.satellite_uc = (
            CollectSatelliteReadingsUseCase(satellite_repo, reference_locations or [])
            if satellite_repo is not None
            else None
        )

        # Runtime state
        self.last_update: Optional[datetime] = None
        self._ticker_index = 0
        self._refresh_lock = threading.Lock()
        self._ticker_lock = threading.Lock()

    def get_location(self, name: str) -> Location:
        if name not in self.locations:
            raise KeyError(f"Unknown location: {name}")
        return self.locations[name]

    def _refresh(self, location: Location) -> Tuple[str, Optional[LocationSnapshot]]:
        observation = self.collect_uc.execute(location)
        if observation is None:
            return UNAVAILABLE, None

        assessment = self.scoring_uc.execute(location, observation)
        if assessment is None:
            return SKIPPED, None

        snapshot = LocationSnapshot(
            location=location,
            observation=observation,
            assessment=assessment,
            updated_at=self.clock(),
        )
        self.store.save(snapshot)
        self._publish(snapshot)
        return UPDATED, snapshot

    def refresh_location(self, location: Location) -> Optional[LocationSnapshot]:
        """Fetch, score, store and publish one location."""
        _, snapshot = self._refresh(location)
        return snapshot

    def refresh_all(self) -> RefreshReport:
        """Refresh every location sequentially, pausing between requests."""
        with self._refresh_lock:
            logger.info(f"=== Fetching water data for {len(self.locations)} locations ===")
            report = RefreshReport(started_at=self.clock())
            outcomes = {
                UPDATED: report.updated,
                UNAVAILABLE: report.unavailable,
                SKIPPED: report.skipped,
            }

            for i, location in enumerate(self.locations.values()):
                if i > 0 and self.request_delay > 0:
                    # Avoid provider rate limits
                    self.sleep(self.request_delay)

                try:
                    outcome, _ = self._refresh(location)
                except Exception as e:
                    logger.error(f"Refresh failed for {location.name}: {e}", exc_info=True)
                    outcome = UNAVAILABLE
                outcomes[outcome].append(location.name)

            self.last_update = report.finished_at = self.clock()

            snapshots = self.store.all()
            for sink in self.sinks:
                try:
                    sink.flush(snapshots)
                except Exception as e:
                    logger.error(f"Sink {type(sink).__name__} flush failed: {e}", exc_info=True)

            logger.info(
                f"Updated {len(report.updated)} locations at {self.last_update.isoformat()} "
                f"({len(report.unavailable)} unavailable, {len(report.skipped)} skipped)"
            )
            return report

    def _publish(self, snapshot: LocationSnapshot) -> None:
        for sink in self.sinks:
            try:
                sink.publish(snapshot)
            except Exception as e:
                logger.error(f"Sink {type(sink).__name__} failed for {snapshot.name}: {e}", exc_info=True)

    def snapshots(self) -> List[LocationSnapshot]:
        return self.store.all()

    def get_snapshot(self, name: str) -> LocationSnapshot:
        """Latest snapshot for a location; KeyError if unknown or never scored."""
        self.get_location(name)
        snapshot = self.store.get(name)
        if snapshot is None:
            raise KeyError(f"No assessment yet for {name}")
        return snapshot

    def score(
        self,
        precipitation: float,
        temperature: float,
        humidity: float,
        population_millions: float,
    ) -> StressAssessment:
        """Score readings directly, without touching any data source."""
        return compute_stress(precipitation, temperature, humidity, population_millions)

    def water_levels(self, station_keys: Optional[List[str]] = None) -> List[WaterLevelReading]:
        """Latest river gauge readings for the configured stations."""
        if self.water_levels_uc is None:
            raise RuntimeError("No water level repository configured")
        return self.water_levels_uc.execute(station_keys)

    def reference_readings(self, names: Optional[List[str]] = None) -> List[SatelliteReading]:
        """Latest soil moisture and evapotranspiration at the reference points."""
        if self.satellite_uc is None:
            raise RuntimeError("No satellite repository configured")
        return self.satellite_uc.execute(names)

    def summary(self) -> Dict[str, Any]:
        """Headline statistics over the stored snapshots."""
        snapshots = self.store.all()
        counts = Counter(s.assessment.severity_level for s in snapshots)
        return {
            "total_monitored": len(snapshots),
            "critical_zones": counts[SeverityLevel.CRITICAL] + counts[SeverityLevel.SEVERE],
            "by_severity": {level.value: counts[level] for level in SeverityLevel},
            "last_update": self.last_update.isoformat() if self.last_update else None,
        }

    def top_stressed(self, limit: int = 8) -> List[Dict[str, Any]]:
        """Cards for the most stressed locations, highest index first."""
        snapshots = sorted(
            self.store.all(), key=lambda s: s.assessment.index, reverse=True
        )
        return [s.to_dict() for s in snapshots[:limit]]

    def next_ticker_line(self) -> Optional[Dict[str, str]]:
        """Rotate to the next stored location and format its ticker text."""
        snapshots = self.store.all()
        if not snapshots:
            return None

        with self._ticker_lock:
            snapshot = snapshots[self._ticker_index % len(snapshots)]
            self._ticker_index += 1

        obs = snapshot.observation
        text = (
            f"{snapshot.name}: {_fmt(obs.precipitation_mm_per_day)}mm rain, "
            f"{_fmt(obs.temperature_celsius)}°C, {snapshot.assessment.index:.1f}% stress"
        )
        return {
            "text": text,
            "status": snapshot.assessment.severity_level.ticker_status,
            "name": snapshot.name,
        }

    def map_markers(self) -> List[Dict[str, Any]]:
        """Circle markers sized and colored by stress."""
        markers = []
        for snapshot in self.store.all():
            index = snapshot.assessment.index
            markers.append(
                {
                    "name": snapshot.name,
                    "latitude": snapshot.location.latitude,
                    "longitude": snapshot.location.longitude,
                    "radius": 8 + index / 10,
                    "color": snapshot.assessment.severity_color,
                    "popup": {
                        "water_stress": round(index, 1),
                        "precipitation_mm_per_day": snapshot.observation.precipitation_mm_per_day,
                        "temperature_celsius": snapshot.observation.temperature_celsius,
                        "severity": snapshot.assessment.severity_level.value,
                        "updated_at": snapshot.updated_at.isoformat(),
                    },
                }
            )
        return markers


def _fmt(value: Optional[float]) -> str:
    return "N/A" if value is None else f"{value:g}"
