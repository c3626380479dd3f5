"""Tests for domain entities."""

import pytest
from dataclasses import FrozenInstanceError
from datetime import datetime, timezone
from water_stress.domain.entities.location import Location
from water_stress.domain.entities.observation import Observation
from water_stress.domain.entities.severity_level import SeverityLevel
from water_stress.domain.entities.missing_data_policy import MissingDataPolicy
from water_stress.domain.entities.stress_assessment import StressAssessment
from water_stress.domain.entities.location_snapshot import LocationSnapshot
from water_stress.domain.entities.water_level_reading import WaterLevelReading


def test_location():
    """Test Location entity."""
    location = Location.from_dict(
        {"name": "Cape Town", "latitude": -33.9249, "longitude": 18.4241, "country": "ZA", "population_millions": 4.6}
    )
    assert location.name == "Cape Town"
    assert location.coordinates == (-33.9249, 18.4241)
    assert str(location) == "Cape Town"


def test_location_without_population():
    location = Location.from_dict({"name": "Niger", "latitude": 17.607789, "longitude": 8.081666})
    assert location.population_millions is None
    assert location.country is None


def test_observation_is_immutable():
    obs = Observation(precipitation_mm_per_day=1.0, temperature_celsius=20.0, relative_humidity_percent=50.0)
    with pytest.raises(FrozenInstanceError):
        obs.temperature_celsius = 30.0


def test_observation_missing_fields():
    """Zero is a value, None is missing."""
    obs = Observation(precipitation_mm_per_day=0.0, temperature_celsius=25.0, relative_humidity_percent=None)
    assert not obs.is_complete
    assert obs.missing_fields == ["relative_humidity_percent"]

    complete = Observation(precipitation_mm_per_day=0.0, temperature_celsius=0.0, relative_humidity_percent=0.0)
    assert complete.is_complete
    assert complete.missing_fields == []


def test_severity_level_ordering():
    levels = list(SeverityLevel)
    assert levels == [
        SeverityLevel.LOW,
        SeverityLevel.MODERATE,
        SeverityLevel.WARNING,
        SeverityLevel.SEVERE,
        SeverityLevel.CRITICAL,
    ]
    assert [level.rank for level in levels] == [0, 1, 2, 3, 4]
    assert SeverityLevel.CRITICAL.value == "critical"


def test_severity_level_display_hints():
    assert SeverityLevel.CRITICAL.color == "#ff0040"
    assert SeverityLevel.LOW.color == "#00d084"
    assert SeverityLevel.CRITICAL.ticker_status == "critical"
    assert SeverityLevel.SEVERE.ticker_status == "warning"
    assert SeverityLevel.WARNING.ticker_status == "normal"


def test_missing_data_policy_from_string():
    assert MissingDataPolicy("skip") is MissingDataPolicy.SKIP
    with pytest.raises(ValueError):
        MissingDataPolicy("guess")


def test_stress_assessment_to_dict():
    assessment = StressAssessment(
        index=95.0,
        severity_level=SeverityLevel.CRITICAL,
        aridity=40.0,
        per_capita=30.0,
        temperature=15.0,
        humidity=10.0,
    )
    data = assessment.to_dict()
    assert data["index"] == 95.0
    assert data["severity"] == "critical"
    assert data["severity_color"] == "#ff0040"
    assert data["components"]["aridity"] == 40.0
    assert str(assessment) == "95.0 (critical)"


def test_location_snapshot_to_dict(chennai, hot_dry_observation):
    assessment = StressAssessment(index=95.04, severity_level=SeverityLevel.CRITICAL)
    updated_at = datetime(2025, 6, 1, tzinfo=timezone.utc)
    snapshot = LocationSnapshot(chennai, hot_dry_observation, assessment, updated_at)

    record = snapshot.to_dict()
    assert snapshot.name == "Chennai"
    assert record["water_stress"] == 95.0
    assert record["severity"] == "critical"
    assert record["temperature_celsius"] == 40.0
    assert record["updated_at"] == "2025-06-01T00:00:00+00:00"


def test_water_level_reading():
    reading = WaterLevelReading(
        site_id="08330000",
        site_name="RIO GRANDE AT ALBUQUERQUE, NM",
        parameter_code="00065",
        value=3.12,
        unit="ft",
        timestamp="2025-06-01T10:00:00.000-06:00",
    )
    assert str(reading) == "RIO GRANDE AT ALBUQUERQUE, NM: 3.12 ft"
