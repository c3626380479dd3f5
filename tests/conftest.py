"""Shared pytest fixtures."""

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest
import requests

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from water_stress.domain.entities.location import Location
from water_stress.domain.entities.observation import Observation
from water_stress.domain.repositories.observation_source import ObservationSource


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, payload=None, status_code=200, json_error=False):
        self.payload = payload
        self.status_code = status_code
        self.json_error = json_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self.json_error:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload


class StubSession:
    """Records GET calls and replays a canned response or raises an error."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


class FakeSource(ObservationSource):
    """Observation source returning canned observations per location name."""

    name = "fake"

    def __init__(self, observations=None):
        self.observations = dict(observations or {})
        self.requested = []

    def get_observation(self, location):
        self.requested.append(location.name)
        return self.observations.get(location.name)


FIXED_TIME = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def chennai():
    return Location(name="Chennai", latitude=13.0827, longitude=80.2707, country="IN", population_millions=11.0)


@pytest.fixture
def singapore():
    return Location(name="Singapore", latitude=1.3521, longitude=103.8198, country="SG", population_millions=5.7)


@pytest.fixture
def dubai():
    return Location(name="Dubai", latitude=25.2048, longitude=55.2708, country="AE", population_millions=3.3)


@pytest.fixture
def hot_dry_observation():
    return Observation(
        precipitation_mm_per_day=0.0,
        temperature_celsius=40.0,
        relative_humidity_percent=10.0,
        source="fake",
        observed_at=FIXED_TIME,
    )


@pytest.fixture
def mild_wet_observation():
    return Observation(
        precipitation_mm_per_day=50.0,
        temperature_celsius=20.0,
        relative_humidity_percent=70.0,
        source="fake",
        observed_at=FIXED_TIME,
    )
