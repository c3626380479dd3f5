"""Tests for the command-line interface."""

import pytest

from conftest import FIXED_TIME, FakeSource
from water_stress.application.services.water_monitoring_service import WaterMonitoringService
from water_stress.infrastructure.repositories.in_memory_reading_store import InMemoryReadingStore
from water_stress.presentation.cli import main as cli


def test_score_command(capsys):
    exit_code = cli.main(
        ["score", "--precipitation", "0", "--temperature", "40", "--humidity", "10", "--population", "10"]
    )

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Water stress index: 95.0 (critical)" in out
    assert "Aridity:      40.0 / 40" in out


def test_locations_command(capsys):
    assert cli.main(["locations"]) == 0

    out = capsys.readouterr().out
    assert "Chennai" in out
    assert "Cape Town" in out
    assert len(out.strip().splitlines()) == 20


def test_refresh_command_prints_table(monkeypatch, capsys, chennai, singapore, hot_dry_observation):
    captured = {}

    def fake_build(missing_data_policy=None, export_file=None, request_delay=None):
        captured.update(policy=missing_data_policy, export=export_file, delay=request_delay)
        return WaterMonitoringService(
            locations=[chennai, singapore],
            source=FakeSource({"Chennai": hot_dry_observation}),
            store=InMemoryReadingStore(),
            request_delay=0,
            clock=lambda: FIXED_TIME,
        )

    monkeypatch.setattr(cli, "build_monitoring_service", fake_build)

    assert cli.main(["refresh", "--missing-data", "skip", "--delay", "0"]) == 0

    out = capsys.readouterr().out
    assert captured == {"policy": "skip", "export": None, "delay": 0.0}
    assert "Chennai" in out
    assert "Critical zones: 1" in out
    assert "Unavailable: Singapore" in out


def test_unknown_station_rejected():
    with pytest.raises(SystemExit):
        cli.main(["water-levels", "--station", "nile"])


def test_reference_locations_listing(capsys):
    assert cli.main(["locations", "--reference"]) == 0

    out = capsys.readouterr().out
    assert "Lake Chad Basin" in out
    assert len(out.strip().splitlines()) == 5


def test_reference_command(monkeypatch, capsys, chennai, hot_dry_observation):
    from conftest import FakeResponse, StubSession
    from test_satellite_repository import soil_payload
    from water_stress.domain.entities.location import Location
    from water_stress.infrastructure.repositories.nasa_power_satellite_repository import (
        NASAPowerSatelliteRepository,
    )

    def fake_build(missing_data_policy=None, export_file=None, request_delay=None):
        return WaterMonitoringService(
            locations=[chennai],
            source=FakeSource({"Chennai": hot_dry_observation}),
            store=InMemoryReadingStore(),
            satellite_repo=NASAPowerSatelliteRepository(session=StubSession(FakeResponse(soil_payload()))),
            reference_locations=[Location(name="Niger", latitude=17.607789, longitude=8.081666)],
        )

    monkeypatch.setattr(cli, "build_monitoring_service", fake_build)

    assert cli.main(["reference", "--name", "Niger"]) == 0

    out = capsys.readouterr().out
    assert "Niger" in out
    assert "26%" in out
