"""Tests for USGSWaterLevelRepository and CollectWaterLevelsUseCase."""

import pytest
import requests

from conftest import FakeResponse, StubSession
from water_stress.domain.use_cases.collect_water_levels import CollectWaterLevelsUseCase
from water_stress.infrastructure.repositories.usgs_water_level_repository import USGSWaterLevelRepository


def usgs_series(site_id, name, param, unit, values):
    return {
        "sourceInfo": {
            "siteName": name,
            "siteCode": [{"value": site_id}],
            "geoLocation": {"geogLocation": {"latitude": 35.0889, "longitude": -106.6806}},
        },
        "variable": {"variableCode": [{"value": param}], "unit": {"unitCode": unit}},
        "values": [{"value": values}],
    }


def sample_payload():
    return {
        "value": {
            "timeSeries": [
                usgs_series(
                    "08330000",
                    "RIO GRANDE AT ALBUQUERQUE, NM",
                    "00065",
                    "ft",
                    [
                        {"value": "3.10", "dateTime": "2025-06-01T09:45:00.000-06:00"},
                        {"value": "3.12", "dateTime": "2025-06-01T10:00:00.000-06:00"},
                    ],
                ),
                usgs_series(
                    "08330000",
                    "RIO GRANDE AT ALBUQUERQUE, NM",
                    "00060",
                    "ft3/s",
                    [{"value": "-999999", "dateTime": "2025-06-01T10:00:00.000-06:00"}],
                ),
                usgs_series("09380000", "COLORADO RIVER AT LEES FERRY, AZ", "00060", "ft3/s", []),
            ]
        }
    }


def test_latest_reading_per_series():
    session = StubSession(FakeResponse(sample_payload()))
    repo = USGSWaterLevelRepository(session=session)

    readings = repo.get_latest_readings(["08330000", "09380000"])

    assert len(readings) == 1
    reading = readings[0]
    assert reading.site_id == "08330000"
    assert reading.parameter_code == "00065"
    assert reading.value == 3.12
    assert reading.unit == "ft"
    assert reading.timestamp == "2025-06-01T10:00:00.000-06:00"
    assert reading.latitude == 35.0889

    params = session.calls[0]["params"]
    assert params["sites"] == "08330000,09380000"
    assert params["parameterCd"] == "00065,00060"
    assert params["format"] == "json"


def test_malformed_series_is_skipped():
    payload = sample_payload()
    payload["value"]["timeSeries"].append({"sourceInfo": {}})
    repo = USGSWaterLevelRepository(session=StubSession(FakeResponse(payload)))

    assert len(repo.get_latest_readings(["08330000"])) == 1


@pytest.mark.parametrize(
    "session",
    [
        StubSession(error=requests.ConnectionError("unreachable")),
        StubSession(FakeResponse(status_code=500)),
        StubSession(FakeResponse({"unexpected": True})),
    ],
)
def test_failures_return_empty_list(session):
    assert USGSWaterLevelRepository(session=session).get_latest_readings(["08330000"]) == []


def test_no_sites_makes_no_request():
    session = StubSession(FakeResponse(sample_payload()))
    assert USGSWaterLevelRepository(session=session).get_latest_readings([]) == []
    assert session.calls == []


def test_collect_water_levels_use_case_resolves_station_keys():
    session = StubSession(FakeResponse(sample_payload()))
    use_case = CollectWaterLevelsUseCase(
        USGSWaterLevelRepository(session=session),
        {"rio_grande": "08330000", "colorado_river": "09380000"},
    )

    readings = use_case.execute(["rio_grande"])

    assert [r.site_id for r in readings] == ["08330000"]
    assert session.calls[0]["params"]["sites"] == "08330000"


def test_collect_water_levels_unknown_station():
    use_case = CollectWaterLevelsUseCase(USGSWaterLevelRepository(session=StubSession()), {"rio_grande": "08330000"})
    with pytest.raises(ValueError):
        use_case.execute(["nile"])
