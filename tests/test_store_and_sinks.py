"""Tests for the reading store and presentation sinks."""

import logging
import threading

import pandas as pd
import pytest

from conftest import FIXED_TIME
from water_stress.domain.entities.location_snapshot import LocationSnapshot
from water_stress.domain.use_cases.compute_water_stress import compute_stress
from water_stress.infrastructure.repositories.in_memory_reading_store import InMemoryReadingStore
from water_stress.infrastructure.repositories.logging_presentation_sink import LoggingPresentationSink
from water_stress.infrastructure.repositories.file_snapshot_sink import FileSnapshotSink


@pytest.fixture
def snapshots(chennai, singapore, hot_dry_observation, mild_wet_observation):
    return [
        LocationSnapshot(singapore, mild_wet_observation, compute_stress(50, 20, 70, 5.7), FIXED_TIME),
        LocationSnapshot(chennai, hot_dry_observation, compute_stress(0, 40, 10, 11.0), FIXED_TIME),
    ]


def test_store_keeps_latest_per_location(snapshots, chennai, mild_wet_observation):
    store = InMemoryReadingStore()
    for s in snapshots:
        store.save(s)

    replacement = LocationSnapshot(chennai, mild_wet_observation, compute_stress(50, 20, 70, 11.0), FIXED_TIME)
    store.save(replacement)

    assert len(store) == 2
    assert store.get("Chennai") is replacement
    assert [s.name for s in store.all()] == ["Singapore", "Chennai"]


def test_store_remove_and_clear(snapshots):
    store = InMemoryReadingStore()
    for s in snapshots:
        store.save(s)

    store.remove("Singapore")
    store.remove("Atlantis")
    assert store.get("Singapore") is None
    assert len(store) == 1

    store.clear()
    assert store.all() == []


def test_store_concurrent_saves(chennai, hot_dry_observation):
    store = InMemoryReadingStore()
    assessment = compute_stress(0, 40, 10, 11.0)

    def writer():
        for _ in range(200):
            store.save(LocationSnapshot(chennai, hot_dry_observation, assessment, FIXED_TIME))

    threads = [threading.Thread(target=writer) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(store) == 1


def test_logging_sink(snapshots, caplog):
    sink = LoggingPresentationSink()
    with caplog.at_level(logging.INFO):
        sink.publish(snapshots[1])

    assert "Chennai: stress 95.0 (critical)" in caplog.text


def test_file_sink_writes_csv_sorted_by_stress(snapshots, tmp_path):
    output = tmp_path / "exports" / "latest.csv"
    sink = FileSnapshotSink(str(output))

    sink.publish(snapshots[0])
    assert not output.exists()

    sink.flush(snapshots)

    df = pd.read_csv(output)
    assert list(df["name"]) == ["Chennai", "Singapore"]
    assert df.loc[0, "severity"] == "critical"
    assert df.loc[0, "water_stress"] == 95.0


def test_file_sink_writes_xlsx(snapshots, tmp_path):
    output = tmp_path / "latest.xlsx"
    FileSnapshotSink(str(output)).flush(snapshots)

    df = pd.read_excel(output, engine="openpyxl")
    assert len(df) == 2


def test_file_sink_rejects_unknown_format(tmp_path):
    with pytest.raises(ValueError):
        FileSnapshotSink(str(tmp_path / "latest.json"))
