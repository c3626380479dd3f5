"""Tests for PeriodicRefresher."""

import threading
import time

import pytest

from water_stress.application.services.refresh_scheduler import PeriodicRefresher


def wait_for(condition, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if condition():
            return True
        time.sleep(0.01)
    return False


def test_runs_repeatedly_until_stopped():
    calls = []
    refresher = PeriodicRefresher(lambda: calls.append(1), interval_seconds=0.05)

    refresher.start()
    assert wait_for(lambda: len(calls) >= 3)
    refresher.stop()

    assert not refresher.is_running
    count = len(calls)
    time.sleep(0.05)
    assert len(calls) == count
    assert refresher.run_count == count


def test_stop_cancels_long_interval_promptly():
    ran = threading.Event()
    refresher = PeriodicRefresher(ran.set, interval_seconds=3600)

    refresher.start()
    assert ran.wait(1)
    started = time.monotonic()
    refresher.stop()

    assert time.monotonic() - started < 1
    assert refresher.run_count == 1


def test_delayed_first_run():
    calls = []
    refresher = PeriodicRefresher(lambda: calls.append(1), interval_seconds=3600, run_immediately=False)

    refresher.start()
    time.sleep(0.05)
    refresher.stop()

    assert calls == []


def test_task_errors_are_logged_and_loop_continues():
    attempts = []

    def flaky():
        attempts.append(1)
        if len(attempts) == 1:
            raise RuntimeError("provider down")

    refresher = PeriodicRefresher(flaky, interval_seconds=0.05)
    with refresher:
        assert wait_for(lambda: len(attempts) >= 2)

    assert refresher.error_count >= 1
    assert not refresher.is_running


def test_cannot_start_twice():
    refresher = PeriodicRefresher(lambda: None, interval_seconds=3600)
    refresher.start()
    try:
        with pytest.raises(RuntimeError):
            refresher.start()
    finally:
        refresher.stop()


def test_interval_must_be_positive():
    with pytest.raises(ValueError):
        PeriodicRefresher(lambda: None, interval_seconds=0)


def test_restart_after_stop():
    calls = []
    refresher = PeriodicRefresher(lambda: calls.append(1), interval_seconds=3600)

    refresher.start()
    assert wait_for(lambda: len(calls) == 1)
    refresher.stop()
    refresher.stop()

    refresher.start()
    assert wait_for(lambda: len(calls) == 2)
    refresher.stop()
    assert not refresher.is_running
