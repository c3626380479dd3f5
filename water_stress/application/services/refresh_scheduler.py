"""Background job that re-runs a refresh on a fixed interval."""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

logger = logging.getLogger(__name__)


class PeriodicRefresher:
    """
    Runs ``task`` every ``interval_seconds`` on an APScheduler background scheduler.

    ``stop()`` shuts the scheduler down so no further runs are started; a
    task already running is allowed to finish when ``wait`` is true.
    """

    def __init__(
        self,
        task: Callable[[], Any],
        interval_seconds: float = 300.0,
        run_immediately: bool = True,
        name: str = "water-stress-refresher",
    ):
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self.task = task
        self.interval_seconds = interval_seconds
        self.run_immediately = run_immediately
        self.name = name

        self.run_count = 0
        self.error_count = 0
        self._scheduler: Optional[BackgroundScheduler] = None

    @property
    def is_running(self) -> bool:
        return self._scheduler is not None and self._scheduler.running

    def start(self) -> None:
        if self.is_running:
            raise RuntimeError("Refresher already running")

        job_options: Dict[str, Any] = {}
        if self.run_immediately:
            job_options["next_run_time"] = datetime.now(timezone.utc)

        scheduler = BackgroundScheduler(daemon=True)
        scheduler.add_job(
            self._run_task,
            trigger=IntervalTrigger(seconds=self.interval_seconds),
            id=self.name,
            name=self.name,
            max_instances=1,
            coalesce=True,
            replace_existing=True,
            **job_options,
        )
        scheduler.start()
        self._scheduler = scheduler
        logger.info(f"Started {self.name} (every {self.interval_seconds}s)")

    def stop(self, wait: bool = True) -> None:
        """Cancel future runs, optionally waiting for a running task."""
        if self._scheduler is not None:
            if self._scheduler.running:
                self._scheduler.shutdown(wait=wait)
            self._scheduler = None
        logger.info(f"Stopped {self.name} after {self.run_count} runs")

    def _run_task(self) -> None:
        try:
            self.task()
        except Exception as e:
            self.error_count += 1
            logger.error(f"Scheduled refresh failed: {e}", exc_info=True)
        finally:
            self.run_count += 1

    def __enter__(self) -> "PeriodicRefresher":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()
