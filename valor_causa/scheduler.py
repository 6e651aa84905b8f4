"""
Periodic dashboard refresh.

RefreshScheduler repeats a callable every `interval` seconds on an
APScheduler background scheduler until stop() is called. The first run
happens one interval after start(); the caller is expected to have done
the initial load itself.
"""

import logging
import threading
from typing import Callable

from apscheduler.events import EVENT_JOB_ERROR, EVENT_JOB_EXECUTED
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from .config import REFRESH_INTERVAL_SECONDS

logger = logging.getLogger(__name__)


class RefreshScheduler:
    """Cancellable repeating task.

    At most one cycle runs at a time; a cycle that outlasts the interval
    delays the next one instead of overlapping it. A cycle that raises is
    logged and the schedule carries on.
    """

    def __init__(
        self,
        cycle: Callable[[], None],
        interval: float = REFRESH_INTERVAL_SECONDS,
        name: str = "dashboard-refresh",
    ):
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.cycle = cycle
        self.interval = interval
        self.name = name
        self.runs = 0
        self.failures = 0
        self._stopped = threading.Event()
        self._scheduler: BackgroundScheduler | None = None

    @property
    def running(self) -> bool:
        return self._scheduler is not None and self._scheduler.running

    def start(self) -> "RefreshScheduler":
        if self.running:
            raise RuntimeError(f"{self.name} is already running")

        self._stopped.clear()
        self._scheduler = BackgroundScheduler()
        self._scheduler.add_listener(self._job_listener, EVENT_JOB_EXECUTED | EVENT_JOB_ERROR)
        self._scheduler.add_job(
            func=self.cycle,
            trigger=IntervalTrigger(seconds=self.interval),
            id=self.name,
            name="Refresh KPIs, charts and processes",
            max_instances=1,
            coalesce=True,
            replace_existing=True,
        )
        self._scheduler.start()
        logger.info("Refreshing every %ss", self.interval)
        return self

    def stop(self) -> None:
        """Stop scheduling and wait for a cycle already in progress to finish."""
        if self.running:
            self._scheduler.shutdown(wait=True)
        self._stopped.set()
        logger.info("Refresh stopped after %d cycles (%d failed)", self.runs, self.failures)

    def wait(self, timeout: float | None = None) -> bool:
        """Block until stop() is called; True if it was."""
        return self._stopped.wait(timeout)

    def _job_listener(self, event) -> None:
        self.runs += 1
        if event.exception:
            self.failures += 1
            logger.error("Refresh cycle failed: %s", event.exception)

    def __enter__(self) -> "RefreshScheduler":
        return self.start()

    def __exit__(self, *exc_info) -> None:
        self.stop()
