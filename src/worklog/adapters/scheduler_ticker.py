"""APScheduler adapter for the running-entry clock."""

import logging
from datetime import datetime
from typing import Callable

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from worklog.ports.time_service import TimeService

logger = logging.getLogger(__name__)

JOB_ID = "worklog_ticker"


def format_elapsed(seconds: float) -> str:
    total_seconds = max(int(seconds), 0)
    hours, remainder = divmod(total_seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


class SchedulerTicker:
    """
    Calls render with the elapsed time of the running entry every interval.

    Implements Ticker protocol. The job only reads the start boundary it
    was given; it never touches the log.
    """

    def __init__(
        self,
        time: TimeService,
        render: Callable[[str], None],
        interval_seconds: int = 1,
        scheduler: BackgroundScheduler | None = None,
        now: Callable[[], datetime] = datetime.now,
    ):
        self.time = time
        self.render = render
        self.interval_seconds = interval_seconds
        self.scheduler = scheduler or BackgroundScheduler()
        self.now = now

    @property
    def active(self) -> bool:
        return self.scheduler.get_job(JOB_ID) is not None

    def start(self, started_at: str) -> None:
        """Begin ticking from the given start boundary."""
        if not self.scheduler.running:
            self.scheduler.start()
        self.scheduler.add_job(
            self.tick,
            IntervalTrigger(seconds=self.interval_seconds),
            args=[started_at],
            id=JOB_ID,
            replace_existing=True,
        )
        logger.debug(f"Ticker started from {started_at} every {self.interval_seconds}s")

    def cancel(self) -> None:
        """Stop ticking. Safe to call when not running."""
        if self.active:
            self.scheduler.remove_job(JOB_ID)
            logger.debug("Ticker cancelled")

    def tick(self, started_at: str) -> None:
        elapsed = self.now() - self.time.to_datetime(started_at)
        self.render(format_elapsed(elapsed.total_seconds()))

    def shutdown(self) -> None:
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)
