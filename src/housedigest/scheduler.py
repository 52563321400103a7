"""Daily scheduler for the report job.

Wakes once per day at a fixed wall-clock time in a fixed UTC offset.
Daylight saving time is not tracked: with the default offset of -6 the
report goes out at 07:00 CST, which is 08:00 during CDT.
"""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Awaitable, Callable, Optional

from .config import Settings

logger = logging.getLogger(__name__)


def next_run_time(
    now: datetime,
    hour: int,
    minute: int,
    utc_offset_hours: float,
) -> datetime:
    """Next instant strictly after now at hour:minute in the given offset.

    Naive datetimes are taken as UTC.
    """
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    tz = timezone(timedelta(hours=utc_offset_hours))
    local_now = now.astimezone(tz)

    candidate = local_now.replace(hour=hour, minute=minute, second=0, microsecond=0)
    if candidate <= local_now:
        candidate += timedelta(days=1)
    return candidate


class DailyScheduler:
    """Run a job at startup and then once a day.

    Example:
        scheduler = DailyScheduler(settings, job)
        await scheduler.run_forever()
    """

    def __init__(
        self,
        settings: Settings,
        job: Callable[[], Awaitable[Optional[int]]],
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.settings = settings
        self.job = job
        self._sleep = sleep
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def next_run(self) -> datetime:
        return next_run_time(
            self._clock(),
            self.settings.report_hour,
            self.settings.report_minute,
            self.settings.utc_offset_hours,
        )

    async def run_once(self) -> bool:
        """Run the job, logging instead of raising on failure.

        Returns:
            True if the job completed without error
        """
        logger.info(f"Running report at {self._clock().isoformat()}")
        try:
            result = await self.job()
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception("Report run failed")
            return False

        if isinstance(result, int) and result < 0:
            logger.error("Report run finished with errors")
            return False
        logger.info("Report completed successfully")
        return True

    async def run_forever(
        self,
        run_immediately: bool = True,
        max_runs: Optional[int] = None,
    ) -> None:
        """Main loop: run, sleep until the next fire time, repeat.

        Args:
            run_immediately: Run the job once before waiting for the first slot
            max_runs: Stop after this many scheduled runs (None = forever)
        """
        logger.info(
            f"Scheduler started, daily at {self.settings.report_hour:02d}:"
            f"{self.settings.report_minute:02d} (UTC{self.settings.utc_offset_hours:+g})"
        )
        if run_immediately:
            await self.run_once()

        runs = 0
        while max_runs is None or runs < max_runs:
            target = self.next_run()
            delay = max((target - self._clock()).total_seconds(), 0.0)
            logger.info(
                f"Next report scheduled for {target.isoformat()} "
                f"(in {round(delay / 60)} minutes)"
            )
            await self._sleep(delay)
            await self.run_once()
            runs += 1
