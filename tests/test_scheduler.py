"""Tests for the daily scheduler."""

from datetime import datetime, timedelta, timezone

import pytest

from housedigest.config import Settings
from housedigest.scheduler import DailyScheduler, next_run_time

CST = timezone(timedelta(hours=-6))


class TestNextRunTime:
    """Test next fire time computation."""

    def test_later_today(self):
        now = datetime(2026, 10, 19, 10, 0, tzinfo=timezone.utc)  # 04:00 CST
        assert next_run_time(now, 7, 0, -6) == datetime(2026, 10, 19, 7, 0, tzinfo=CST)

    def test_already_passed_rolls_to_tomorrow(self):
        now = datetime(2026, 10, 19, 14, 0, tzinfo=timezone.utc)  # 08:00 CST
        assert next_run_time(now, 7, 0, -6) == datetime(2026, 10, 20, 7, 0, tzinfo=CST)

    def test_exact_time_rolls_to_tomorrow(self):
        now = datetime(2026, 10, 19, 13, 0, tzinfo=timezone.utc)  # 07:00 CST
        assert next_run_time(now, 7, 0, -6) == datetime(2026, 10, 20, 7, 0, tzinfo=CST)

    def test_local_date_differs_from_utc(self):
        """Late evening local time is already tomorrow in UTC."""
        now = datetime(2026, 10, 20, 3, 0, tzinfo=timezone.utc)  # 21:00 CST on the 19th
        assert next_run_time(now, 7, 0, -6) == datetime(2026, 10, 20, 7, 0, tzinfo=CST)

    def test_naive_taken_as_utc(self):
        now = datetime(2026, 10, 19, 10, 0)
        assert next_run_time(now, 7, 30, -6) == datetime(2026, 10, 19, 7, 30, tzinfo=CST)

    def test_year_rollover(self):
        now = datetime(2026, 12, 31, 23, 0, tzinfo=timezone.utc)
        assert next_run_time(now, 7, 0, 0) == datetime(2027, 1, 1, 7, 0, tzinfo=timezone.utc)


class FakeClock:
    """Clock advanced by the fake sleep."""

    def __init__(self, start: datetime):
        self.now = start
        self.sleeps = []

    def __call__(self) -> datetime:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc))  # 06:00 CST


class TestDailyScheduler:
    """Test the scheduling loop."""

    @pytest.mark.asyncio
    async def test_runs_at_startup_then_daily(self, settings: Settings, clock: FakeClock):
        runs = []

        async def job():
            runs.append(clock())
            return 1

        scheduler = DailyScheduler(settings, job, sleep=clock.sleep, clock=clock)
        await scheduler.run_forever(max_runs=2)

        assert runs == [
            datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc),
            datetime(2026, 10, 19, 13, 0, tzinfo=timezone.utc),
            datetime(2026, 10, 20, 13, 0, tzinfo=timezone.utc),
        ]
        assert clock.sleeps == [3600.0, 86400.0]

    @pytest.mark.asyncio
    async def test_skip_startup_run(self, settings: Settings, clock: FakeClock):
        runs = []

        async def job():
            runs.append(clock())

        scheduler = DailyScheduler(settings, job, sleep=clock.sleep, clock=clock)
        await scheduler.run_forever(run_immediately=False, max_runs=1)

        assert runs == [datetime(2026, 10, 19, 13, 0, tzinfo=timezone.utc)]

    @pytest.mark.asyncio
    async def test_failing_job_does_not_stop_loop(self, settings: Settings, clock: FakeClock):
        calls = []

        async def job():
            calls.append(1)
            raise RuntimeError("telegram down")

        scheduler = DailyScheduler(settings, job, sleep=clock.sleep, clock=clock)
        await scheduler.run_forever(max_runs=2)

        assert len(calls) == 3

    @pytest.mark.asyncio
    async def test_run_once_reports_outcome(self, settings: Settings, clock: FakeClock):
        async def ok():
            return 2

        async def failed():
            return -1

        assert await DailyScheduler(settings, ok, clock=clock).run_once() is True
        assert await DailyScheduler(settings, failed, clock=clock).run_once() is False
