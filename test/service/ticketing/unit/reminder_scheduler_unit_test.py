"""
Unit tests for the daily reminder scheduler

Test Coverage:
1. Delay until the next HH:00 UTC
2. A run reports how many reminders went out
3. A failed run is absorbed and reports 0
"""

from datetime import date, datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.service.ticketing.driving_adapter.scheduler.reminder_scheduler import (
    ReminderScheduler,
    seconds_until_next_run,
)


pytestmark = pytest.mark.unit


class TestSecondsUntilNextRun:
    def test_later_today(self):
        now = datetime(2030, 7, 31, 6, 30, tzinfo=timezone.utc)

        assert seconds_until_next_run(now=now, hour_utc=8) == 90 * 60

    def test_already_passed_today_waits_for_tomorrow(self):
        now = datetime(2030, 7, 31, 9, 0, tzinfo=timezone.utc)

        assert seconds_until_next_run(now=now, hour_utc=8) == timedelta(hours=23).total_seconds()

    def test_exactly_on_the_hour_waits_a_full_day(self):
        now = datetime(2030, 7, 31, 0, 0, tzinfo=timezone.utc)

        assert seconds_until_next_run(now=now, hour_utc=0) == timedelta(days=1).total_seconds()

    def test_non_utc_clock_is_normalized(self):
        # 02:00 at +02:00 is 00:00 UTC
        now = datetime(2030, 7, 31, 2, 0, tzinfo=timezone(timedelta(hours=2)))

        assert seconds_until_next_run(now=now, hour_utc=1) == 3600


class TestReminderSchedulerRunOnce:
    @pytest.mark.asyncio
    async def test_returns_number_of_reminders_sent(self):
        use_case = MagicMock()
        use_case.send_reminders = AsyncMock(return_value=['log-1', 'log-2'])
        scheduler = ReminderScheduler(use_case_factory=lambda: use_case)

        sent = await scheduler.run_once(today=date(2030, 7, 31))

        assert sent == 2
        use_case.send_reminders.assert_awaited_once_with(today=date(2030, 7, 31))

    @pytest.mark.asyncio
    async def test_failure_is_logged_and_reports_zero(self):
        use_case = MagicMock()
        use_case.send_reminders = AsyncMock(side_effect=RuntimeError('db down'))
        scheduler = ReminderScheduler(use_case_factory=lambda: use_case)

        assert await scheduler.run_once() == 0

    @pytest.mark.asyncio
    async def test_each_run_gets_a_fresh_use_case(self):
        factory = MagicMock()
        factory.return_value.send_reminders = AsyncMock(return_value=[])
        scheduler = ReminderScheduler(use_case_factory=factory)

        await scheduler.run_once()
        await scheduler.run_once()

        assert factory.call_count == 2
