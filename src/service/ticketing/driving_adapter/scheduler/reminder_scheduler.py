"""
Daily reminder scheduler

Runs SendEventRemindersUseCase once a day at REMINDER_HOUR_UTC:00 inside the
application's task group. A failed run is logged and the loop waits for the
next day; cancellation of the task group stops it.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Callable, Optional

import anyio

from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ticketing_metrics import metrics
from src.service.ticketing.app.command.send_event_reminders_use_case import (
    SendEventRemindersUseCase,
)


def seconds_until_next_run(*, now: datetime, hour_utc: int) -> float:
    """Seconds from now to the next hour_utc:00 UTC; a run exactly at now is pushed a day."""
    now = now.astimezone(timezone.utc)
    next_run = now.replace(hour=hour_utc, minute=0, second=0, microsecond=0)
    if next_run <= now:
        next_run += timedelta(days=1)
    return (next_run - now).total_seconds()


class ReminderScheduler:
    def __init__(
        self,
        *,
        use_case_factory: Callable[[], SendEventRemindersUseCase],
        hour_utc: int = 0,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self.use_case_factory = use_case_factory
        self.hour_utc = hour_utc
        self.clock = clock

    async def run_once(self, *, today: Optional[date] = None) -> int:
        """One reminder pass. Returns how many reminders went out; 0 on failure."""
        try:
            sent = await self.use_case_factory().send_reminders(today=today)
        except Exception as e:
            Logger.base.warning(f'⚠️ [REMINDER] Run failed, retrying tomorrow: {e}')
            metrics.record_reminder_run(result='error')
            return 0

        metrics.record_reminder_run(result='success', sent=len(sent))
        Logger.base.info(f'✅ [REMINDER] Sent {len(sent)} reminders')
        return len(sent)

    async def run_forever(self) -> None:
        Logger.base.info(f'⏰ [REMINDER] Scheduler started, daily at {self.hour_utc:02d}:00 UTC')
        while True:
            delay = seconds_until_next_run(now=self.clock(), hour_utc=self.hour_utc)
            Logger.base.debug(f'⏰ [REMINDER] Next run in {delay:.0f}s')
            await anyio.sleep(delay)
            await self.run_once()
