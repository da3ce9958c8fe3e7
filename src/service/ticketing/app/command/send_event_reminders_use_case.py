"""
Send Event Reminders Use Case

Finds ticket holders of events taking place tomorrow (UTC) and reminds each of
them once per event. The reminder is the loguru notification line; the audit
row in event_log, dated with the event day it announces, marks the pair as done.
"""

from datetime import date, datetime, timedelta, timezone
from typing import List, Optional

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_log_command_repo import IEventLogCommandRepo
from src.service.ticketing.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.ticketing.domain.entity.event_log_entity import EventLogEntity


class SendEventRemindersUseCase:
    def __init__(
        self,
        *,
        event_query_repo: IEventQueryRepo,
        event_log_command_repo: IEventLogCommandRepo,
    ) -> None:
        self.event_query_repo = event_query_repo
        self.event_log_command_repo = event_log_command_repo

    @Logger.io
    async def send_reminders(self, *, today: Optional[date] = None) -> List[EventLogEntity]:
        today = today or datetime.now(timezone.utc).date()
        tomorrow = today + timedelta(days=1)

        targets = await self.event_query_repo.list_reminder_targets(event_date=tomorrow)
        Logger.base.info(f'⏰ [REMINDER] {len(targets)} reminders due for events on {tomorrow}')

        sent: List[EventLogEntity] = []
        for target in targets:
            message = target.build_message()
            Logger.base.info(f'📧 [REMINDER] Sending to {target.email}: {message}')
            event_log = await self.event_log_command_repo.create(
                event_log=EventLogEntity(
                    user_id=target.user_id,
                    event_id=target.event_id,
                    notification_date=tomorrow,
                    message=message,
                )
            )
            sent.append(event_log)

        return sent
