from datetime import date, datetime
from typing import Optional

import attrs


REMINDER_MESSAGE_TEMPLATE = 'Reminder: You have an upcoming event "{name}" on {date}.'


@attrs.define
class ReminderTarget:
    """A ticket holder of an event happening on the notification date."""

    user_id: int
    email: str
    event_id: int
    event_name: str
    event_date: date

    def build_message(self) -> str:
        return REMINDER_MESSAGE_TEMPLATE.format(
            name=self.event_name, date=self.event_date.isoformat()
        )


@attrs.define
class EventLogEntity:
    user_id: int
    event_id: int
    notification_date: date
    message: str
    id: Optional[int] = None
    created_at: Optional[datetime] = None
