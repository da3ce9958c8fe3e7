from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.entity.event_log_entity import ReminderTarget
from src.service.ticketing.domain.enum.event_category import EventCategory


class IEventQueryRepo(ABC):
    """Event Query Repository - read side of events and their ticket holders"""

    @abstractmethod
    async def get_by_id(self, *, event_id: int) -> Optional[EventEntity]:
        """Event with booked_seats filled in, or None."""

    @abstractmethod
    async def list_events(
        self,
        *,
        category: Optional[EventCategory] = None,
        name: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[EventEntity]:
        pass

    @abstractmethod
    async def list_booked_by_user(self, *, user_id: int) -> List[EventEntity]:
        pass

    @abstractmethod
    async def list_reminder_targets(self, *, event_date: date) -> List[ReminderTarget]:
        """One row per (user, event) for events on event_date that were not reminded yet."""
