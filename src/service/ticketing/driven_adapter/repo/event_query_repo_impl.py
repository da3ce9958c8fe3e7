"""
Event Query Repository Implementation - read side

Booked seat counts are always derived from the ticket table, never stored.
"""

from datetime import date
from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.entity.event_log_entity import ReminderTarget
from src.service.ticketing.domain.enum.event_category import EventCategory
from src.service.ticketing.driven_adapter.model.event_log_model import EventLogModel
from src.service.ticketing.driven_adapter.model.event_model import EventModel
from src.service.ticketing.driven_adapter.model.ticket_model import TicketModel
from src.service.ticketing.driven_adapter.model.user_model import UserModel


class EventQueryRepoImpl(IEventQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @staticmethod
    def _select_with_booked() -> Select:
        booked = (
            select(func.count(TicketModel.id))
            .where(TicketModel.event_id == EventModel.id)
            .correlate(EventModel)
            .scalar_subquery()
        )
        return select(EventModel, booked.label('booked_seats'))

    @staticmethod
    def _model_to_entity(event_model: EventModel, booked_seats: Optional[int]) -> EventEntity:
        return EventEntity(
            id=event_model.id,
            name=event_model.name,
            date=event_model.date,
            category=event_model.category,
            available_seats=event_model.available_seats,
            description=event_model.description,
            created_at=event_model.created_at,
            booked_seats=booked_seats,
        )

    @Logger.io
    async def get_by_id(self, *, event_id: int) -> Optional[EventEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                self._select_with_booked().where(EventModel.id == event_id)
            )
            row = result.one_or_none()
            if row is None:
                return None
            return self._model_to_entity(row[0], row[1])

    @Logger.io
    async def list_events(
        self,
        *,
        category: Optional[EventCategory] = None,
        name: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[EventEntity]:
        stmt = self._select_with_booked()
        if category is not None:
            stmt = stmt.where(EventModel.category == category.value)
        if name:
            stmt = stmt.where(func.lower(EventModel.name).contains(name.lower(), autoescape=True))
        if start_date is not None:
            stmt = stmt.where(EventModel.date >= start_date)
        if end_date is not None:
            stmt = stmt.where(EventModel.date <= end_date)

        async with self.session_factory() as session:
            result = await session.execute(stmt.order_by(EventModel.date, EventModel.id))
            return [self._model_to_entity(model, booked) for model, booked in result.all()]

    @Logger.io
    async def list_booked_by_user(self, *, user_id: int) -> List[EventEntity]:
        held = select(TicketModel.event_id).where(TicketModel.user_id == user_id)
        stmt = (
            self._select_with_booked()
            .where(EventModel.id.in_(held))
            .order_by(EventModel.date, EventModel.id)
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [self._model_to_entity(model, booked) for model, booked in result.all()]

    @Logger.io
    async def list_reminder_targets(self, *, event_date: date) -> List[ReminderTarget]:
        # Pairs already reminded are skipped, so a rerun on the same day sends nothing new
        already_sent = (
            select(EventLogModel.id)
            .where(
                EventLogModel.user_id == UserModel.id,
                EventLogModel.event_id == EventModel.id,
            )
            .exists()
        )
        stmt = (
            select(
                UserModel.id,
                UserModel.email,
                EventModel.id,
                EventModel.name,
                EventModel.date,
            )
            .select_from(EventModel)
            .join(TicketModel, TicketModel.event_id == EventModel.id)
            .join(UserModel, UserModel.id == TicketModel.user_id)
            .where(EventModel.date == event_date)
            .where(~already_sent)
            .distinct()
            .order_by(EventModel.id, UserModel.id)
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [
                ReminderTarget(
                    user_id=user_id,
                    email=email,
                    event_id=event_id,
                    event_name=event_name,
                    event_date=date_,
                )
                for user_id, email, event_id, event_name, date_ in result.all()
            ]
