from typing import AsyncContextManager, Callable

from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.driven_adapter.model.event_model import EventModel


class EventCommandRepoImpl(IEventCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, event: EventEntity) -> EventEntity:
        async with self.session_factory() as session:
            event_model = EventModel(
                name=event.name,
                date=event.date,
                category=event.category.value,
                available_seats=event.available_seats,
                description=event.description,
            )
            session.add(event_model)
            await session.commit()
            await session.refresh(event_model)

            return EventEntity(
                id=event_model.id,
                name=event_model.name,
                date=event_model.date,
                category=event_model.category,
                available_seats=event_model.available_seats,
                description=event_model.description,
                created_at=event_model.created_at,
                booked_seats=0,
            )
