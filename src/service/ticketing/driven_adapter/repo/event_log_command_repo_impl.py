from typing import AsyncContextManager, Callable

from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_log_command_repo import IEventLogCommandRepo
from src.service.ticketing.domain.entity.event_log_entity import EventLogEntity
from src.service.ticketing.driven_adapter.model.event_log_model import EventLogModel


class EventLogCommandRepoImpl(IEventLogCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, event_log: EventLogEntity) -> EventLogEntity:
        async with self.session_factory() as session:
            model = EventLogModel(
                user_id=event_log.user_id,
                event_id=event_log.event_id,
                notification_date=event_log.notification_date,
                message=event_log.message,
            )
            session.add(model)
            await session.commit()
            await session.refresh(model)

            event_log.id = model.id
            event_log.created_at = model.created_at
            return event_log
