from datetime import date
from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.enum.event_category import EventCategory


class ListEventsUseCase:
    def __init__(self, event_query_repo: IEventQueryRepo) -> None:
        self.event_query_repo = event_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_query_repo: IEventQueryRepo = Depends(Provide[Container.event_query_repo]),
    ) -> Self:
        return cls(event_query_repo=event_query_repo)

    @Logger.io(truncate_content=True)
    async def list_events(
        self,
        *,
        category: Optional[EventCategory] = None,
        name: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[EventEntity]:
        """Events matching every given filter, ordered by date then id. Date bounds are inclusive."""
        if start_date and end_date and start_date > end_date:
            raise DomainError('start_date must not be after end_date')

        events = await self.event_query_repo.list_events(
            category=category, name=name, start_date=start_date, end_date=end_date
        )
        Logger.base.info(f'📋 [LIST_EVENTS] Found {len(events)} events')
        return events
