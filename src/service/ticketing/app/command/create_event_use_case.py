from datetime import date
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.enum.event_category import EventCategory


class CreateEventUseCase:
    def __init__(self, event_command_repo: IEventCommandRepo) -> None:
        self.event_command_repo = event_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_command_repo: IEventCommandRepo = Depends(Provide[Container.event_command_repo]),
    ) -> Self:
        return cls(event_command_repo=event_command_repo)

    @Logger.io
    async def create(
        self,
        *,
        name: str,
        date: date,
        category: EventCategory,
        available_seats: int,
        description: str,
    ) -> EventEntity:
        # Capacity is fixed here and never touched by the booking path
        event = EventEntity(
            name=name,
            date=date,
            category=category,
            available_seats=available_seats,
            description=description,
        )
        created = await self.event_command_repo.create(event=event)

        Logger.base.info(
            f'🎪 [CREATE_EVENT] Event {created.id} "{created.name}" with {created.available_seats} seats'
        )
        return created
