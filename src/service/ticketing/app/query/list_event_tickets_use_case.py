from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.ticketing.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity


class ListEventTicketsUseCase:
    def __init__(
        self, *, event_query_repo: IEventQueryRepo, ticket_query_repo: ITicketQueryRepo
    ) -> None:
        self.event_query_repo = event_query_repo
        self.ticket_query_repo = ticket_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_query_repo: IEventQueryRepo = Depends(Provide[Container.event_query_repo]),
        ticket_query_repo: ITicketQueryRepo = Depends(Provide[Container.ticket_query_repo]),
    ) -> Self:
        return cls(event_query_repo=event_query_repo, ticket_query_repo=ticket_query_repo)

    @Logger.io(truncate_content=True)
    async def list_tickets(self, *, event_id: int) -> List[TicketEntity]:
        if await self.event_query_repo.get_by_id(event_id=event_id) is None:
            raise NotFoundError('Event not found')
        return await self.ticket_query_repo.list_by_event(event_id=event_id)
