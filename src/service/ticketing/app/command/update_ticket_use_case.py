from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_ticket_command_repo import ITicketCommandRepo


class UpdateTicketUseCase:
    """Reassigns seat and price of a ticket. Does not touch capacity: the ticket count is unchanged."""

    def __init__(self, ticket_command_repo: ITicketCommandRepo) -> None:
        self.ticket_command_repo = ticket_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        ticket_command_repo: ITicketCommandRepo = Depends(Provide[Container.ticket_command_repo]),
    ) -> Self:
        return cls(ticket_command_repo=ticket_command_repo)

    @Logger.io
    async def update(self, *, event_id: int, ticket_id: int, seat: str, price: float) -> int:
        return await self.ticket_command_repo.update(
            event_id=event_id, ticket_id=ticket_id, seat=seat, price=price
        )
