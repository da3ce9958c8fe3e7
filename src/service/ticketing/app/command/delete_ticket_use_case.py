from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_ticket_command_repo import ITicketCommandRepo


class DeleteTicketUseCase:
    """Unconditional delete. Frees one seat of the event implicitly."""

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
    async def delete(self, *, ticket_id: int) -> int:
        changes = await self.ticket_command_repo.delete(ticket_id=ticket_id)
        if changes:
            Logger.base.info(f'🗑️ [DELETE_TICKET] Ticket {ticket_id} deleted')
        return changes
