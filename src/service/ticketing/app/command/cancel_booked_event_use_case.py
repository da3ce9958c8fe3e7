from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_ticket_command_repo import ITicketCommandRepo


class CancelBookedEventUseCase:
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
    async def cancel(self, *, event_id: int, user_id: int) -> int:
        """Deletes every ticket the user holds for the event. Returns the number deleted."""
        changes = await self.ticket_command_repo.delete_by_event_and_user(
            event_id=event_id, user_id=user_id
        )
        Logger.base.info(
            f'↩️ [CANCEL_BOOKING] user={user_id} event={event_id} released {changes} tickets'
        )
        return changes
