from typing import AsyncContextManager, Callable

from sqlalchemy import delete, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_ticket_command_repo import ITicketCommandRepo
from src.service.ticketing.driven_adapter.model.ticket_model import TicketModel


class TicketCommandRepoImpl(ITicketCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def update(self, *, event_id: int, ticket_id: int, seat: str, price: float) -> int:
        async with self.session_factory() as session:
            result = await session.execute(
                update(TicketModel)
                .where(TicketModel.id == ticket_id, TicketModel.event_id == event_id)
                .values(seat=seat, price=price)
            )
            await session.commit()
            return result.rowcount

    @Logger.io
    async def delete(self, *, ticket_id: int) -> int:
        async with self.session_factory() as session:
            result = await session.execute(delete(TicketModel).where(TicketModel.id == ticket_id))
            await session.commit()
            return result.rowcount

    @Logger.io
    async def delete_by_event_and_user(self, *, event_id: int, user_id: int) -> int:
        async with self.session_factory() as session:
            result = await session.execute(
                delete(TicketModel).where(
                    TicketModel.event_id == event_id, TicketModel.user_id == user_id
                )
            )
            await session.commit()
            return result.rowcount
