from typing import AsyncContextManager, Callable, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity
from src.service.ticketing.driven_adapter.model.ticket_model import TicketModel


class TicketQueryRepoImpl(ITicketQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io(truncate_content=True)
    async def list_by_event(self, *, event_id: int) -> List[TicketEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(TicketModel).where(TicketModel.event_id == event_id).order_by(TicketModel.id)
            )
            return [
                TicketEntity(
                    id=m.id,
                    event_id=m.event_id,
                    user_id=m.user_id,
                    seat=m.seat,
                    price=m.price,
                    created_at=m.created_at,
                )
                for m in result.scalars().all()
            ]
