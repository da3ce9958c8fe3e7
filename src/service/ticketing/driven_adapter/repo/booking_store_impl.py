"""
Booking Store - SQLAlchemy adapter of the coordinator's storage contract

Bound to the session of one SqlAlchemyUnitOfWork; it never commits or rolls back
on its own. Driver failures come out as booking errors:
- IntegrityError                  -> InvalidReferenceError (unknown user or event id)
- any other SQLAlchemyError/OSError -> StoreUnavailableError
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Optional

from sqlalchemy import func, insert, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_booking_store import IBookingStore
from src.service.ticketing.domain.booking_error import (
    InvalidReferenceError,
    StoreUnavailableError,
)
from src.service.ticketing.driven_adapter.model.event_model import EventModel
from src.service.ticketing.driven_adapter.model.ticket_model import TicketModel


@contextmanager
def translate_store_errors(*, event_id: int) -> Iterator[None]:
    try:
        yield
    except IntegrityError as e:
        raise InvalidReferenceError(event_id, detail=str(e.orig)) from e
    except (SQLAlchemyError, OSError) as e:
        raise StoreUnavailableError(event_id, detail=str(e)) from e


class BookingStoreImpl(IBookingStore):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def get_event_capacity(self, *, event_id: int) -> Optional[int]:
        with translate_store_errors(event_id=event_id):
            # Row lock serializes bookers across processes; no-op on SQLite
            result = await self.session.execute(
                select(EventModel.available_seats)
                .where(EventModel.id == event_id)
                .with_for_update()
            )
            return result.scalar_one_or_none()

    @Logger.io
    async def count_tickets(self, *, event_id: int) -> int:
        with translate_store_errors(event_id=event_id):
            result = await self.session.execute(
                select(func.count(TicketModel.id)).where(TicketModel.event_id == event_id)
            )
            return result.scalar_one()

    @Logger.io
    async def insert_ticket(self, *, event_id: int, user_id: int, seat: str, price: float) -> int:
        with translate_store_errors(event_id=event_id):
            result = await self.session.execute(
                insert(TicketModel)
                .values(event_id=event_id, user_id=user_id, seat=seat, price=price)
                .returning(TicketModel.id)
            )
            return result.scalar_one()
