"""
Integration tests: BookTicketUseCase over SqlAlchemyUnitOfWork and BookingStoreImpl

Runs the coordinator against the real SQLAlchemy adapters (SQLite through aiosqlite).
"""

import asyncio
from collections.abc import AsyncIterator
from datetime import date

import pytest
from sqlalchemy import func, select

from src.platform.database.orm_db_setting import Database, dispose_engine
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.platform.state.event_lock_registry import EventLockRegistry
from src.service.ticketing.app.command.book_ticket_use_case import BookTicketUseCase
from src.service.ticketing.domain.booking_error import CapacityExceededError, EventNotFoundError
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.entity.user_entity import UserEntity
from src.service.ticketing.driven_adapter.model.ticket_model import TicketModel
from src.service.ticketing.driven_adapter.repo.booking_store_impl import BookingStoreImpl
from src.service.ticketing.driven_adapter.repo.event_command_repo_impl import (
    EventCommandRepoImpl,
)
from src.service.ticketing.driven_adapter.repo.user_command_repo_impl import UserCommandRepoImpl


pytestmark = pytest.mark.integration


@pytest.fixture
async def database() -> AsyncIterator[Database]:
    yield Database()
    await dispose_engine()


@pytest.fixture
def use_case(database: Database) -> BookTicketUseCase:
    return BookTicketUseCase(
        uow_factory=lambda: SqlAlchemyUnitOfWork(session_factory=database.session),
        lock_registry=EventLockRegistry(),
    )


async def _create_event(database: Database, *, available_seats: int) -> int:
    event = await EventCommandRepoImpl(session_factory=database.session).create(
        event=EventEntity(
            name='Store Test',
            date=date(2030, 8, 1),
            category='Concert',
            available_seats=available_seats,
            description='store test',
        )
    )
    assert event.id is not None
    return event.id


async def _create_users(database: Database, count: int) -> list[int]:
    repo = UserCommandRepoImpl(session_factory=database.session)
    ids = []
    for i in range(count):
        user = await repo.create(
            UserEntity(email=f'store{i}@test.com', name=f'User {i}', hashed_password='x')
        )
        ids.append(user.id)
    return ids


async def _count_rows(database: Database, event_id: int) -> int:
    async with database.session() as session:
        result = await session.execute(
            select(func.count(TicketModel.id)).where(TicketModel.event_id == event_id)
        )
        return result.scalar_one()


class TestBookingStoreImpl:
    async def test_capacity_of_missing_event_is_none(self, database: Database):
        async with database.session() as session:
            assert await BookingStoreImpl(session=session).get_event_capacity(event_id=99999) is None

    async def test_uncommitted_insert_is_rolled_back(self, database: Database):
        event_id = await _create_event(database, available_seats=5)
        (user_id,) = await _create_users(database, 1)

        async with SqlAlchemyUnitOfWork(session_factory=database.session) as uow:
            await uow.booking_store.insert_ticket(
                event_id=event_id, user_id=user_id, seat='A1', price=10
            )
            assert await uow.booking_store.count_tickets(event_id=event_id) == 1

        assert await _count_rows(database, event_id) == 0


class TestBookTicketAgainstDatabase:
    @pytest.mark.parametrize('requests,seats', [(10, 3), (4, 6)])
    async def test_parallel_bookings_admit_min_of_requests_and_seats(
        self, database: Database, use_case: BookTicketUseCase, requests: int, seats: int
    ):
        event_id = await _create_event(database, available_seats=seats)
        user_ids = await _create_users(database, requests)

        results = await asyncio.gather(
            *(
                use_case.book_ticket(event_id=event_id, seat='A1', price=100, user_id=user_id)
                for user_id in user_ids
            ),
            return_exceptions=True,
        )

        admitted = [r for r in results if isinstance(r, int)]
        assert len(admitted) == min(requests, seats)
        assert all(
            isinstance(r, CapacityExceededError) for r in results if not isinstance(r, int)
        )
        assert await _count_rows(database, event_id) == min(requests, seats)

    async def test_missing_event_writes_nothing(
        self, database: Database, use_case: BookTicketUseCase
    ):
        (user_id,) = await _create_users(database, 1)

        with pytest.raises(EventNotFoundError):
            await use_case.book_ticket(event_id=99999, seat='A1', price=1, user_id=user_id)

        async with database.session() as session:
            assert (await session.execute(select(func.count(TicketModel.id)))).scalar_one() == 0
