"""
Unit tests for BookTicketUseCase

Test Focus:
1. Admission: count < available_seats admits, otherwise CapacityExceeded, no row written
2. Concurrency: N parallel bookings against S seats admit exactly min(N, S)
3. Failure paths leave zero rows and release the event lock
"""

import asyncio

import pytest

from src.platform.state.event_lock_registry import EventLockRegistry
from src.service.ticketing.app.command.book_ticket_use_case import BookTicketUseCase
from src.service.ticketing.domain.booking_error import (
    CapacityExceededError,
    ConstraintViolationError,
    EventNotFoundError,
    StoreUnavailableError,
)
from src.service.ticketing.domain.enum.booking_error_code import BookingErrorCode
from test.service.ticketing.unit.helpers import FakeUnitOfWorkFactory, InMemoryTicketTable


EVENT_ID = 1
OTHER_EVENT_ID = 2


def _use_case(table: InMemoryTicketTable, **uow_kwargs) -> BookTicketUseCase:
    return BookTicketUseCase(
        uow_factory=FakeUnitOfWorkFactory(table, **uow_kwargs),
        lock_registry=EventLockRegistry(),
    )


async def _book(use_case: BookTicketUseCase, *, event_id: int = EVENT_ID, user_id: int = 1) -> int:
    return await use_case.book_ticket(event_id=event_id, seat='A1', price=100.0, user_id=user_id)


@pytest.mark.unit
class TestBookTicketAdmission:
    @pytest.mark.asyncio
    async def test_books_ticket_when_seats_remain(self) -> None:
        table = InMemoryTicketTable({EVENT_ID: 2})
        use_case = _use_case(table)

        ticket_id = await _book(use_case)

        assert ticket_id in table.tickets
        assert table.tickets[ticket_id]['event_id'] == EVENT_ID
        assert table.count(EVENT_ID) == 1

    @pytest.mark.asyncio
    async def test_rejects_when_event_is_full(self) -> None:
        table = InMemoryTicketTable({EVENT_ID: 1})
        use_case = _use_case(table)
        await _book(use_case)

        with pytest.raises(CapacityExceededError) as exc_info:
            await _book(use_case, user_id=2)

        assert exc_info.value.code == BookingErrorCode.CAPACITY_EXCEEDED
        assert exc_info.value.status_code == 409
        assert exc_info.value.booked == 1
        assert table.count(EVENT_ID) == 1

    @pytest.mark.asyncio
    async def test_unknown_event_raises_not_found_and_writes_nothing(self) -> None:
        table = InMemoryTicketTable({EVENT_ID: 5})
        use_case = _use_case(table)

        with pytest.raises(EventNotFoundError) as exc_info:
            await _book(use_case, event_id=999)

        assert exc_info.value.status_code == 404
        assert exc_info.value.event_id == 999
        assert table.tickets == {}
        calls = use_case.uow_factory.created[0].booking_store.calls  # type: ignore[attr-defined]
        assert calls == ['get_event_capacity']

    @pytest.mark.asyncio
    async def test_zero_seat_event_rejects_without_counting(self) -> None:
        table = InMemoryTicketTable({EVENT_ID: 0})
        use_case = _use_case(table)

        with pytest.raises(CapacityExceededError):
            await _book(use_case)

        calls = use_case.uow_factory.created[0].booking_store.calls  # type: ignore[attr-defined]
        assert calls == ['get_event_capacity']
        assert table.tickets == {}

    @pytest.mark.asyncio
    async def test_repeated_rejections_do_not_change_state(self) -> None:
        table = InMemoryTicketTable({EVENT_ID: 1})
        use_case = _use_case(table)
        await _book(use_case)
        snapshot = dict(table.tickets)

        for user_id in range(2, 6):
            with pytest.raises(CapacityExceededError):
                await _book(use_case, user_id=user_id)

        assert table.tickets == snapshot

    @pytest.mark.asyncio
    async def test_deleting_a_ticket_frees_its_seat(self) -> None:
        table = InMemoryTicketTable({EVENT_ID: 1})
        use_case = _use_case(table)
        ticket_id = await _book(use_case)
        with pytest.raises(CapacityExceededError):
            await _book(use_case, user_id=2)

        table.delete(ticket_id)

        assert await _book(use_case, user_id=2) != ticket_id
        assert table.count(EVENT_ID) == 1


@pytest.mark.unit
class TestBookTicketConcurrency:
    @pytest.mark.asyncio
    @pytest.mark.parametrize('requests,seats', [(10, 3), (3, 10), (5, 5), (1, 1)])
    async def test_parallel_bookings_admit_exactly_min_of_requests_and_seats(
        self, requests: int, seats: int
    ) -> None:
        table = InMemoryTicketTable({EVENT_ID: seats})
        use_case = _use_case(table)

        results = await asyncio.gather(
            *(_book(use_case, user_id=i) for i in range(requests)), return_exceptions=True
        )

        admitted = [r for r in results if isinstance(r, int)]
        rejected = [r for r in results if isinstance(r, CapacityExceededError)]
        assert len(admitted) == min(requests, seats)
        assert len(rejected) == requests - len(admitted)
        assert table.count(EVENT_ID) == min(requests, seats)
        assert len(use_case.lock_registry) == 0

    @pytest.mark.asyncio
    async def test_last_seat_race_between_two_users(self) -> None:
        table = InMemoryTicketTable({EVENT_ID: 1})
        use_case = _use_case(table)

        first, second = await asyncio.gather(
            _book(use_case, user_id=1), _book(use_case, user_id=2), return_exceptions=True
        )

        outcomes = sorted([type(first).__name__, type(second).__name__])
        assert outcomes == ['CapacityExceededError', 'int']
        assert table.count(EVENT_ID) == 1

    @pytest.mark.asyncio
    async def test_bookings_for_different_events_do_not_block_each_other(self) -> None:
        table = InMemoryTicketTable({EVENT_ID: 1, OTHER_EVENT_ID: 1})
        gate = asyncio.Event()
        blocked = BookTicketUseCase(
            uow_factory=FakeUnitOfWorkFactory(table, insert_gate=gate),
            lock_registry=EventLockRegistry(),
        )
        use_case = BookTicketUseCase(
            uow_factory=FakeUnitOfWorkFactory(table), lock_registry=blocked.lock_registry
        )

        stuck = asyncio.create_task(_book(blocked, event_id=EVENT_ID))
        await asyncio.sleep(0.01)

        # EVENT_ID's lock is held by the stuck booking; OTHER_EVENT_ID is free
        assert EVENT_ID in blocked.lock_registry
        ticket_id = await asyncio.wait_for(_book(use_case, event_id=OTHER_EVENT_ID), timeout=1)
        assert table.tickets[ticket_id]['event_id'] == OTHER_EVENT_ID

        gate.set()
        await stuck
        assert len(blocked.lock_registry) == 0


@pytest.mark.unit
class TestBookTicketFailures:
    @pytest.mark.asyncio
    async def test_store_fault_after_count_persists_nothing(self) -> None:
        table = InMemoryTicketTable({EVENT_ID: 5})
        use_case = _use_case(table, fail_on='insert_ticket')

        with pytest.raises(StoreUnavailableError) as exc_info:
            await _book(use_case)

        assert exc_info.value.is_retryable
        assert exc_info.value.status_code == 503
        assert table.tickets == {}
        assert len(use_case.lock_registry) == 0

    @pytest.mark.asyncio
    async def test_commit_failure_becomes_store_unavailable_and_rolls_back(self) -> None:
        table = InMemoryTicketTable({EVENT_ID: 5})
        use_case = _use_case(table, commit_error=ConnectionResetError('connection lost'))

        with pytest.raises(StoreUnavailableError, match='temporarily unavailable'):
            await _book(use_case)

        assert table.tickets == {}
        assert table.rollbacks == 1

    @pytest.mark.asyncio
    async def test_backstop_recount_rolls_back_an_overflowing_insert(self) -> None:
        table = InMemoryTicketTable({EVENT_ID: 1})
        use_case = _use_case(table)
        uow_factory = use_case.uow_factory

        # A writer outside the coordinator slips a row in between count and recount
        def factory_with_intruder():
            uow = uow_factory()
            insert = uow.booking_store.insert_ticket

            async def insert_then_intrude(**kwargs):
                ticket_id = await insert(**kwargs)
                table.tickets[table.next_id()] = {'event_id': EVENT_ID}
                return ticket_id

            uow.booking_store.insert_ticket = insert_then_intrude
            return uow

        use_case.uow_factory = factory_with_intruder

        with pytest.raises(ConstraintViolationError) as exc_info:
            await _book(use_case)

        assert exc_info.value.status_code == 409
        assert exc_info.value.code == BookingErrorCode.CONSTRAINT_VIOLATION
        # Only the intruder's row remains; the coordinator's insert was rolled back
        assert table.count(EVENT_ID) == 1
        assert table.rollbacks == 1

    @pytest.mark.asyncio
    async def test_cancelled_booking_rolls_back_and_releases_lock(self) -> None:
        table = InMemoryTicketTable({EVENT_ID: 5})
        gate = asyncio.Event()
        use_case = _use_case(table, insert_gate=gate)

        task = asyncio.create_task(_book(use_case))
        await asyncio.sleep(0.01)
        assert use_case.lock_registry.waiters(event_id=EVENT_ID) == 1

        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert table.tickets == {}
        assert len(use_case.lock_registry) == 0

        # The event accepts bookings again
        gate.set()
        assert await _book(use_case) in table.tickets
