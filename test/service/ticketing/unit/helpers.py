"""
In-memory doubles of the booking store and unit of work.

Tickets staged inside a unit of work only become visible to other units of work
on commit, like rows in a real transaction. Every store call yields to the event
loop so concurrent bookings actually interleave.
"""

import asyncio
from typing import Optional

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.service.ticketing.app.interface.i_booking_store import IBookingStore
from src.service.ticketing.domain.booking_error import StoreUnavailableError


class InMemoryTicketTable:
    def __init__(self, capacities: dict[int, int]) -> None:
        self.capacities = dict(capacities)
        self.tickets: dict[int, dict] = {}
        self._next_id = 1
        self.commits = 0
        self.rollbacks = 0

    def next_id(self) -> int:
        ticket_id = self._next_id
        self._next_id += 1
        return ticket_id

    def count(self, event_id: int) -> int:
        return sum(1 for t in self.tickets.values() if t['event_id'] == event_id)

    def delete(self, ticket_id: int) -> None:
        del self.tickets[ticket_id]


class FakeBookingStore(IBookingStore):
    def __init__(
        self,
        table: InMemoryTicketTable,
        *,
        fail_on: Optional[str] = None,
        insert_gate: Optional[asyncio.Event] = None,
    ) -> None:
        self.table = table
        self.staged: dict[int, dict] = {}
        self.fail_on = fail_on
        self.insert_gate = insert_gate
        self.calls: list[str] = []

    async def _enter(self, name: str, event_id: int) -> None:
        self.calls.append(name)
        await asyncio.sleep(0)
        if self.fail_on == name:
            raise StoreUnavailableError(event_id, detail=f'{name} failed')

    async def get_event_capacity(self, *, event_id: int) -> Optional[int]:
        await self._enter('get_event_capacity', event_id)
        return self.table.capacities.get(event_id)

    async def count_tickets(self, *, event_id: int) -> int:
        await self._enter('count_tickets', event_id)
        staged = sum(1 for t in self.staged.values() if t['event_id'] == event_id)
        return self.table.count(event_id) + staged

    async def insert_ticket(self, *, event_id: int, user_id: int, seat: str, price: float) -> int:
        await self._enter('insert_ticket', event_id)
        if self.insert_gate is not None:
            await self.insert_gate.wait()
        ticket_id = self.table.next_id()
        self.staged[ticket_id] = {
            'event_id': event_id,
            'user_id': user_id,
            'seat': seat,
            'price': price,
        }
        return ticket_id


class FakeUnitOfWork(AbstractUnitOfWork):
    def __init__(
        self,
        table: InMemoryTicketTable,
        *,
        fail_on: Optional[str] = None,
        commit_error: Optional[Exception] = None,
        insert_gate: Optional[asyncio.Event] = None,
    ) -> None:
        self.table = table
        self.commit_error = commit_error
        self.booking_store = FakeBookingStore(table, fail_on=fail_on, insert_gate=insert_gate)

    async def _commit(self) -> None:
        await asyncio.sleep(0)
        if self.commit_error is not None:
            raise self.commit_error
        self.table.tickets.update(self.booking_store.staged)
        self.booking_store.staged = {}
        self.table.commits += 1

    async def rollback(self) -> None:
        if self.booking_store.staged:
            self.table.rollbacks += 1
        self.booking_store.staged = {}


class FakeUnitOfWorkFactory:
    """Callable handed to BookTicketUseCase; remembers every unit of work it made."""

    def __init__(self, table: InMemoryTicketTable, **uow_kwargs) -> None:
        self.table = table
        self.uow_kwargs = uow_kwargs
        self.created: list[FakeUnitOfWork] = []

    def __call__(self) -> FakeUnitOfWork:
        uow = FakeUnitOfWork(self.table, **self.uow_kwargs)
        self.created.append(uow)
        return uow
