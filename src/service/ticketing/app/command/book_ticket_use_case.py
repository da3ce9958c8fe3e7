"""
Book Ticket Use Case - the booking coordinator

Admits one ticket for an event only while count(tickets) < available_seats.

Flow (per booking):
1. Take the in-process lock of the event (other events are unaffected)
2. Open a unit of work; read capacity with a row lock on the event
3. Count the event's tickets; reject when the event is full
4. Insert the ticket, re-count as a backstop, commit
5. Release the lock

Every failure leaves zero rows behind: leaving the unit of work without a commit
rolls back, shielded from cancellation.
"""

import time
from typing import Callable, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ticketing_metrics import metrics
from src.platform.state.event_lock_registry import EventLockRegistry
from src.service.ticketing.domain.booking_error import (
    BookingError,
    CapacityExceededError,
    ConstraintViolationError,
    EventNotFoundError,
    StoreUnavailableError,
)


class BookTicketUseCase:
    def __init__(
        self,
        *,
        uow_factory: Callable[[], AbstractUnitOfWork],
        lock_registry: EventLockRegistry,
    ) -> None:
        self.uow_factory = uow_factory
        self.lock_registry = lock_registry
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        uow_factory: Callable[[], AbstractUnitOfWork] = Depends(
            Provide[Container.unit_of_work.provider]
        ),
        lock_registry: EventLockRegistry = Depends(Provide[Container.event_lock_registry]),
    ) -> Self:
        return cls(uow_factory=uow_factory, lock_registry=lock_registry)

    @Logger.io
    async def book_ticket(self, *, event_id: int, seat: str, price: float, user_id: int) -> int:
        """
        Returns:
            id of the new ticket

        Raises:
            EventNotFoundError: no event with this id
            CapacityExceededError: the event is full
            ConstraintViolationError: the re-count backstop caught a concurrent writer
            InvalidReferenceError: the store rejected the user or event reference
            StoreUnavailableError: transient store failure, safe to retry
        """
        started = time.perf_counter()
        result = 'cancelled'
        try:
            with self.tracer.start_as_current_span(
                'use_case.book_ticket',
                attributes={'event.id': event_id, 'user.id': user_id},
            ):
                async with self.lock_registry.hold(event_id=event_id):
                    ticket_id = await self._admit(
                        event_id=event_id, seat=seat, price=price, user_id=user_id
                    )
            result = 'success'
        except BookingError as e:
            result = e.code.value
            raise
        except Exception:
            result = 'error'
            raise
        finally:
            metrics.record_booking(
                result=result,
                duration=time.perf_counter() - started,
                active_locks=len(self.lock_registry),
            )

        Logger.base.info(
            f'🎫 [BOOK] event={event_id} user={user_id} seat={seat} -> ticket {ticket_id}'
        )
        return ticket_id

    async def _admit(self, *, event_id: int, seat: str, price: float, user_id: int) -> int:
        async with self.uow_factory() as uow:
            capacity = await uow.booking_store.get_event_capacity(event_id=event_id)
            if capacity is None:
                raise EventNotFoundError(event_id)
            if capacity == 0:
                raise CapacityExceededError(event_id, available_seats=0, booked=0)

            booked = await uow.booking_store.count_tickets(event_id=event_id)
            if booked >= capacity:
                Logger.base.info(f'🚫 [BOOK] event={event_id} full ({booked}/{capacity})')
                raise CapacityExceededError(event_id, available_seats=capacity, booked=booked)

            ticket_id = await uow.booking_store.insert_ticket(
                event_id=event_id, user_id=user_id, seat=seat, price=price
            )

            recount = await uow.booking_store.count_tickets(event_id=event_id)
            if recount > capacity:
                Logger.base.warning(
                    f'⚠️ [BOOK] event={event_id} backstop tripped ({recount}/{capacity}), rolling back'
                )
                raise ConstraintViolationError(
                    event_id, detail=f'{recount} tickets for {capacity} seats'
                )

            try:
                await uow.commit()
            except BookingError:
                raise
            except Exception as e:
                raise StoreUnavailableError(event_id, detail=str(e)) from e

            return ticket_id
