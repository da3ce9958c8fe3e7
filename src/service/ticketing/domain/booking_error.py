"""
Booking failures

Each variant maps onto the platform error that carries its HTTP status, so the
exception handlers translate them without knowing about bookings:
- EventNotFoundError        -> 404
- CapacityExceededError     -> 409
- ConstraintViolationError  -> 409 (reported like CapacityExceeded)
- StoreUnavailableError     -> 503 (transient, safe to retry)
- InvalidReferenceError     -> 400 (ticket points at a user or event the store rejects)
"""

from src.platform.exception.exceptions import (
    ConflictError,
    CustomBaseError,
    DomainError,
    NotFoundError,
    ServiceUnavailableError,
)
from src.service.ticketing.domain.enum.booking_error_code import BookingErrorCode


class BookingError(CustomBaseError):
    """Root of every booking failure; variants add the platform error holding their status."""

    code: BookingErrorCode
    event_id: int

    @property
    def is_retryable(self) -> bool:
        return self.code == BookingErrorCode.STORE_UNAVAILABLE


class EventNotFoundError(BookingError, NotFoundError):
    code = BookingErrorCode.EVENT_NOT_FOUND

    def __init__(self, event_id: int) -> None:
        self.event_id = event_id
        super().__init__('Event not found')


class CapacityExceededError(BookingError, ConflictError):
    code = BookingErrorCode.CAPACITY_EXCEEDED

    def __init__(self, event_id: int, *, available_seats: int, booked: int) -> None:
        self.event_id = event_id
        self.available_seats = available_seats
        self.booked = booked
        super().__init__('No available seats for this event')


class ConstraintViolationError(BookingError, ConflictError):
    code = BookingErrorCode.CONSTRAINT_VIOLATION

    def __init__(self, event_id: int, detail: str) -> None:
        self.event_id = event_id
        self.detail = detail
        super().__init__('No available seats for this event')


class StoreUnavailableError(BookingError, ServiceUnavailableError):
    code = BookingErrorCode.STORE_UNAVAILABLE

    def __init__(self, event_id: int, detail: str) -> None:
        self.event_id = event_id
        self.detail = detail
        super().__init__('Ticket store temporarily unavailable, please retry')


class InvalidReferenceError(BookingError, DomainError):
    code = BookingErrorCode.INVALID_REFERENCE

    def __init__(self, event_id: int, detail: str) -> None:
        self.event_id = event_id
        self.detail = detail
        super().__init__('Ticket references an unknown user or event')
