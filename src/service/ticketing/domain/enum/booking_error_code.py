from enum import StrEnum


class BookingErrorCode(StrEnum):
    """Tag carried by every booking failure so callers can branch without isinstance chains."""

    EVENT_NOT_FOUND = 'event_not_found'
    CAPACITY_EXCEEDED = 'capacity_exceeded'
    CONSTRAINT_VIOLATION = 'constraint_violation'
    STORE_UNAVAILABLE = 'store_unavailable'
    INVALID_REFERENCE = 'invalid_reference'
