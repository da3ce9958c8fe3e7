from datetime import date, datetime
from typing import Optional

import attrs

from src.service.ticketing.domain.enum.event_category import EventCategory


MAX_AVAILABLE_SEATS = 1000


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise ValueError(f'Event {attribute.name} cannot be empty')


def _validate_available_seats(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if not 0 <= value <= MAX_AVAILABLE_SEATS:
        raise ValueError(f'Available seats must be between 0 and {MAX_AVAILABLE_SEATS}')


@attrs.define
class EventEntity:
    name: str = attrs.field(validator=_validate_non_empty_string)
    date: date
    category: EventCategory = attrs.field(converter=EventCategory)
    available_seats: int = attrs.field(validator=_validate_available_seats)
    description: str = ''
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    booked_seats: Optional[int] = None  # filled by queries that count tickets

    @property
    def remaining_seats(self) -> Optional[int]:
        if self.booked_seats is None:
            return None
        return max(self.available_seats - self.booked_seats, 0)
