from datetime import datetime
from typing import Optional

import attrs


def _validate_price(instance: object, attribute: attrs.Attribute, value: float) -> None:
    if value < 0:
        raise ValueError('Ticket price cannot be negative')


@attrs.define
class TicketEntity:
    """One consumed seat. Seat labels are free text and may repeat within an event."""

    event_id: int
    user_id: int
    seat: str
    price: float = attrs.field(validator=_validate_price)
    id: Optional[int] = None
    created_at: Optional[datetime] = None
