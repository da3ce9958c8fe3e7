"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.ticketing.app.command import (
    book_ticket_use_case,
    cancel_booked_event_use_case,
    create_event_use_case,
    delete_ticket_use_case,
    update_ticket_use_case,
)
from src.service.ticketing.app.query import (
    get_event_use_case,
    list_booked_events_use_case,
    list_event_tickets_use_case,
    list_events_use_case,
    user_query_use_case,
)
from src.service.ticketing.driving_adapter.http_controller import (
    auth_controller,
    event_controller,
    user_controller,
)


WIRE_MODULES: list[ModuleType] = [
    book_ticket_use_case,
    cancel_booked_event_use_case,
    create_event_use_case,
    delete_ticket_use_case,
    update_ticket_use_case,
    get_event_use_case,
    list_booked_events_use_case,
    list_event_tickets_use_case,
    list_events_use_case,
    user_query_use_case,
    auth_controller,
    event_controller,
    user_controller,
]
