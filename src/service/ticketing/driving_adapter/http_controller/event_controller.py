from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.command.book_ticket_use_case import BookTicketUseCase
from src.service.ticketing.app.command.create_event_use_case import CreateEventUseCase
from src.service.ticketing.app.command.delete_ticket_use_case import DeleteTicketUseCase
from src.service.ticketing.app.command.update_ticket_use_case import UpdateTicketUseCase
from src.service.ticketing.app.query.get_event_use_case import GetEventUseCase
from src.service.ticketing.app.query.list_event_tickets_use_case import ListEventTicketsUseCase
from src.service.ticketing.app.query.list_events_use_case import ListEventsUseCase
from src.service.ticketing.domain.entity.user_entity import UserEntity
from src.service.ticketing.domain.enum.event_category import EventCategory
from src.service.ticketing.driving_adapter.http_controller.schema.event_schema import (
    EventCreateRequest,
    EventResponse,
)
from src.service.ticketing.driving_adapter.http_controller.schema.ticket_schema import (
    ChangesResponse,
    TicketCreatedResponse,
    TicketRequest,
    TicketResponse,
)
from src.service.ticketing.driving_adapter.http_controller.user_controller import (
    get_current_user,
)


router = APIRouter()


# === Events ===


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_event(
    request: EventCreateRequest,
    use_case: CreateEventUseCase = Depends(CreateEventUseCase.depends),
) -> EventResponse:
    event = await use_case.create(
        name=request.name,
        date=request.date,
        category=request.category,
        available_seats=request.available_seats,
        description=request.description,
    )
    return EventResponse.model_validate(event)


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def list_events(
    category: Optional[EventCategory] = None,
    name: Optional[str] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> List[EventResponse]:
    events = await use_case.list_events(
        category=category, name=name, start_date=start_date, end_date=end_date
    )
    return [EventResponse.model_validate(event) for event in events]


@router.get('/{event_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_event(
    event_id: int,
    use_case: GetEventUseCase = Depends(GetEventUseCase.depends),
) -> EventResponse:
    event = await use_case.get_by_id(event_id=event_id)
    return EventResponse.model_validate(event)


# === Tickets ===


@router.post('/{event_id}/tickets', status_code=status.HTTP_201_CREATED)
@Logger.io
async def book_ticket(
    event_id: int,
    request: TicketRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: BookTicketUseCase = Depends(BookTicketUseCase.depends),
) -> TicketCreatedResponse:
    # Booking errors carry their own status: 404 / 409 / 503
    ticket_id = await use_case.book_ticket(
        event_id=event_id,
        seat=request.seat,
        price=request.price,
        user_id=current_user.id or 0,
    )
    return TicketCreatedResponse(id=ticket_id)


@router.get('/{event_id}/tickets', status_code=status.HTTP_200_OK)
@Logger.io
async def list_event_tickets(
    event_id: int,
    use_case: ListEventTicketsUseCase = Depends(ListEventTicketsUseCase.depends),
) -> List[TicketResponse]:
    tickets = await use_case.list_tickets(event_id=event_id)
    return [TicketResponse.model_validate(ticket) for ticket in tickets]


@router.put('/{event_id}/tickets/{ticket_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def update_ticket(
    event_id: int,
    ticket_id: int,
    request: TicketRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: UpdateTicketUseCase = Depends(UpdateTicketUseCase.depends),
) -> ChangesResponse:
    changes = await use_case.update(
        event_id=event_id, ticket_id=ticket_id, seat=request.seat, price=request.price
    )
    return ChangesResponse(changes=changes)


@router.delete('/{event_id}/tickets/{ticket_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def delete_ticket(
    event_id: int,
    ticket_id: int,
    current_user: UserEntity = Depends(get_current_user),
    use_case: DeleteTicketUseCase = Depends(DeleteTicketUseCase.depends),
) -> ChangesResponse:
    changes = await use_case.delete(ticket_id=ticket_id)
    return ChangesResponse(changes=changes)
