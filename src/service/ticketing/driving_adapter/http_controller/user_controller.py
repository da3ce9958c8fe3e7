from typing import List, Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Cookie, Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.command.cancel_booked_event_use_case import (
    CancelBookedEventUseCase,
)
from src.service.ticketing.app.query.list_booked_events_use_case import ListBookedEventsUseCase
from src.service.ticketing.app.query.user_query_use_case import UserUseCase
from src.service.ticketing.domain.entity.user_entity import UserEntity
from src.service.ticketing.driving_adapter.http_controller.auth.jwt_auth import (
    AUTH_COOKIE_NAME,
    JwtAuth,
)
from src.service.ticketing.driving_adapter.http_controller.schema.event_schema import (
    EventResponse,
)
from src.service.ticketing.driving_adapter.http_controller.schema.ticket_schema import (
    ChangesResponse,
)
from src.service.ticketing.driving_adapter.http_controller.schema.user_schema import (
    CreateUserRequest,
    UserResponse,
)


# === API Router ===

router = APIRouter()

bearer_scheme = HTTPBearer(auto_error=False)


@inject
async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    token: Optional[str] = Cookie(None, alias=AUTH_COOKIE_NAME),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> UserEntity:
    """
    Get current user from JWT token (stateless, no DB query)

    The Authorization: Bearer header wins over the cookie when both are sent.
    """
    if credentials is not None:
        token = credentials.credentials
    return jwt_auth.get_current_user_info_from_jwt(token)


def _to_user_response(user_entity: UserEntity) -> UserResponse:
    return UserResponse(
        id=user_entity.id or 0,
        email=user_entity.email,
        name=user_entity.name,
        is_active=user_entity.is_active,
    )


@router.post('', response_model=UserResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_user(
    request: CreateUserRequest,
    use_case: UserUseCase = Depends(UserUseCase.depends),
) -> UserResponse:
    user_entity = await use_case.create_user(
        email=request.email,
        password=request.password.get_secret_value(),
        name=request.name,
    )
    return _to_user_response(user_entity)


@router.get('', response_model=List[UserResponse])
@Logger.io
async def list_users(use_case: UserUseCase = Depends(UserUseCase.depends)) -> List[UserResponse]:
    return [_to_user_response(user) for user in await use_case.list_users()]


@router.get('/me', response_model=UserResponse)
@Logger.io
async def get_me(current_user: UserEntity = Depends(get_current_user)) -> UserResponse:
    return _to_user_response(current_user)


@router.get('/me/booked-events', response_model=List[EventResponse])
@Logger.io
async def list_booked_events(
    current_user: UserEntity = Depends(get_current_user),
    use_case: ListBookedEventsUseCase = Depends(ListBookedEventsUseCase.depends),
) -> List[EventResponse]:
    events = await use_case.list_for_user(user_id=current_user.id or 0)
    return [EventResponse.model_validate(event) for event in events]


@router.delete('/me/booked-events/{event_id}', response_model=ChangesResponse)
@Logger.io
async def cancel_booked_event(
    event_id: int,
    current_user: UserEntity = Depends(get_current_user),
    use_case: CancelBookedEventUseCase = Depends(CancelBookedEventUseCase.depends),
) -> ChangesResponse:
    changes = await use_case.cancel(event_id=event_id, user_id=current_user.id or 0)
    return ChangesResponse(changes=changes)
