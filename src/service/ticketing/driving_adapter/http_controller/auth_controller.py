from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Response

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.ticketing.driving_adapter.http_controller.auth.jwt_auth import (
    AUTH_COOKIE_NAME,
    JwtAuth,
)
from src.service.ticketing.driving_adapter.http_controller.schema.user_schema import (
    LoginRequest,
    LoginResponse,
)


router = APIRouter()


@router.post('/login', response_model=LoginResponse)
@Logger.io
@inject
async def login(
    response: Response,
    request: LoginRequest,
    user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> LoginResponse:
    user_entity = await jwt_auth.authenticate_user(
        user_query_repo=user_query_repo,
        email=request.email,
        password=request.password.get_secret_value(),
    )

    token = jwt_auth.create_jwt_token(user_entity)

    response.set_cookie(
        key=AUTH_COOKIE_NAME,
        value=token,
        max_age=jwt_auth.max_age_seconds,
        httponly=True,
        samesite='lax',
        secure=False,  # Set to True in production
    )

    Logger.base.info(f'🔑 [AUTH] User {user_entity.id} logged in')
    return LoginResponse(token=token)
