"""
User Management Use Cases (Use Case Layer)
"""

from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_password_hasher import IPasswordHasher
from src.service.ticketing.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.ticketing.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.ticketing.domain.entity.user_entity import UserEntity


class UserUseCase:
    """User management use case class with proper dependency injection (CQRS)"""

    def __init__(
        self,
        *,
        user_command_repo: IUserCommandRepo,
        user_query_repo: IUserQueryRepo,
        password_hasher: IPasswordHasher,
    ) -> None:
        self.user_command_repo = user_command_repo
        self.user_query_repo = user_query_repo
        self.password_hasher = password_hasher

    @classmethod
    @inject
    def depends(
        cls,
        user_command_repo: IUserCommandRepo = Depends(Provide[Container.user_command_repo]),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
    ) -> Self:
        return cls(
            user_command_repo=user_command_repo,
            user_query_repo=user_query_repo,
            password_hasher=password_hasher,
        )

    @Logger.io
    async def create_user(self, *, email: str, password: str, name: str) -> UserEntity:
        if await self.user_query_repo.get_by_email(email) is not None:
            raise ConflictError('Email already registered')

        user_entity = UserEntity(email=email, name=name, is_active=True)
        user_entity.set_password(password, self.password_hasher)
        created = await self.user_command_repo.create(user_entity)

        Logger.base.info(f'👤 [USER] Registered user {created.id}')
        return created

    async def get_user_by_id(self, user_id: int) -> UserEntity | None:
        return await self.user_query_repo.get_by_id(user_id)

    @Logger.io(truncate_content=True)
    async def list_users(self) -> List[UserEntity]:
        return await self.user_query_repo.list_all()
