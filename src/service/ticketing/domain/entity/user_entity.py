from datetime import datetime
from typing import TYPE_CHECKING, Optional

import attrs
from pydantic import SecretStr

from src.platform.exception.exceptions import AuthenticationError, ForbiddenError


if TYPE_CHECKING:
    from src.service.ticketing.app.interface.i_password_hasher import IPasswordHasher


@attrs.define
class UserEntity:
    email: str = ''
    name: str = ''
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    id: Optional[int] = None
    is_active: bool = True
    created_at: Optional[datetime] = None

    def validate_active(self) -> None:
        if not self.is_active:
            raise ForbiddenError('User is inactive')

    @staticmethod
    def validate_user_exists(user_entity: Optional['UserEntity']) -> 'UserEntity':
        if not user_entity:
            raise AuthenticationError('Invalid credentials')

        return user_entity

    def set_password(self, plain_password: str, password_hasher: 'IPasswordHasher') -> None:
        """Set password using provided password hasher"""
        from src.service.ticketing.app.interface.i_password_hasher import IPasswordHasher

        if not isinstance(password_hasher, IPasswordHasher):
            raise TypeError('password_hasher must implement IPasswordHasher interface')

        self.hashed_password = password_hasher.hash_password(
            plain_password=SecretStr(plain_password)
        )
