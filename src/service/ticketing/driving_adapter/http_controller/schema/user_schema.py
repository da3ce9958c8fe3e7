"""
User API Schemas - Pydantic models for request/response
"""

from pydantic import BaseModel, EmailStr, Field, SecretStr


class CreateUserRequest(BaseModel):
    """Create user request schema"""

    email: EmailStr
    password: SecretStr = Field(
        ...,
        min_length=8,
        max_length=72,
        description='Password must be 8-72 characters (bcrypt limit)',
    )
    name: str = Field(..., min_length=1, max_length=100)

    class Config:
        json_schema_extra = {
            'example': {
                'email': 'user@example.com',
                'password': 'P@ssw0rd',
                'name': 'John Doe',
            }
        }


class LoginRequest(BaseModel):
    """User login request schema"""

    email: EmailStr
    password: SecretStr = Field(
        ..., min_length=1, max_length=72, description='User password (max 72 chars)'
    )

    class Config:
        json_schema_extra = {'example': {'email': 'user@example.com', 'password': 'P@ssw0rd'}}


class LoginResponse(BaseModel):
    token: str
    token_type: str = 'bearer'


class UserResponse(BaseModel):
    """User response schema"""

    id: int
    email: str
    name: str
    is_active: bool

    class Config:
        from_attributes = True
        json_schema_extra = {
            'example': {
                'id': 1,
                'email': 'user@example.com',
                'name': 'John Doe',
                'is_active': True,
            }
        }
