"""Authentication schemas."""

from datetime import datetime

from pydantic import EmailStr, Field

from src.schemas.base import CamelModel


class UserRegister(CamelModel):
    """User registration request."""

    email: EmailStr = Field(..., max_length=255)
    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=8, max_length=128)


class UserLogin(CamelModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class UserResponse(CamelModel):
    """User information response."""

    id: int
    email: str
    username: str
    created_at: datetime | None = None


class AuthResponse(CamelModel):
    """Authentication response with token and user info."""

    access_token: str
    token_type: str = "bearer"  # noqa: S105
    user: UserResponse
