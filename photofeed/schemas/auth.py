"""Auth API schemas."""

from datetime import datetime

from pydantic import EmailStr, Field

from photofeed.application.dtos.user import UserResult
from photofeed.domain.enums import UserRole
from photofeed.schemas.common import CamelModel

USERNAME_PATTERN = r"^[A-Za-z0-9_.]+$"


class RegisterRequest(CamelModel):
    """Request body for public registration."""

    email: EmailStr
    username: str = Field(..., min_length=3, max_length=30, pattern=USERNAME_PATTERN)
    password: str = Field(..., min_length=8, description="Password (min 8 characters)")


class LoginRequest(CamelModel):
    """Request body for login (email + password)."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class TokenResponse(CamelModel):
    """JWT token response."""

    access_token: str
    token_type: str = "bearer"


class UserResponse(CamelModel):
    """Current user (no password)."""

    id: str
    username: str
    email: str
    role: UserRole
    avatar_url: str | None = None
    created_at: datetime

    @classmethod
    def from_result(cls, user: UserResult) -> "UserResponse":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            role=user.role,
            avatar_url=user.profile_image_url,
            created_at=user.created_at,
        )
