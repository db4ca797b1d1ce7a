"""Authentication schemas."""

from datetime import datetime

from pydantic import Field

from blog_api.schemas.base import APIModel, ORMModel


class UserRegister(APIModel):
    """User registration request."""

    username: str = Field(..., max_length=50)
    email: str = Field(..., max_length=255)
    password: str = Field(..., max_length=128)


class UserLogin(APIModel):
    """User login request. ``username`` may also be the account email."""

    username: str = Field(..., max_length=255)
    password: str = Field(..., max_length=128)


class RefreshRequest(APIModel):
    refresh_token: str


class RegisteredUser(ORMModel):
    """Registration response."""

    id: int
    username: str
    email: str


class TokenPair(APIModel):
    """Login response."""

    access_token: str
    refresh_token: str
    token_type: str = "bearer"  # noqa: S105
    expires_at: datetime


class AccessToken(APIModel):
    """Refresh response."""

    access_token: str
    token_type: str = "bearer"  # noqa: S105
    expires_at: datetime
