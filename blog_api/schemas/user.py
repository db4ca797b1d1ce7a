"""User schemas."""

from datetime import datetime

from pydantic import Field

from blog_api.models.enums import Role
from blog_api.schemas.base import APIModel, ORMModel


class UserResponse(ORMModel):
    """User information response."""

    id: int
    username: str
    email: str
    role: Role
    created_at: datetime


class AuthorSummary(ORMModel):
    """Author embedded in post and comment responses."""

    id: int
    username: str


class ProfileUpdate(APIModel):
    email: str | None = Field(None, max_length=255)


class PasswordChange(APIModel):
    current_password: str = Field(..., max_length=128)
    new_password: str = Field(..., max_length=128)


class RoleUpdate(APIModel):
    role: Role
