"""User API endpoints."""

from typing import Annotated

from fastapi import Depends, Query

from blog_api.api.dependencies import get_current_user, get_user_service
from blog_api.models.user import User
from blog_api.schemas.user import PasswordChange, ProfileUpdate, RoleUpdate
from blog_api.services.users import UserService


def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Get current user information."""
    return users.get_profile(current_user)


def update_me(
    profile_data: ProfileUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    users: Annotated[UserService, Depends(get_user_service)],
):
    return users.update_profile(current_user, profile_data)


def change_password(
    password_data: PasswordChange,
    current_user: Annotated[User, Depends(get_current_user)],
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Change the current user's password."""
    users.change_password(current_user, password_data)


def list_users(
    current_user: Annotated[User, Depends(get_current_user)],
    users: Annotated[UserService, Depends(get_user_service)],
    include_inactive: bool = Query(default=False, alias="includeInactive"),
):
    """List user accounts (admin only)."""
    return users.list_users(current_user, include_inactive=include_inactive)


def set_role(
    user_id: int,
    role_data: RoleUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Grant or revoke the admin role (admin only)."""
    return users.set_role(user_id, role_data.role, current_user)


def deactivate_user(
    user_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Deactivate an account (admin only). Posts and comments are kept."""
    users.deactivate_user(user_id, current_user)
