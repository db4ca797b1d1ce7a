"""Authentication API endpoints."""

from typing import Annotated

from fastapi import Depends

from blog_api.api.dependencies import get_auth_service
from blog_api.schemas.auth import RefreshRequest, UserLogin, UserRegister
from blog_api.services.auth import AuthService


def register(
    user_data: UserRegister,
    auth: Annotated[AuthService, Depends(get_auth_service)],
):
    """Register a new user."""
    return auth.register(user_data)


def login(
    credentials: UserLogin,
    auth: Annotated[AuthService, Depends(get_auth_service)],
):
    """Login with username (or email) and password."""
    return auth.login(credentials.username, credentials.password)


def refresh(
    request_data: RefreshRequest,
    auth: Annotated[AuthService, Depends(get_auth_service)],
):
    """Exchange a refresh token for a new access token."""
    return auth.refresh(request_data.refresh_token)
