"""FastAPI dependencies for authentication, database and service assembly."""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from blog_api.database import get_db
from blog_api.errors import AuthenticationError
from blog_api.models.user import User
from blog_api.services.auth import AuthService, TokenService
from blog_api.services.categories import CategoryService
from blog_api.services.comments import CommentService
from blog_api.services.images import ImageService
from blog_api.services.posts import PostService
from blog_api.services.users import UserService

# Public routes accept anonymous callers, so a missing header is not an error here
security = HTTPBearer(auto_error=False)


def get_token_service(request: Request) -> TokenService:
    return request.app.state.tokens


def get_image_service(request: Request) -> ImageService:
    return request.app.state.images


def get_auth_service(
    db: Annotated[Session, Depends(get_db)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(db, tokens)


def get_optional_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> User | None:
    """Resolve the caller from a bearer token, or None for anonymous requests.

    A token that is present but invalid is rejected rather than treated as
    anonymous.
    """
    if credentials is None:
        return None
    return auth.resolve_user(credentials.credentials)


def get_current_user(
    user: Annotated[User | None, Depends(get_optional_user)],
) -> User:
    """Get the current authenticated user from JWT token."""
    if user is None:
        raise AuthenticationError("Authentication required")
    return user


def get_post_service(
    db: Annotated[Session, Depends(get_db)],
    images: Annotated[ImageService, Depends(get_image_service)],
) -> PostService:
    """Get post service with dependencies."""
    return PostService(db, images)


def get_comment_service(
    db: Annotated[Session, Depends(get_db)],
    posts: Annotated[PostService, Depends(get_post_service)],
) -> CommentService:
    """Get comment service with dependencies."""
    return CommentService(db, posts)


def get_category_service(
    db: Annotated[Session, Depends(get_db)],
) -> CategoryService:
    return CategoryService(db)


def get_user_service(
    db: Annotated[Session, Depends(get_db)],
) -> UserService:
    return UserService(db)
