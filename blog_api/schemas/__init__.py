"""Pydantic schemas for API requests and responses."""

from blog_api.schemas.auth import (
    AccessToken,
    RefreshRequest,
    RegisteredUser,
    TokenPair,
    UserLogin,
    UserRegister,
)
from blog_api.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from blog_api.schemas.comment import CommentCreate, CommentResponse, CommentUpdate
from blog_api.schemas.error import ErrorResponse
from blog_api.schemas.post import PostCreate, PostResponse, PostUpdate
from blog_api.schemas.upload import ImageUploadResponse
from blog_api.schemas.user import (
    AuthorSummary,
    PasswordChange,
    ProfileUpdate,
    RoleUpdate,
    UserResponse,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "RefreshRequest",
    "RegisteredUser",
    "TokenPair",
    "AccessToken",
    "UserResponse",
    "AuthorSummary",
    "ProfileUpdate",
    "PasswordChange",
    "RoleUpdate",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "PostCreate",
    "PostUpdate",
    "PostResponse",
    "CommentCreate",
    "CommentUpdate",
    "CommentResponse",
    "ImageUploadResponse",
    "ErrorResponse",
]
