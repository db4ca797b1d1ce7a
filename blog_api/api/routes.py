"""Route table: every endpoint the API serves, by method and path."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fastapi import APIRouter, status

from blog_api.api import auth, categories, comments, posts, uploads, users
from blog_api.schemas.auth import AccessToken, RegisteredUser, TokenPair
from blog_api.schemas.category import CategoryResponse
from blog_api.schemas.comment import CommentResponse
from blog_api.schemas.error import ErrorResponse
from blog_api.schemas.post import PostResponse
from blog_api.schemas.upload import ImageUploadResponse
from blog_api.schemas.user import UserResponse


@dataclass(frozen=True)
class Route:
    method: str
    path: str
    endpoint: Callable[..., Any]
    tag: str
    response_model: Any = None
    status_code: int = status.HTTP_200_OK


CREATED = status.HTTP_201_CREATED
NO_CONTENT = status.HTTP_204_NO_CONTENT

ROUTES: list[Route] = [
    # Auth
    Route("POST", "/api/auth/register", auth.register, "auth", RegisteredUser, CREATED),
    Route("POST", "/api/auth/login", auth.login, "auth", TokenPair),
    Route("POST", "/api/auth/refresh", auth.refresh, "auth", AccessToken),
    # Posts
    Route("GET", "/api/posts", posts.list_posts, "posts", list[PostResponse]),
    Route("GET", "/api/posts/{post_id}", posts.get_post, "posts", PostResponse),
    Route("POST", "/api/posts", posts.create_post, "posts", PostResponse, CREATED),
    Route("PUT", "/api/posts/{post_id}", posts.update_post, "posts", PostResponse),
    Route("DELETE", "/api/posts/{post_id}", posts.delete_post, "posts", None, NO_CONTENT),
    # Comments
    Route(
        "GET",
        "/api/posts/{post_id}/comments",
        comments.list_comments,
        "comments",
        list[CommentResponse],
    ),
    Route(
        "POST",
        "/api/posts/{post_id}/comments",
        comments.create_comment,
        "comments",
        CommentResponse,
        CREATED,
    ),
    Route(
        "PUT", "/api/comments/{comment_id}", comments.update_comment, "comments", CommentResponse
    ),
    Route(
        "DELETE",
        "/api/comments/{comment_id}",
        comments.delete_comment,
        "comments",
        None,
        NO_CONTENT,
    ),
    # Categories
    Route(
        "GET", "/api/categories", categories.list_categories, "categories", list[CategoryResponse]
    ),
    Route(
        "GET",
        "/api/categories/{category_id}",
        categories.get_category,
        "categories",
        CategoryResponse,
    ),
    Route(
        "POST",
        "/api/categories",
        categories.create_category,
        "categories",
        CategoryResponse,
        CREATED,
    ),
    Route(
        "PUT",
        "/api/categories/{category_id}",
        categories.update_category,
        "categories",
        CategoryResponse,
    ),
    Route(
        "DELETE",
        "/api/categories/{category_id}",
        categories.delete_category,
        "categories",
        None,
        NO_CONTENT,
    ),
    # Uploads
    Route("POST", "/api/uploads/image", uploads.upload_image, "uploads", ImageUploadResponse),
    # Users
    Route("GET", "/api/users/me", users.get_me, "users", UserResponse),
    Route("PUT", "/api/users/me", users.update_me, "users", UserResponse),
    Route("PUT", "/api/users/me/password", users.change_password, "users", None, NO_CONTENT),
    Route("GET", "/api/users", users.list_users, "users", list[UserResponse]),
    Route("PUT", "/api/users/{user_id}/role", users.set_role, "users", UserResponse),
    Route("DELETE", "/api/users/{user_id}", users.deactivate_user, "users", None, NO_CONTENT),
]

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    code: {"model": ErrorResponse} for code in (400, 401, 403, 404, 409)
}


def build_router(routes: list[Route] = ROUTES) -> APIRouter:
    """Register every route in the table on a fresh router."""
    router = APIRouter()
    for route in routes:
        router.add_api_route(
            route.path,
            route.endpoint,
            methods=[route.method],
            response_model=route.response_model,
            status_code=route.status_code,
            tags=[route.tag],
            responses=ERROR_RESPONSES,
        )
    return router
