"""Post API endpoints."""

from typing import Annotated

from fastapi import Depends, Query

from blog_api.api.dependencies import get_current_user, get_optional_user, get_post_service
from blog_api.models.user import User
from blog_api.schemas.post import PostCreate, PostUpdate
from blog_api.services.posts import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, PostService


def list_posts(
    viewer: Annotated[User | None, Depends(get_optional_user)],
    posts: Annotated[PostService, Depends(get_post_service)],
    published: bool | None = Query(default=None, description="Filter by published state"),
    category_id: int | None = Query(default=None, alias="categoryId"),
    author_id: int | None = Query(default=None, alias="authorId"),
    limit: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    offset: int = Query(default=0, ge=0),
):
    """List posts. Anonymous callers only see published posts."""
    return posts.list_posts(
        viewer,
        published=published,
        category_id=category_id,
        author_id=author_id,
        limit=limit,
        offset=offset,
    )


def get_post(
    post_id: int,
    viewer: Annotated[User | None, Depends(get_optional_user)],
    posts: Annotated[PostService, Depends(get_post_service)],
):
    """Get a single post."""
    return posts.get_post(post_id, viewer)


def create_post(
    post_data: PostCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    posts: Annotated[PostService, Depends(get_post_service)],
):
    """Create a new post authored by the current user."""
    return posts.create_post(post_data, current_user)


def update_post(
    post_id: int,
    post_data: PostUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    posts: Annotated[PostService, Depends(get_post_service)],
):
    """Update a post (author or admin)."""
    return posts.update_post(post_id, post_data, current_user)


async def delete_post(
    post_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    posts: Annotated[PostService, Depends(get_post_service)],
):
    """Delete a post and all of its comments (author or admin)."""
    await posts.delete_post(post_id, current_user)
