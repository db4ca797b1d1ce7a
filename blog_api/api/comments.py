"""Comment API endpoints."""

from typing import Annotated

from fastapi import Depends

from blog_api.api.dependencies import get_comment_service, get_current_user, get_optional_user
from blog_api.models.user import User
from blog_api.schemas.comment import CommentCreate, CommentUpdate
from blog_api.services.comments import CommentService


def list_comments(
    post_id: int,
    viewer: Annotated[User | None, Depends(get_optional_user)],
    comments: Annotated[CommentService, Depends(get_comment_service)],
):
    """Get all comments on a post."""
    return comments.list_comments(post_id, viewer)


def create_comment(
    post_id: int,
    comment_data: CommentCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    comments: Annotated[CommentService, Depends(get_comment_service)],
):
    """Comment on a post."""
    return comments.create_comment(post_id, comment_data, current_user)


def update_comment(
    comment_id: int,
    comment_data: CommentUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    comments: Annotated[CommentService, Depends(get_comment_service)],
):
    """Edit a comment (author or admin)."""
    return comments.update_comment(comment_id, comment_data, current_user)


def delete_comment(
    comment_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    comments: Annotated[CommentService, Depends(get_comment_service)],
):
    """Delete a comment (author or admin)."""
    comments.delete_comment(comment_id, current_user)
