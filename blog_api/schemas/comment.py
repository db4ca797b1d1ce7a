"""Comment schemas."""

from datetime import datetime

from blog_api.schemas.base import APIModel, ORMModel
from blog_api.schemas.user import AuthorSummary


class CommentCreate(APIModel):
    content: str


class CommentUpdate(APIModel):
    content: str


class CommentResponse(ORMModel):
    """Comment response."""

    id: int
    content: str
    post_id: int
    author_id: int
    author: AuthorSummary
    created_at: datetime
    updated_at: datetime
