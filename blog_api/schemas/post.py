"""Post schemas."""

from datetime import datetime

from pydantic import Field

from blog_api.schemas.base import APIModel, ORMModel
from blog_api.schemas.user import AuthorSummary


class PostCreate(APIModel):
    """Create a new post."""

    title: str = Field(..., max_length=255)
    content: str
    category_id: int | None = None
    image_url: str | None = Field(None, max_length=500)
    published: bool = False


class PostUpdate(APIModel):
    """Update a post. Omitted fields are left unchanged."""

    title: str | None = Field(None, max_length=255)
    content: str | None = None
    category_id: int | None = None
    image_url: str | None = Field(None, max_length=500)
    published: bool | None = None


class PostResponse(ORMModel):
    """Post response."""

    id: int
    title: str
    content: str
    category_id: int | None
    author_id: int
    author: AuthorSummary
    image_url: str | None
    published: bool
    created_at: datetime
    updated_at: datetime
