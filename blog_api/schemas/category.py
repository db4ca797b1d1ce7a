"""Category schemas."""

from datetime import datetime

from pydantic import Field

from blog_api.schemas.base import APIModel, ORMModel


class CategoryCreate(APIModel):
    """Create a new category."""

    name: str = Field(..., max_length=100)
    description: str | None = Field(None, max_length=2000)


class CategoryUpdate(APIModel):
    """Update a category."""

    name: str | None = Field(None, max_length=100)
    description: str | None = Field(None, max_length=2000)


class CategoryResponse(ORMModel):
    """Category response."""

    id: int
    name: str
    description: str | None
    created_at: datetime
