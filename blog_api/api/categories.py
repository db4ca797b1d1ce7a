"""Category API endpoints."""

from typing import Annotated

from fastapi import Depends

from blog_api.api.dependencies import get_category_service, get_current_user
from blog_api.models.user import User
from blog_api.schemas.category import CategoryCreate, CategoryUpdate
from blog_api.services.categories import CategoryService


def list_categories(
    categories: Annotated[CategoryService, Depends(get_category_service)],
):
    """Get all categories."""
    return categories.list_categories()


def get_category(
    category_id: int,
    categories: Annotated[CategoryService, Depends(get_category_service)],
):
    return categories.get_category(category_id)


def create_category(
    category_data: CategoryCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    categories: Annotated[CategoryService, Depends(get_category_service)],
):
    """Create a new category (admin only)."""
    return categories.create_category(category_data, current_user)


def update_category(
    category_id: int,
    category_data: CategoryUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    categories: Annotated[CategoryService, Depends(get_category_service)],
):
    """Update a category (admin only)."""
    return categories.update_category(category_id, category_data, current_user)


def delete_category(
    category_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    categories: Annotated[CategoryService, Depends(get_category_service)],
):
    """Delete a category (admin only). Its posts become uncategorized."""
    categories.delete_category(category_id, current_user)
