"""Category service."""

import logging

from sqlalchemy import func
from sqlalchemy.orm import Session

from blog_api.database import atomic
from blog_api.errors import ConflictError, NotFoundError
from blog_api.models.category import Category
from blog_api.models.post import Post
from blog_api.models.user import User
from blog_api.schemas.category import CategoryCreate, CategoryUpdate
from blog_api.services.permissions import Operation, authorize
from blog_api.validation import validate_category_name

logger = logging.getLogger(__name__)

DUPLICATE_NAME = "A category with this name already exists"


class CategoryService:
    """Service for category-related operations.

    Names are unique without regard to case: "Tech" and "tech" collide.
    """

    def __init__(self, db: Session):
        self.db = db

    def _ensure_unique_name(self, name: str, exclude_id: int | None = None) -> None:
        query = self.db.query(Category.id).filter(func.lower(Category.name) == name.lower())
        if exclude_id is not None:
            query = query.filter(Category.id != exclude_id)
        if query.first():
            raise ConflictError(DUPLICATE_NAME)

    def list_categories(self) -> list[Category]:
        authorize(Operation.READ_CATEGORIES, None)
        return self.db.query(Category).order_by(Category.name).all()

    def get_category(self, category_id: int) -> Category:
        category = self.db.query(Category).filter(Category.id == category_id).first()
        if not category:
            raise NotFoundError("Category not found")
        return category

    def create_category(self, data: CategoryCreate, user: User) -> Category:
        authorize(Operation.CREATE_CATEGORY, user)
        name = validate_category_name(data.name)
        self._ensure_unique_name(name)

        category = Category(name=name, description=data.description)
        with atomic(self.db, DUPLICATE_NAME):
            self.db.add(category)
        self.db.refresh(category)
        logger.info(f"Admin {user.id} created category {category.id} ({category.name})")
        return category

    def update_category(self, category_id: int, data: CategoryUpdate, user: User) -> Category:
        authorize(Operation.UPDATE_CATEGORY, user)
        category = self.get_category(category_id)

        name = None
        if data.name is not None:
            name = validate_category_name(data.name)
            self._ensure_unique_name(name, exclude_id=category.id)

        with atomic(self.db, DUPLICATE_NAME):
            if name is not None:
                category.name = name
            if data.description is not None:
                category.description = data.description
        self.db.refresh(category)
        return category

    def delete_category(self, category_id: int, user: User) -> None:
        """Delete a category. Its posts stay, and become uncategorized."""
        authorize(Operation.DELETE_CATEGORY, user)
        category = self.get_category(category_id)

        with atomic(self.db):
            detached = (
                self.db.query(Post)
                .filter(Post.category_id == category.id)
                .update({Post.category_id: None})
            )
            self.db.delete(category)
        logger.info(f"Admin {user.id} deleted category {category_id} ({detached} posts detached)")
