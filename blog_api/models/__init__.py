"""SQLAlchemy models."""

from blog_api.models.category import Category
from blog_api.models.comment import Comment
from blog_api.models.enums import Role
from blog_api.models.post import Post
from blog_api.models.user import User

__all__ = [
    "User",
    "Role",
    "Category",
    "Post",
    "Comment",
]
