"""Category model."""

from sqlalchemy import Column, Index, Integer, String, Text, func

from blog_api.database import Base
from blog_api.models.mixins import TimestampMixin


class Category(Base, TimestampMixin):
    """Category model for grouping posts."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)


# Category names are unique regardless of case
Index("uq_categories_name_lower", func.lower(Category.name), unique=True)
