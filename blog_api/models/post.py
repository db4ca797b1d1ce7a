"""Post model."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from blog_api.database import Base
from blog_api.models.mixins import TimestampMixin


class Post(Base, TimestampMixin):
    """Blog post written by a user, optionally filed under a category."""

    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    category_id = Column(
        Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True, index=True
    )
    author_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    image_url = Column(String(500), nullable=True)
    published = Column(Boolean, nullable=False, default=False, index=True)

    # Relationships (many-to-one only; dependent rows are removed explicitly by the services)
    author = relationship("User", foreign_keys=[author_id])
    category = relationship("Category", foreign_keys=[category_id])
