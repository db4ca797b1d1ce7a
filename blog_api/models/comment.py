"""Comment model."""

from sqlalchemy import Column, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from blog_api.database import Base
from blog_api.models.mixins import TimestampMixin


class Comment(Base, TimestampMixin):
    """Comment left on a post."""

    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, index=True)
    content = Column(Text, nullable=False)
    post_id = Column(
        Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True
    )
    author_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Relationships
    post = relationship("Post", foreign_keys=[post_id])
    author = relationship("User", foreign_keys=[author_id])
