"""User model."""

from sqlalchemy import Column, Index, Integer, String, func

from blog_api.database import Base
from blog_api.models.enums import Role
from blog_api.models.mixins import SoftDeleteMixin, TimestampMixin


class User(Base, TimestampMixin, SoftDeleteMixin):
    """User model for authentication and authorship."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)  # stored lower-cased
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default=Role.USER.value)

    @property
    def role_enum(self) -> Role:
        return Role(self.role)

    @property
    def is_admin(self) -> bool:
        return self.role_enum.is_admin()


# Usernames are unique regardless of case
Index("uq_users_username_lower", func.lower(User.username), unique=True)
