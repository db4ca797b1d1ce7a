"""User account service."""

import logging

from sqlalchemy.orm import Session

from blog_api.database import atomic
from blog_api.errors import ConflictError, NotFoundError, ValidationError
from blog_api.models.enums import Role
from blog_api.models.user import User
from blog_api.schemas.user import PasswordChange, ProfileUpdate
from blog_api.services.auth import get_password_hash, verify_password
from blog_api.services.permissions import Operation, authorize
from blog_api.validation import validate_email, validate_password

logger = logging.getLogger(__name__)


class UserService:
    """Profile management for users and account administration for admins.

    Accounts are never hard-deleted: deactivation sets ``deleted_at`` and
    keeps the user's posts and comments in place.
    """

    def __init__(self, db: Session):
        self.db = db

    def _get(self, user_id: int) -> User:
        user = self.db.query(User).filter(User.id == user_id).first()
        if not user:
            raise NotFoundError("User not found")
        return user

    def get_profile(self, user: User) -> User:
        authorize(Operation.MANAGE_PROFILE, user)
        return user

    def update_profile(self, user: User, data: ProfileUpdate) -> User:
        authorize(Operation.MANAGE_PROFILE, user)
        if data.email is None:
            return user

        email = validate_email(data.email)
        clash = self.db.query(User.id).filter(User.email == email, User.id != user.id).first()
        if clash:
            raise ConflictError("Email is already registered")

        with atomic(self.db, "Email is already registered"):
            user.email = email
        self.db.refresh(user)
        return user

    def change_password(self, user: User, data: PasswordChange) -> None:
        authorize(Operation.MANAGE_PROFILE, user)
        if not verify_password(data.current_password, user.password_hash):
            raise ValidationError("Current password is incorrect")
        new_password = validate_password(data.new_password)

        with atomic(self.db):
            user.password_hash = get_password_hash(new_password)
        logger.info(f"User {user.id} changed their password")

    def list_users(self, admin: User, include_inactive: bool = False) -> list[User]:
        authorize(Operation.MANAGE_USERS, admin)
        query = self.db.query(User)
        if not include_inactive:
            query = query.filter(User.deleted_at.is_(None))
        return query.order_by(User.id).all()

    def set_role(self, user_id: int, role: Role, admin: User) -> User:
        authorize(Operation.MANAGE_USERS, admin)
        user = self._get(user_id)
        if user.id == admin.id and role != Role.ADMIN:
            raise ValidationError("Admins cannot remove their own admin role")

        with atomic(self.db):
            user.role = role.value
        self.db.refresh(user)
        logger.info(f"Admin {admin.id} set role of user {user.id} to {role.value}")
        return user

    def deactivate_user(self, user_id: int, admin: User) -> None:
        """Soft-delete an account. Its tokens stop working immediately."""
        authorize(Operation.MANAGE_USERS, admin)
        user = self._get(user_id)
        if user.id == admin.id:
            raise ValidationError("Admins cannot deactivate their own account")
        if user.is_deleted:
            return

        with atomic(self.db):
            user.soft_delete()
        logger.info(f"Admin {admin.id} deactivated user {user.id}")
