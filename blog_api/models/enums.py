"""Enums for model fields."""

from enum import Enum


class Role(str, Enum):
    """Roles a user can hold."""

    ADMIN = "ADMIN"
    USER = "USER"

    @property
    def authority(self) -> str:
        """Authority string carried in tokens, e.g. ``ROLE_ADMIN``."""
        return f"ROLE_{self.value}"

    def is_admin(self) -> bool:
        return self == Role.ADMIN
