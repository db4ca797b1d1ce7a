"""Column mixins shared by the blog models."""

from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, func


class TimestampMixin:
    """Server-managed ``created_at``/``updated_at`` columns.

    Both are set by the database, so client-supplied timestamps never reach them.
    Listings order by ``created_at``.
    """

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class SoftDeleteMixin:
    """Account deactivation without removing the row.

    A deactivated account keeps its posts and comments, and its username and
    email stay reserved. It can no longer log in or use previously issued tokens.
    """

    deleted_at = Column(DateTime(timezone=True), nullable=True)

    @property
    def is_deleted(self) -> bool:
        """True once the account has been deactivated."""
        return self.deleted_at is not None

    def soft_delete(self) -> None:
        """Deactivate the account; authored content is left untouched."""
        self.deleted_at = datetime.now(UTC)

    def restore(self) -> None:
        """Reactivate a deactivated account (used when re-promoting an admin)."""
        self.deleted_at = None
