"""Role and ownership rules for every operation the API exposes."""

from enum import Enum

from blog_api.errors import AuthenticationError, AuthorizationError
from blog_api.models.user import User


class Requirement(str, Enum):
    """What a caller needs in order to perform an operation."""

    PUBLIC = "public"
    AUTHENTICATED = "authenticated"
    OWNER_OR_ADMIN = "owner_or_admin"
    ADMIN = "admin"


class Operation(str, Enum):
    READ_POSTS = "read_posts"
    CREATE_POST = "create_post"
    UPDATE_POST = "update_post"
    DELETE_POST = "delete_post"
    READ_COMMENTS = "read_comments"
    CREATE_COMMENT = "create_comment"
    UPDATE_COMMENT = "update_comment"
    DELETE_COMMENT = "delete_comment"
    READ_CATEGORIES = "read_categories"
    CREATE_CATEGORY = "create_category"
    UPDATE_CATEGORY = "update_category"
    DELETE_CATEGORY = "delete_category"
    UPLOAD_IMAGE = "upload_image"
    MANAGE_PROFILE = "manage_profile"
    MANAGE_USERS = "manage_users"


RULES: dict[Operation, Requirement] = {
    Operation.READ_POSTS: Requirement.PUBLIC,
    Operation.CREATE_POST: Requirement.AUTHENTICATED,
    Operation.UPDATE_POST: Requirement.OWNER_OR_ADMIN,
    Operation.DELETE_POST: Requirement.OWNER_OR_ADMIN,
    Operation.READ_COMMENTS: Requirement.PUBLIC,
    Operation.CREATE_COMMENT: Requirement.AUTHENTICATED,
    Operation.UPDATE_COMMENT: Requirement.OWNER_OR_ADMIN,
    Operation.DELETE_COMMENT: Requirement.OWNER_OR_ADMIN,
    Operation.READ_CATEGORIES: Requirement.PUBLIC,
    Operation.CREATE_CATEGORY: Requirement.ADMIN,
    Operation.UPDATE_CATEGORY: Requirement.ADMIN,
    Operation.DELETE_CATEGORY: Requirement.ADMIN,
    Operation.UPLOAD_IMAGE: Requirement.AUTHENTICATED,
    Operation.MANAGE_PROFILE: Requirement.AUTHENTICATED,
    Operation.MANAGE_USERS: Requirement.ADMIN,
}


def authorize(operation: Operation, user: User | None, owner_id: int | None = None) -> None:
    """Raise unless ``user`` may perform ``operation``.

    ``owner_id`` is the author of the targeted resource and is only consulted
    for owner-or-admin operations.

    Raises:
        AuthenticationError: no authenticated user for a protected operation.
        AuthorizationError: authenticated but lacking role or ownership.
    """
    requirement = RULES[operation]
    if requirement == Requirement.PUBLIC:
        return
    if user is None:
        raise AuthenticationError("Authentication required")
    if requirement == Requirement.AUTHENTICATED:
        return
    if user.is_admin:
        return
    if requirement == Requirement.OWNER_OR_ADMIN and owner_id is not None and owner_id == user.id:
        return
    raise AuthorizationError(f"Not allowed to {operation.value.replace('_', ' ')}")


def can_view_draft(user: User | None, author_id: int) -> bool:
    """Unpublished posts are visible to their author and to admins."""
    return user is not None and (user.is_admin or user.id == author_id)
