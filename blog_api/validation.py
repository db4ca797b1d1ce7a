"""Input validation invoked at the start of each service operation.

Pydantic schemas take care of shape and types; the rules here are the
business constraints on field contents.
"""

import re

from blog_api.errors import ValidationError

USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_.-]{3,50}$")
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

PASSWORD_MIN_LENGTH = 8
# bcrypt only looks at the first 72 bytes
PASSWORD_MAX_BYTES = 72

TITLE_MAX_LENGTH = 255
CATEGORY_NAME_MAX_LENGTH = 100
COMMENT_MAX_LENGTH = 5000


def require_text(value: str | None, field: str, max_length: int | None = None) -> str:
    """Return the stripped value, rejecting missing or blank input."""
    if value is None or not value.strip():
        raise ValidationError(f"{field} must not be blank")
    value = value.strip()
    if max_length is not None and len(value) > max_length:
        raise ValidationError(f"{field} must be at most {max_length} characters")
    return value


def validate_username(username: str | None) -> str:
    username = require_text(username, "username")
    if not USERNAME_PATTERN.match(username):
        raise ValidationError(
            "username must be 3-50 characters of letters, digits, '.', '_' or '-'"
        )
    return username


def validate_email(email: str | None) -> str:
    """Validate an email address and return it lower-cased."""
    email = require_text(email, "email", max_length=255)
    if not EMAIL_PATTERN.match(email):
        raise ValidationError("email is not a valid address")
    return email.lower()


def validate_password(password: str | None) -> str:
    if password is None or len(password) < PASSWORD_MIN_LENGTH:
        raise ValidationError(f"password must be at least {PASSWORD_MIN_LENGTH} characters")
    if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValidationError(f"password must be at most {PASSWORD_MAX_BYTES} bytes")
    return password


def validate_post_fields(title: str | None, content: str | None) -> tuple[str, str]:
    return (
        require_text(title, "title", max_length=TITLE_MAX_LENGTH),
        require_text(content, "content"),
    )


def validate_comment_content(content: str | None) -> str:
    return require_text(content, "content", max_length=COMMENT_MAX_LENGTH)


def validate_category_name(name: str | None) -> str:
    return require_text(name, "name", max_length=CATEGORY_NAME_MAX_LENGTH)


def validate_image_url(url: str | None) -> str | None:
    """Image references are optional but must be http(s) URLs when given."""
    if url is None or not url.strip():
        return None
    url = url.strip()
    if not url.startswith(("http://", "https://")):
        raise ValidationError("imageUrl must be an http(s) URL")
    return url
