"""Tests for input validation helpers."""

import pytest

from blog_api.errors import ValidationError
from blog_api.validation import (
    require_text,
    validate_category_name,
    validate_email,
    validate_image_url,
    validate_password,
    validate_post_fields,
    validate_username,
)


def test_require_text_strips():
    assert require_text("  hello ", "field") == "hello"


@pytest.mark.parametrize("value", [None, "", "   "])
def test_require_text_rejects_blank(value):
    with pytest.raises(ValidationError, match="field must not be blank"):
        require_text(value, "field")


def test_require_text_max_length():
    with pytest.raises(ValidationError):
        require_text("x" * 11, "field", max_length=10)


@pytest.mark.parametrize("username", ["alice", "bob_smith", "j.doe-2"])
def test_valid_usernames(username):
    assert validate_username(username) == username


@pytest.mark.parametrize("username", ["ab", "has space", "semi;colon", "x" * 51])
def test_invalid_usernames(username):
    with pytest.raises(ValidationError):
        validate_username(username)


def test_email_lowercased():
    assert validate_email(" Bob@Example.COM ") == "bob@example.com"


@pytest.mark.parametrize("email", ["bob", "bob@", "@example.com", "bob@example"])
def test_invalid_emails(email):
    with pytest.raises(ValidationError):
        validate_email(email)


def test_password_length_limits():
    assert validate_password("eightchr") == "eightchr"
    with pytest.raises(ValidationError):
        validate_password("short")
    with pytest.raises(ValidationError):
        validate_password("a" * 73)


def test_post_fields():
    assert validate_post_fields(" Hi ", "World") == ("Hi", "World")
    with pytest.raises(ValidationError):
        validate_post_fields("Hi", "")


def test_category_name_length():
    with pytest.raises(ValidationError):
        validate_category_name("x" * 101)


def test_image_url():
    assert validate_image_url(None) is None
    assert validate_image_url(" ") is None
    assert validate_image_url("https://cdn.example.com/a.png") == "https://cdn.example.com/a.png"
    with pytest.raises(ValidationError):
        validate_image_url("ftp://example.com/a.png")
