"""Tests for transaction handling."""

import pytest

from blog_api.database import atomic
from blog_api.errors import ConflictError
from blog_api.models.category import Category


def test_atomic_commits(db):
    with atomic(db):
        db.add(Category(name="Travel"))

    db.rollback()
    assert db.query(Category).filter(Category.name == "Travel").count() == 1


def test_atomic_integrity_error_becomes_conflict(db):
    with atomic(db):
        db.add(Category(name="Travel"))

    with pytest.raises(ConflictError) as exc_info:
        with atomic(db, "Category already exists"):
            db.add(Category(name="Travel"))
            db.add(Category(name="Food"))
    assert exc_info.value.message == "Category already exists"
    assert exc_info.value.status_code == 409

    # The whole block was rolled back and the session is usable again
    assert db.query(Category).count() == 1
    assert db.query(Category).filter(Category.name == "Food").count() == 0


def test_atomic_rolls_back_and_reraises(db):
    with pytest.raises(RuntimeError):
        with atomic(db):
            db.add(Category(name="Travel"))
            db.flush()
            raise RuntimeError("boom")

    assert db.query(Category).count() == 0
