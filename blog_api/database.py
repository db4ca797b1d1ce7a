"""Database configuration and session management."""

from collections.abc import Generator, Iterator
from contextlib import contextmanager
from typing import Any

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from blog_api.config import Settings
from blog_api.errors import ConflictError

Base: Any = declarative_base()


def create_db_engine(settings: Settings) -> Engine:
    """Create the engine and its bounded connection pool."""
    if settings.database_url.startswith("sqlite"):
        return create_engine(settings.database_url, connect_args={"check_same_thread": False})

    return create_engine(
        settings.database_url,
        pool_pre_ping=True,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency that checks a session out of the pool for one request."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def init_db(engine: Engine) -> None:
    """Initialize the database by creating all tables."""
    # Import all models here so they are registered with Base.metadata
    from blog_api import models  # noqa: F401

    Base.metadata.create_all(bind=engine)


@contextmanager
def atomic(db: Session, conflict_message: str = "Resource already exists") -> Iterator[Session]:
    """Run a block of statements as one transaction.

    Commits when the block finishes, rolls back on any exception. Integrity
    violations (unique indexes) surface as ``ConflictError``.
    """
    try:
        yield db
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError(conflict_message) from None
    except Exception:
        db.rollback()
        raise
