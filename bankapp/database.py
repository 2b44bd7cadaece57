"""
Database connection and session management.
Uses SQLAlchemy for ORM, connection pooling and transaction scoping.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from bankapp.core.config import settings
from bankapp.core.errors import InternalError

log = logging.getLogger(__name__)


def engine_options(url: str) -> dict:
    """Engine keyword arguments appropriate for the given database URL."""
    options = {"echo": settings.DB_ECHO, "pool_pre_ping": True}
    if url.startswith("sqlite"):
        # FastAPI runs sync endpoints in a thread pool
        options["connect_args"] = {"check_same_thread": False}
    else:
        options["pool_size"] = settings.DB_POOL_SIZE
        options["max_overflow"] = settings.DB_MAX_OVERFLOW
    return options


# Create database engine
engine = create_engine(settings.DATABASE_URL, **engine_options(settings.DATABASE_URL))

# Create session factory
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

# Base class for models
Base = declarative_base()


def get_db():
    """
    Dependency function to get database session.
    Yields session and ensures it's closed after use.

    Closing a session with an open transaction rolls it back, so a request
    that is abandoned mid-operation leaves no partial writes behind.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def atomic_unit(db: Session) -> Iterator[Session]:
    """
    Scope one atomic unit of work on ``db``.

    Commits when the block exits normally. Any exception, including
    cancellation, rolls back every change made in the block before it
    propagates. Store failures are logged and surfaced as ``InternalError``.

    Usage:
        with atomic_unit(db):
            account = lock_accounts(db, [account_id])[account_id]
            ...
    """
    try:
        yield db
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        log.exception("Atomic unit rolled back after store failure")
        raise InternalError() from exc
    except BaseException:
        db.rollback()
        raise
