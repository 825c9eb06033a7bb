"""Database base configuration and utilities."""

import logging
from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from backend.travelreview.config import Settings
from backend.travelreview.errors import ConflictError, StorageError, ValidationError

logger = logging.getLogger(__name__)

# SQLSTATE for check_violation
_PG_CHECK_VIOLATION = "23514"


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""

    pass


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """Turn on foreign key enforcement for every SQLite connection of an engine."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):  # type: ignore[no-untyped-def]
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def get_engine(settings: Settings) -> Engine:
    """Create and configure a SQLAlchemy engine.

    Args:
        settings: Application settings containing database URL.

    Returns:
        Configured SQLAlchemy engine.
    """
    engine = create_engine(
        settings.database_url,
        echo=settings.sql_echo,
        pool_pre_ping=settings.pool_pre_ping,  # Verify connections before using
    )
    enable_sqlite_foreign_keys(engine)
    return engine


def get_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a session factory for the given engine.

    Args:
        engine: SQLAlchemy engine to bind sessions to.

    Returns:
        Session factory.
    """
    return sessionmaker(bind=engine, expire_on_commit=False)


@contextmanager
def get_session(session_factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    """Context manager for one atomic unit of work.

    Commits when the block exits cleanly and rolls everything back otherwise,
    so a review mutation, its history row and the recomputed aggregate are
    applied together or not at all. Driver failures are re-raised as
    ``StorageError``, CHECK constraint violations as ``ValidationError`` and
    other integrity violations as ``ConflictError``.

    Args:
        session_factory: Session factory to create sessions from.

    Yields:
        Database session.

    Example:
        >>> from backend.travelreview.config import get_settings
        >>> settings = get_settings()
        >>> engine = get_engine(settings)
        >>> factory = get_session_factory(engine)
        >>> with get_session(factory) as session:
        ...     submit_review(session, review)
    """
    session = session_factory()
    try:
        yield session
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        if _is_check_violation(exc):
            raise ValidationError(str(exc.orig)) from exc
        raise ConflictError(str(exc.orig)) from exc
    except DBAPIError as exc:
        session.rollback()
        logger.error("storage_failure", extra={"error": str(exc.orig)})
        raise StorageError(str(exc.orig)) from exc
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def _is_check_violation(exc: IntegrityError) -> bool:
    """True when the integrity failure came from a CHECK constraint."""
    if getattr(exc.orig, "pgcode", None) == _PG_CHECK_VIOLATION:
        return True
    return "CHECK constraint failed" in str(exc.orig)
