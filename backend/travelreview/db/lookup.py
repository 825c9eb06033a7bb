"""Primary-key lookup helpers that raise the core NotFoundError.

Foreign references are checked explicitly before writes so a dangling id is
reported as NotFoundError rather than as a driver-level integrity failure.
"""

from typing import Any, TypeVar

from sqlalchemy.orm import Session

from backend.travelreview.errors import NotFoundError

# Type variable for ORM models
T = TypeVar("T")


def require(session: Session, model: type[T], key: Any) -> T:
    """
    Get a row by primary key or raise NotFoundError.

    Args:
        session: SQLAlchemy session
        model: ORM model class
        key: Primary key value (tuple for composite keys)

    Returns:
        The model instance

    Example:
        place = require(session, Place, place_id)
    """
    instance = session.get(model, key)
    if instance is None:
        raise NotFoundError(model.__name__, key)
    return instance


def exists(session: Session, model: type[T], key: Any) -> bool:
    """Return True if a row with this primary key exists."""
    return session.get(model, key) is not None
