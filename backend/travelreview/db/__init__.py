"""Database package for ORM, engine and unit-of-work management."""

from .base import Base, get_session
from .session import get_engine, get_session_factory, reset_engine

__all__ = [
    "Base",
    "get_engine",
    "get_session",
    "get_session_factory",
    "reset_engine",
]
