"""Database session management."""

from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from backend.travelreview.config import get_settings
from backend.travelreview.db import base

# Create engine - singleton pattern
_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def get_engine() -> Engine:
    """Get SQLAlchemy engine singleton."""
    global _engine
    if _engine is None:
        _engine = base.get_engine(get_settings())
    return _engine


def get_session_factory() -> sessionmaker[Session]:
    """Get session factory singleton."""
    global _session_factory
    if _session_factory is None:
        _session_factory = base.get_session_factory(get_engine())
    return _session_factory


def reset_engine() -> None:
    """Dispose the engine singleton so the next call picks up fresh settings."""
    global _engine, _session_factory
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None
