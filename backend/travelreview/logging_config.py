"""Logging setup for scripts and embedding services."""

import logging

from backend.travelreview.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured log level to the root logger.

    Args:
        settings: Settings to read the level from (defaults to the singleton).
    """
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    # SQLAlchemy echo is driven by Settings.sql_echo, keep its logger quiet otherwise
    if not settings.sql_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
