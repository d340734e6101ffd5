"""Database initialization utilities."""

import logging

from sqlalchemy.engine import Engine

from booking_agent.db import models  # noqa: F401 - ensure model metadata is registered
from booking_agent.db.session import Base, engine

logger = logging.getLogger(__name__)


def init_db(bind: Engine = engine) -> None:
    """Create all tables that do not exist yet."""
    Base.metadata.create_all(bind=bind)
    logger.info("Database tables ensured on %s", bind.url.render_as_string(hide_password=True))
