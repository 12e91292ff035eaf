import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from student_api.core.config import Settings

logger = logging.getLogger(__name__)


def create_store_engine(settings: Settings) -> Engine:
    """
    Build the process-wide engine.

    pool_size: connections kept ready
    max_overflow: extra connections allowed under load
    """
    return create_engine(
        settings.sqlalchemy_url,
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
        pool_pre_ping=True,
        echo=settings.debug  # Log SQL queries in debug mode
    )


def ping_database(engine: Engine) -> bool:
    """
    Test if PostgreSQL is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        with engine.connect() as conn:
            row = conn.execute(text("SELECT 1 as test")).fetchone()
            return row[0] == 1
    except SQLAlchemyError as e:
        logger.warning("PostgreSQL connection failed: %s", e)
        return False
