"""
Database engine, session dependency and connectivity probe.

The engine is pooled (10 open, 5 idle, 30 minute lifetime by default) and
shared by every request; SQLAlchemy's pool is thread-safe.
"""

import logging
import time
from typing import Any, Dict

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from app.core.config import Settings, settings

logger = logging.getLogger(__name__)

PING_INTERVAL = 0.2  # seconds between probe attempts


def engine_options(config: Settings) -> Dict[str, Any]:
    """
    Translate pool settings into create_engine() keyword arguments.

    DB_MAX_IDLE_CONNS connections are kept in the pool; the remainder up to
    DB_MAX_OPEN_CONNS are allowed as overflow and closed when returned.
    """
    return {
        "pool_size": config.DB_MAX_IDLE_CONNS,
        "max_overflow": max(config.DB_MAX_OPEN_CONNS - config.DB_MAX_IDLE_CONNS, 0),
        "pool_recycle": config.DB_CONN_MAX_LIFETIME,
        "pool_pre_ping": True,  # Verify connections before using them
    }


# Create SQLAlchemy engine
engine = create_engine(settings.DATABASE_URL, **engine_options(settings))

# Rows returned by a statement stay usable after commit without a refresh query
SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)

# Create Base class for models
Base = declarative_base()


def get_db():
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_engine() -> Engine:
    """Dependency returning the shared engine (overridden in tests)."""
    return engine


def _check(bind: Engine) -> None:
    with bind.connect() as conn:
        conn.execute(text("SELECT 1"))


def ping_db(bind: Engine, timeout: float, interval: float = PING_INTERVAL) -> None:
    """
    Block until the database answers or the timeout elapses.

    Polls every `interval` seconds. Once the deadline passes, one final check
    is made and its error, if any, propagates to the caller.

    Raises:
        SQLAlchemyError: If the database is still unreachable at the deadline
    """
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        try:
            _check(bind)
            return
        except SQLAlchemyError as e:
            logger.debug(f"Database ping failed, retrying: {e}")
            time.sleep(interval)
    _check(bind)


def init_db(bind: Engine) -> None:
    """
    Initialize database.

    Imports the models so they register on Base, then creates any missing
    tables. Existing tables are left untouched.
    """
    from app.models import application  # noqa: F401  Import models to register them
    Base.metadata.create_all(bind=bind)
