"""Engine and session helpers for the RDS PostgreSQL database."""

import logging
import os
from contextlib import contextmanager
from typing import Iterator

from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from rds_postgres.models import Base

load_dotenv()

logger = logging.getLogger(__name__)

_engine: Engine | None = None
_session_factory: sessionmaker | None = None


def get_engine() -> Engine:
    """Return the lazily created engine for DATABASE_URL."""
    global _engine
    if _engine is None:
        database_url = os.environ.get("DATABASE_URL")
        if not database_url:
            raise ValueError("DATABASE_URL environment variable is required")
        _engine = create_engine(database_url, pool_pre_ping=True)
        logger.info("Database engine created")
    return _engine


def get_session_factory() -> sessionmaker:
    """Return a session factory bound to the engine."""
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(bind=get_engine(), expire_on_commit=False)
    return _session_factory


@contextmanager
def get_session() -> Iterator[Session]:
    """Yield a session that is always closed on exit. Callers commit."""
    session = get_session_factory()()
    try:
        yield session
    finally:
        session.close()


def ensure_tables() -> None:
    """Create the news tables if they don't exist."""
    Base.metadata.create_all(get_engine())
