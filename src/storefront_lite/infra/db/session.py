from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from storefront_lite.infra.db.config import database_url

# Created on first catalog load, not at import time
_engine: Engine | None = None
_session_local: sessionmaker[Session] | None = None


def get_engine() -> Engine:
    """
    Get or create the database engine (lazy initialization).

    The storefront only reads the catalog once per view activation, so the pool
    stays small. pool_pre_ping guards against connections dropped between
    activations.
    """
    global _engine
    if _engine is None:
        _engine = create_engine(
            database_url(),
            pool_size=5,
            max_overflow=5,
            pool_pre_ping=True,
            pool_recycle=1800,
        )
    return _engine


def get_session_local() -> sessionmaker[Session]:
    """Get or create the session factory (lazy initialization)."""
    global _session_local
    if _session_local is None:
        _session_local = sessionmaker(
            bind=get_engine(),
            class_=Session,
            autoflush=False,
            expire_on_commit=False,
        )
    return _session_local


@contextmanager
def get_read_session() -> Iterator[Session]:
    """Get a session for read-only work; any open transaction is rolled back on exit."""
    session = get_session_local()()

    try:
        yield session
    finally:
        session.rollback()
        session.close()
