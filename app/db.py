"""Engine and request-scoped sessions for the bookings database."""
from __future__ import annotations

from collections.abc import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from app.config import get_settings
from app.models.base import Base

_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def init_engine() -> Engine:
    """Create the engine and session factory once; later calls reuse them."""

    global _engine, _session_factory
    if _engine is None:
        url = get_settings().database_url
        connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
        _engine = create_engine(url, connect_args=connect_args)
        _session_factory = sessionmaker(bind=_engine, autoflush=False, expire_on_commit=False)
    return _engine


def open_session() -> Session:
    init_engine()
    assert _session_factory is not None  # for type-checkers
    return _session_factory()


@event.listens_for(Engine, "connect")
def _enforce_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # payments -> bookings -> users references are only checked with this pragma
    if type(dbapi_connection).__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def create_all() -> None:
    """Create the tables without Alembic (dev and test environments only)."""

    Base.metadata.create_all(bind=init_engine())


def close_engine() -> None:
    global _engine, _session_factory
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None


def get_db() -> Generator[Session, None, None]:
    """Yield one session per request and close it afterwards."""

    session = open_session()
    try:
        yield session
    finally:
        session.close()


__all__ = ["create_all", "close_engine", "get_db", "init_engine", "open_session"]
