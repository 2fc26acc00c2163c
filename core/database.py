"""SQLAlchemy database engine and session management.

Provides the synchronous database layer behind the retail verticals:
- Engine construction from DATABASE_URL (in-memory SQLite by default)
- A static connection pool for in-memory URLs so every session sees the
  same database
- Automatic session lifecycle (commit on success, rollback on error)
- Schema create/drop helpers used by store reset
"""

import os
from contextlib import contextmanager
from typing import Iterator, Sequence

from sqlalchemy import Engine, Table, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from core.models.base import Base

# ---------------------------------------------------------------------------
# Configuration from environment
# ---------------------------------------------------------------------------

DEFAULT_DATABASE_URL = "sqlite+pysqlite:///:memory:"


def database_url() -> str:
    return os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)


def echo_sql() -> bool:
    return os.getenv("DB_ECHO", "false").lower() == "true"


# ---------------------------------------------------------------------------
# Engine & session factory
# ---------------------------------------------------------------------------

def build_engine(url: str | None = None, echo: bool | None = None) -> Engine:
    """Create an engine for `url`.

    In-memory SQLite lives as long as its connection, so those URLs get a
    single shared connection through StaticPool.
    """
    url = url or database_url()
    kwargs: dict = {"echo": echo_sql() if echo is None else echo}
    if url.startswith("sqlite") and ":memory:" in url:
        kwargs["connect_args"] = {"check_same_thread": False}
        kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(engine, class_=Session, expire_on_commit=False)


@contextmanager
def session_scope(factory: sessionmaker[Session]) -> Iterator[Session]:
    """Yield a session with automatic commit/rollback.

    Usage::

        with session_scope(factory) as session:
            session.add(row)
    """
    with factory() as session:
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise


# ---------------------------------------------------------------------------
# Lifecycle hooks
# ---------------------------------------------------------------------------

def init_db(engine: Engine, tables: Sequence[Table] | None = None) -> None:
    """Create `tables` (default: every table registered on Base.metadata)."""
    Base.metadata.create_all(engine, tables=tables)


def drop_db(engine: Engine, tables: Sequence[Table] | None = None) -> None:
    Base.metadata.drop_all(engine, tables=tables)


def close_db(engine: Engine) -> None:
    """Dispose of the connection pool."""
    engine.dispose()
