"""Database engine setup.

SQLAlchemy Core, not the ORM: one short-lived CLI process has no use
for sessions or identity maps.
The default URL is an in-memory SQLite database whose lifetime is the
engine's.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from solidctl.infrastructure.database.schema import metadata

IN_MEMORY_URL = "sqlite://"


def create_db_engine(url: str = IN_MEMORY_URL) -> Engine:
    """Create a SQLite engine with foreign keys enabled.

    In-memory databases share a single connection so every
    ``connect()`` sees the same tables.
    """
    kwargs: dict[str, Any] = {"echo": False}
    if url in (IN_MEMORY_URL, "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
        kwargs["connect_args"] = {"check_same_thread": False}
    engine = create_engine(url, **kwargs)

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


def init_database(url: str = IN_MEMORY_URL) -> Engine:
    """Create the engine and all tables. Idempotent."""
    engine = create_db_engine(url)
    metadata.create_all(engine)
    return engine
