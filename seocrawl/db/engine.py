from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from seocrawl import config


def _is_sqlite_memory(database_url: str) -> bool:
    return database_url in ("sqlite://", "sqlite:///:memory:") or database_url.startswith("sqlite:///:memory:?")


def make_engine(database_url: Optional[str] = None) -> Engine:
    """Create a SQLAlchemy Engine for `database_url`.

    Falls back to `DATABASE_URL` and then to a timestamped SQLite file.
    SQLite engines are shareable across worker threads; in-memory SQLite is
    pinned to a single connection so every thread sees the same database.
    """
    database_url = database_url or config.DATABASE_URL or config.default_database_url()
    if database_url.startswith("sqlite"):
        if _is_sqlite_memory(database_url):
            return create_engine(
                database_url,
                future=True,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        return create_engine(database_url, future=True, connect_args={"check_same_thread": False})
    return create_engine(database_url, future=True)
