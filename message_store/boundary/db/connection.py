"""
Database connection management.

Provides the SQLAlchemy engine the message store runs its statements on.

Dependencies: sqlalchemy, message_store.configs
System role: Database connection lifecycle management
"""

from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool

from message_store.configs import Settings, get_settings


def get_engine(settings: Settings | None = None) -> Engine:
    """
    Create SQLAlchemy engine with connection pooling and health checks.

    Configures QueuePool for efficient connection reuse. pool_pre_ping=True
    verifies connections before use to detect stale/broken connections early.
    SQLite URLs keep SQLAlchemy's default pool, which suits file and
    in-memory databases.

    Args:
        settings: Settings to read the database section from (defaults to get_settings())

    Returns:
        Engine: Configured SQLAlchemy engine

    Raises:
        ArgumentError: If database URL is invalid or engine creation fails

    Usage:
        engine = get_engine()
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    """
    db_config = (settings or get_settings()).database
    url = make_url(db_config.database_url)

    engine_kwargs: dict[str, Any] = {"echo": db_config.echo_sql}
    if url.get_backend_name() != "sqlite":
        engine_kwargs.update(
            poolclass=QueuePool,
            pool_size=db_config.pool_size,
            max_overflow=db_config.max_overflow,
            pool_timeout=db_config.pool_timeout,
            pool_pre_ping=True,  # Verify connections before using
        )

    return create_engine(url, **engine_kwargs)
