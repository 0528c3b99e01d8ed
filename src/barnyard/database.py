"""Database connection and session management.

This module provides database connection management, session factories,
and utility functions for database operations.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from barnyard.config import get_settings
from barnyard.models import Base


def _enable_sqlite_foreign_keys(
    dbapi_connection: Any, connection_record: Any  # noqa: ARG001
) -> None:
    """Turn on foreign key enforcement for a new SQLite connection.

    Args:
        dbapi_connection: The DBAPI connection
        connection_record: Connection record (required by SQLAlchemy event API)

    Note:
        SQLite ignores foreign keys unless asked; the farm relies on them to
        refuse deleting a barn that still holds animals.
    """
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(database_url: str | None = None, *, echo: bool | None = None) -> Engine:
    """Create and configure the database engine.

    Args:
        database_url: Database URL; defaults to the configured one
        echo: Echo SQL statements; defaults to the configured flag

    Returns:
        Engine: Configured SQLAlchemy engine

    Note:
        For SQLite databases, automatically enables foreign keys. In-memory
        SQLite shares a single connection so every session sees the same data.
    """
    settings = get_settings()
    url = database_url or settings.database_url
    echo = settings.database_echo if echo is None else echo

    if url.startswith("sqlite"):
        kwargs: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url or url in ("sqlite://", "sqlite:///"):
            kwargs["poolclass"] = StaticPool
        engine = create_engine(url, echo=echo, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    else:
        engine = create_engine(url, echo=echo, pool_pre_ping=True)

    return engine


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Build a session factory bound to ``engine``."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


# Global engine and session factory
_engine: Engine | None = None
_SessionLocal: sessionmaker[Session] | None = None


def get_engine() -> Engine:
    """Get or create the global database engine.

    Returns:
        Engine: The SQLAlchemy engine instance
    """
    global _engine  # noqa: PLW0603
    if _engine is None:
        _engine = create_db_engine()
    return _engine


def get_session_factory() -> sessionmaker[Session]:
    """Get or create the global session factory.

    Returns:
        sessionmaker: Session factory for creating database sessions
    """
    global _SessionLocal  # noqa: PLW0603
    if _SessionLocal is None:
        _SessionLocal = create_session_factory(get_engine())
    return _SessionLocal


@contextmanager
def session_scope(factory: sessionmaker[Session] | None = None) -> Iterator[Session]:
    """Run a unit of work in one transaction.

    Commits when the block succeeds and rolls back when it raises.

    Example:
        ```python
        with session_scope() as session:
            create_animal_service(session).add_to_farm(animal)
        ```
    """
    SessionLocal = factory or get_session_factory()  # noqa: N806
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(engine: Engine | None = None) -> None:
    """Initialize the database by creating all tables."""
    Base.metadata.create_all(bind=engine or get_engine())


def check_database_health(session: Session) -> bool:
    """Check if the database behind ``session`` is accessible.

    Returns:
        bool: True if database is healthy, False otherwise
    """
    try:
        session.execute(text("SELECT 1"))
        return True
    except Exception:
        return False
