"""Engine and session lifecycle."""

from collections.abc import Generator
from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from wordshelf.config import Settings, get_settings


class Base(DeclarativeBase):
    """Base class for all database models."""


# Application-scoped, created by initialize_database()
_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:  # noqa: ANN001
    """SQLite ignores ON DELETE CASCADE unless this pragma is set per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _engine_options(url: str) -> dict[str, Any]:
    if is_sqlite(url):
        # A single shared connection keeps ":memory:" databases alive across threads
        return {"connect_args": {"check_same_thread": False}, "poolclass": StaticPool}
    return {"pool_size": 20, "max_overflow": 30, "pool_pre_ping": True, "pool_recycle": 3600}


def initialize_database(settings: Settings) -> None:
    """Create the engine and session factory. Called once at startup."""
    global _engine, _session_factory  # noqa: PLW0603

    _engine = create_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))
    if is_sqlite(settings.DATABASE_URL):
        event.listen(_engine, "connect", enable_sqlite_foreign_keys)
    _session_factory = sessionmaker(autocommit=False, autoflush=False, bind=_engine)


def get_engine() -> Engine:
    if _engine is None:
        raise RuntimeError("Database not initialized. Call initialize_database() first.")
    return _engine


def get_session_factory(
    settings: Annotated[Settings, Depends(get_settings)],
) -> sessionmaker[Session]:
    """Session factory, initializing the database lazily outside the app lifespan."""
    if _session_factory is None:
        initialize_database(settings)
    assert _session_factory is not None
    return _session_factory


def dispose_engine() -> None:
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None


def get_db(
    session_factory: Annotated[sessionmaker[Session], Depends(get_session_factory)],
) -> Generator[Session, None, None]:
    """One session per request, closed when the response is sent."""
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


DatabaseSession = Annotated[Session, Depends(get_db)]
