"""Database session management utilities."""

from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path
from typing import Optional

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from backend.app.core.config import get_settings
from backend.app.core.logging import get_logger
from backend.app.db.models import Base

logger = get_logger(__name__)

_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def _create_engine() -> tuple[AsyncEngine, async_sessionmaker[AsyncSession]]:
    """Create a new engine and session factory."""
    settings = get_settings()
    url = make_url(settings.database_url)
    logger.info("initialising_database_engine", url=url.render_as_string(hide_password=True))

    engine_kwargs: dict = {"echo": False, "pool_pre_ping": True}
    if url.get_backend_name() != "sqlite":
        engine_kwargs.update(
            pool_recycle=300,  # Recycle connections after 5 minutes
            pool_size=10,
            max_overflow=15,
            pool_timeout=30,
        )

    engine = create_async_engine(settings.database_url, **engine_kwargs)
    factory = async_sessionmaker(
        engine,
        expire_on_commit=False,
        class_=AsyncSession,
    )
    return engine, factory


def get_engine() -> AsyncEngine:
    """Return singleton async engine based on current settings."""
    global _engine, _session_factory

    if _engine is None:
        _engine, _session_factory = _create_engine()

    return _engine


def get_sessionmaker() -> async_sessionmaker[AsyncSession]:
    """Return async sessionmaker tied to the engine."""
    global _session_factory
    if _session_factory is None:
        get_engine()
    assert _session_factory is not None
    return _session_factory


async def dispose_engine() -> None:
    """Dispose of the current engine so the next access creates a fresh one."""
    global _engine, _session_factory

    if _engine is not None:
        logger.info("disposing_database_engine")
        await _engine.dispose()
    _engine = None
    _session_factory = None


async def get_async_session() -> AsyncIterator[AsyncSession]:
    """FastAPI dependency helper for providing a session per request."""
    sessionmaker = get_sessionmaker()
    async with sessionmaker() as session:
        try:
            yield session
        finally:
            await session.close()


def _ensure_sqlite_directory(database_url: str) -> None:
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite" or not url.database or url.database == ":memory:":
        return
    Path(url.database).parent.mkdir(parents=True, exist_ok=True)


async def init_db() -> None:
    """Create database tables if they do not yet exist."""
    _ensure_sqlite_directory(get_settings().database_url)
    engine = get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("database_schema_ready")
