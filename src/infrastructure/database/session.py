"""Async SQLAlchemy engine, session factory and declarative base."""

from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from infrastructure.config import get_logger, get_settings

logger = get_logger(__name__)


class Base(DeclarativeBase):
    """Declarative base for every ORM model."""


@lru_cache()
def get_engine() -> AsyncEngine:
    """
    Create the process-wide async engine on first use.
    
    Pool sizing only applies to server databases; SQLite uses its default pool.
    """
    settings = get_settings()
    options = {"echo": settings.database_echo}
    if not settings.uses_sqlite:
        options.update(
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            pool_pre_ping=True,
        )
    return create_async_engine(settings.database_url, **options)


@lru_cache()
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(get_engine(), class_=AsyncSession, expire_on_commit=False)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a request-scoped session, rolling back on error."""
    async with get_session_maker()() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """Create missing tables."""
    # Register every model on Base.metadata before create_all.
    from infrastructure.database import models  # noqa: F401
    
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready")


async def close_db() -> None:
    """Dispose the engine's connection pool."""
    await get_engine().dispose()
