"""
SQLAlchemy async engine and session management with Read-Write Separation

This module provides:
1. AsyncEngineManager: Manages separate read/write engines with event loop awareness
2. Database class: session factory handed to repositories through dependency injection

Read-Write Separation:
- Write operations (migrations, seeding): always use the primary database
- Read operations: use the read replica if configured, otherwise fall back to primary

Configuration:
- DATABASE_URL: optional full URL override (e.g. SQLite for local runs and tests)
- POSTGRES_REPLICA_SERVER / POSTGRES_REPLICA_PORT: optional read replica
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


# =============================================================================
# Event-loop-aware Engine Manager
# =============================================================================


class AsyncEngineManager:
    """
    Manages SQLAlchemy async engines with event loop awareness.

    Ensures engines are always bound to the current event loop to prevent
    "Task got Future attached to a different loop" errors.
    """

    def __init__(self) -> None:
        self._write_engine: Optional[AsyncEngine] = None
        self._read_engine: Optional[AsyncEngine] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._write_session_maker: Optional[async_sessionmaker[AsyncSession]] = None
        self._read_session_maker: Optional[async_sessionmaker[AsyncSession]] = None

    def get_engine(self, *, read_only: bool = False) -> AsyncEngine:
        """
        Get engine for current event loop, creating new one if needed

        Args:
            read_only: If True, return read engine (replica), otherwise write engine (primary)
        """
        try:
            current_loop = asyncio.get_running_loop()
        except RuntimeError:
            # No event loop running, create engine without loop tracking
            if self._write_engine is None:
                self._write_engine = self._create_write_engine()
            if self._read_engine is None:
                self._read_engine = self._create_read_engine()
            return self._read_engine if read_only else self._write_engine

        if self._loop is not current_loop:
            if self._write_engine is not None or self._read_engine is not None:
                Logger.base.warning('🔄 [DB] Event loop changed, dropping old engines...')
                self._reset()

            Logger.base.info(f'🔗 [DB] Creating engines for event loop {id(current_loop)}')
            self._write_engine = self._create_write_engine()
            self._read_engine = self._create_read_engine()
            self._loop = current_loop

        return self._read_engine if read_only else self._write_engine  # type: ignore[return-value]

    def get_session_maker(self, *, read_only: bool = False) -> async_sessionmaker[AsyncSession]:
        """
        Get session maker for current event loop

        Args:
            read_only: If True, return read session maker, otherwise write session maker
        """
        engine = self.get_engine(read_only=read_only)

        if read_only:
            if self._read_session_maker is None:
                self._read_session_maker = async_sessionmaker(
                    engine, class_=AsyncSession, expire_on_commit=False
                )
            return self._read_session_maker

        if self._write_session_maker is None:
            self._write_session_maker = async_sessionmaker(
                engine, class_=AsyncSession, expire_on_commit=False
            )
        return self._write_session_maker

    async def dispose(self) -> None:
        """Close pooled connections of both engines."""
        engines = {id(e): e for e in (self._write_engine, self._read_engine) if e is not None}
        for engine in engines.values():
            await engine.dispose()
        self._reset()
        Logger.base.info('🗄️  [DB] Engines disposed')

    def _reset(self) -> None:
        self._write_engine = None
        self._read_engine = None
        self._write_session_maker = None
        self._read_session_maker = None
        self._loop = None

    def _create_write_engine(self) -> AsyncEngine:
        return create_async_engine(
            settings.DATABASE_URL_ASYNC,
            **_engine_options(pool_size=settings.DB_POOL_SIZE_WRITE),
        )

    def _create_read_engine(self) -> AsyncEngine:
        """Falls back to primary if replica not configured."""
        return create_async_engine(
            settings.DATABASE_READ_URL_ASYNC,
            **_engine_options(pool_size=settings.DB_POOL_SIZE_READ),
        )


def _engine_options(*, pool_size: int) -> dict[str, Any]:
    options: dict[str, Any] = {'echo': False, 'pool_pre_ping': settings.DB_POOL_PRE_PING}
    if settings.DATABASE_URL_ASYNC.startswith('sqlite'):
        return options
    return options | {
        'pool_size': pool_size,
        'max_overflow': settings.DB_POOL_MAX_OVERFLOW,
        'pool_timeout': settings.DB_POOL_TIMEOUT,
        'pool_recycle': settings.DB_POOL_RECYCLE,
    }


# Global engine manager
_engine_manager = AsyncEngineManager()


def get_engine(*, read_only: bool = False) -> AsyncEngine:
    """Get event-loop-aware engine (read_only: use replica if available)"""
    return _engine_manager.get_engine(read_only=read_only)


def get_session_maker(*, read_only: bool = False) -> async_sessionmaker[AsyncSession]:
    """Get event-loop-aware session maker (read_only: use replica if available)"""
    return _engine_manager.get_session_maker(read_only=read_only)


async def dispose_engines() -> None:
    await _engine_manager.dispose()


# =============================================================================
# Base Model
# =============================================================================


class Base(DeclarativeBase):
    pass


# =============================================================================
# Table Creation
# =============================================================================


async def create_db_and_tables() -> None:
    """Create database tables if they don't exist"""
    import src.service.hotel.driven_adapter.model  # noqa: F401  (register models)

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all, checkfirst=True)


async def drop_db_and_tables() -> None:
    import src.service.hotel.driven_adapter.model  # noqa: F401

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


# =============================================================================
# Database Class (for DI)
# =============================================================================


class Database:
    """
    Session factory for the dependency-injection container.

    Delegates to AsyncEngineManager for event-loop-aware engine management
    and read-write separation support.
    """

    def __init__(self, *, read_only: bool = False) -> None:
        self._read_only = read_only

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Rolls back automatically on exception."""
        session_maker = get_session_maker(read_only=self._read_only)
        async with session_maker() as session:
            yield session
