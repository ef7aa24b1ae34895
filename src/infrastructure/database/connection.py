"""Async engine, session factory and the request-scoped session dependency."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.core.config import settings
from .dialects import SUPPORTED_BACKENDS
from .models import Base


def _async_url(url: str) -> str:
    """Point plain postgres URLs at the asyncpg driver."""
    for scheme in ("postgres://", "postgresql://"):
        if url.startswith(scheme):
            return url.replace(scheme, "postgresql+asyncpg://", 1)
    return url


class DatabaseSessionManager:
    """
    Owns the async engine and hands out sessions.

    Two kinds of consumers use it: request handlers get one session per
    request through ``get_db_session``, while the counter repository
    takes ``sessionmaker`` and opens a short transaction per increment.
    """

    def __init__(self):
        self._engine: AsyncEngine | None = None
        self._sessionmaker: async_sessionmaker[AsyncSession] | None = None

    def init(self, database_url: str | None = None):
        """
        Create the engine and session factory.

        Args:
            database_url: Optional override for the configured URL

        Raises:
            ValueError: The URL names a backend without ON CONFLICT upserts
        """
        url = _async_url(database_url or settings.database_url)
        backend = make_url(url).get_backend_name()
        if backend not in SUPPORTED_BACKENDS:
            raise ValueError(
                f"Unsupported database backend '{backend}'; "
                f"expected one of {sorted(SUPPORTED_BACKENDS)}"
            )

        engine_kwargs = {"echo": settings.debug, "pool_pre_ping": True}
        if not url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=settings.db_pool_size,
                max_overflow=settings.db_max_overflow,
                pool_timeout=settings.db_pool_timeout,
            )

        self._engine = create_async_engine(url, **engine_kwargs)
        self._sessionmaker = async_sessionmaker(
            bind=self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database not initialized. Call init() first.")
        return self._engine

    @property
    def sessionmaker(self) -> async_sessionmaker[AsyncSession]:
        if self._sessionmaker is None:
            raise RuntimeError("Database not initialized. Call init() first.")
        return self._sessionmaker

    async def create_all(self) -> None:
        """Create missing tables (counters, branches, users)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self):
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._sessionmaker = None

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Session that commits on success and rolls back on any error."""
        async with self.sessionmaker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise


db_manager = DatabaseSessionManager()


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one committed-or-rolled-back session per request."""
    async with db_manager.session() as session:
        yield session
