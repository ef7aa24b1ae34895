"""
Fixtures for integration tests.

Provides:
- File-backed SQLite database with the real schema
- Counter repository on its own session factory
- Seeded default branches
- Test clients for the FastAPI app, including store and database outages
"""

from typing import AsyncGenerator

import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from src.main import app
from src.application.services import BranchService
from src.core.dependencies import get_counter_repository
from src.domain.exceptions import StorageUnavailableException
from src.infrastructure.database import Base, get_db_session
from src.infrastructure.repositories import (
    PostgresBranchRepository,
    PostgresCounterRepository,
)


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def test_engine(tmp_path):
    """
    Create a file-backed SQLite async engine for testing.

    Every session gets its own connection (NullPool), so concurrent
    allocations really do race each other inside SQLite instead of
    sharing one connection.
    """
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'erp_test.db'}",
        echo=False,
        poolclass=NullPool,
        connect_args={"timeout": 30},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def counter_repository(session_factory) -> PostgresCounterRepository:
    return PostgresCounterRepository(session_factory)


@pytest_asyncio.fixture
async def seeded_branches(session_factory, counter_repository) -> int:
    """Insert the default branches and their counters."""
    async with session_factory() as session:
        service = BranchService(
            branch_repository=PostgresBranchRepository(session),
            counter_repository=counter_repository,
        )
        inserted = await service.seed_default_branches()
        await session.commit()

    return inserted


# =============================================================================
# App Client Fixtures
# =============================================================================

class UnavailableCounterRepository(PostgresCounterRepository):
    """Counter repository whose store is down for increments."""

    async def increment(self, key: str, base: int = 0) -> int:
        raise StorageUnavailableException(
            message=f"Unable to increment counter '{key}'",
            key=key,
        )


def _override_db_session(session_factory):
    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    return override_get_db_session


@pytest_asyncio.fixture
async def client(
    session_factory,
    counter_repository: PostgresCounterRepository,
    seeded_branches: int,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client backed by the test database.

    Each request gets its own committing session, and the counter
    repository runs its own short transactions, as in production.
    """
    app.dependency_overrides[get_db_session] = _override_db_session(session_factory)
    app.dependency_overrides[get_counter_repository] = lambda: counter_repository

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client_with_unavailable_store(
    session_factory,
    seeded_branches: int,
) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client whose counter store rejects every increment."""
    unavailable = UnavailableCounterRepository(session_factory)

    app.dependency_overrides[get_db_session] = _override_db_session(session_factory)
    app.dependency_overrides[get_counter_repository] = lambda: unavailable

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client_with_unreachable_database(tmp_path) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client whose database file cannot be opened."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'does-not-exist' / 'erp.db'}",
        poolclass=NullPool,
    )
    unreachable = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)

    app.dependency_overrides[get_db_session] = _override_db_session(unreachable)
    app.dependency_overrides[get_counter_repository] = lambda: PostgresCounterRepository(unreachable)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
    await engine.dispose()
