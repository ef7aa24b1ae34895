"""PostgreSQL implementation of CounterRepository."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.domain.entities import Counter
from src.domain.interfaces import CounterRepository
from src.infrastructure.database.dialects import dialect_insert
from src.infrastructure.database.models import CounterModel
from .errors import store_errors


class PostgresCounterRepository(CounterRepository):
    """
    PostgreSQL implementation of the Counter repository.

    Each operation runs in its own short transaction taken from the
    session factory and is committed before returning, so a counter row
    is never locked for the lifetime of the caller's request.

    Increments are a single ``INSERT ... ON CONFLICT DO UPDATE ...
    RETURNING`` statement. SQLite (3.35+) accepts the same statement,
    which is what the test suite runs against.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def increment(self, key: str, base: int = 0) -> int:
        """Atomically increment ``key`` and return the new value."""
        with store_errors(f"increment counter '{key}'", key=key):
            async with self._session_factory() as session:
                now = datetime.now(timezone.utc)
                insert = dialect_insert(session)
                stmt = insert(CounterModel).values(
                    counter_key=key,
                    sequence=base + 1,
                    updated_at=now,
                )
                stmt = stmt.on_conflict_do_update(
                    index_elements=[CounterModel.counter_key],
                    set_={
                        "sequence": CounterModel.sequence + 1,
                        "updated_at": now,
                    },
                ).returning(CounterModel.sequence)

                result = await session.execute(stmt)
                sequence = result.scalar_one()
                await session.commit()

        return sequence

    async def ensure(self, key: str, base: int = 0) -> None:
        """Create ``key`` at ``base`` unless it already exists."""
        with store_errors(f"initialize counter '{key}'", key=key):
            async with self._session_factory() as session:
                insert = dialect_insert(session)
                stmt = insert(CounterModel).values(
                    counter_key=key,
                    sequence=base,
                    updated_at=datetime.now(timezone.utc),
                ).on_conflict_do_nothing(index_elements=[CounterModel.counter_key])

                await session.execute(stmt)
                await session.commit()

    async def get(self, key: str) -> Optional[Counter]:
        """Read a counter without modifying it."""
        with store_errors(f"read counter '{key}'", key=key):
            async with self._session_factory() as session:
                stmt = select(CounterModel).where(CounterModel.counter_key == key)
                result = await session.execute(stmt)
                model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    def _to_entity(self, model: CounterModel) -> Counter:
        """Convert database model to domain entity."""
        return Counter(
            counter_key=model.counter_key,
            sequence=model.sequence,
            updated_at=model.updated_at,
        )
