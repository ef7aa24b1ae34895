"""Dialect-specific INSERT constructs that support ON CONFLICT."""

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

INSERT_BY_DIALECT = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}

SUPPORTED_BACKENDS = frozenset(INSERT_BY_DIALECT)


def dialect_insert(session: AsyncSession):
    """Pick the INSERT construct for the dialect ``session`` is bound to."""
    dialect = session.bind.dialect.name
    try:
        return INSERT_BY_DIALECT[dialect]
    except KeyError:
        raise RuntimeError(
            f"Upserts are not supported on the '{dialect}' dialect"
        ) from None
