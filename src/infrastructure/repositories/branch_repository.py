"""PostgreSQL implementation of BranchRepository."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import Branch
from src.domain.interfaces import BranchRepository
from src.infrastructure.database.dialects import dialect_insert
from src.infrastructure.database.models import BranchModel
from .errors import store_errors


class PostgresBranchRepository(BranchRepository):
    """PostgreSQL-backed branch repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_active_by_id(self, branch_id: str) -> Optional[Branch]:
        stmt = select(BranchModel).where(
            BranchModel.branch_id == branch_id,
            BranchModel.is_active.is_(True),
        )
        with store_errors(f"look up branch '{branch_id}'"):
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def list_active(self) -> List[Branch]:
        stmt = (
            select(BranchModel)
            .where(BranchModel.is_active.is_(True))
            .order_by(BranchModel.branch_name.asc())
        )
        with store_errors("list active branches"):
            result = await self._session.execute(stmt)
            models = result.scalars().all()

        return [self._to_entity(model) for model in models]

    async def add_if_absent(self, branch: Branch) -> bool:
        """
        Insert ``branch`` unless its ID or code is already taken.

        A single ``INSERT ... ON CONFLICT DO NOTHING``, so two processes
        seeding at the same time both succeed and exactly one inserts.
        """
        insert = dialect_insert(self._session)
        stmt = (
            insert(BranchModel)
            .values(
                branch_id=branch.branch_id,
                branch_name=branch.branch_name,
                branch_location=branch.branch_location,
                branch_code=branch.branch_code,
                is_active=branch.is_active,
                created_at=branch.created_at,
                updated_at=branch.updated_at,
            )
            .on_conflict_do_nothing()
            .returning(BranchModel.branch_id)
        )

        with store_errors(f"add branch '{branch.branch_id}'"):
            result = await self._session.execute(stmt)
            inserted = result.scalar_one_or_none()

        return inserted is not None

    def _to_entity(self, model: BranchModel) -> Branch:
        return Branch(
            branch_id=model.branch_id,
            branch_name=model.branch_name,
            branch_location=model.branch_location,
            branch_code=model.branch_code,
            is_active=model.is_active,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
