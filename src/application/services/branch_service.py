"""Branch service - branch registry and default seeding."""

from typing import Iterable

import structlog

from src.application.dto import BranchResponse
from src.domain.entities import Branch, DEFAULT_BRANCHES
from src.domain.exceptions import BranchNotFoundException
from src.domain.interfaces import BranchRepository, CounterRepository
from src.service.sequence import (
    SequenceSettings,
    sequence_settings,
    unique_id_counter_key,
)

logger = structlog.get_logger(__name__)


class BranchService:
    """
    Application service for branch use cases.

    Resolves the active branch a user signs up under and seeds the
    default branch set together with one counter per branch code.
    """

    def __init__(
        self,
        branch_repository: BranchRepository,
        counter_repository: CounterRepository,
        settings: SequenceSettings = sequence_settings,
    ):
        self._branch_repo = branch_repository
        self._counters = counter_repository
        self._settings = settings

    async def get_active_branch(self, branch_id: str) -> Branch:
        """
        Resolve an active branch.

        Raises:
            BranchNotFoundException: If the branch is unknown or inactive
        """
        branch = await self._branch_repo.get_active_by_id(branch_id)
        if branch is None:
            logger.warning("branch_not_found", branch_id=branch_id)
            raise BranchNotFoundException(branch_id)
        return branch

    async def list_active_branches(self) -> list[BranchResponse]:
        branches = await self._branch_repo.list_active()
        return [BranchResponse.from_entity(branch) for branch in branches]

    async def seed_default_branches(
        self,
        branches: Iterable[Branch] = DEFAULT_BRANCHES,
    ) -> int:
        """
        Insert missing branches and make sure each has a counter.

        Existing branches and counters are left untouched, so this is
        safe to run on every startup.

        Returns:
            Number of branches inserted
        """
        branches = list(branches)

        # Counters first: a branch is never visible without its counter
        for branch in branches:
            await self._counters.ensure(
                unique_id_counter_key(branch.branch_code),
                base=self._settings.start,
            )

        inserted = 0
        for branch in branches:
            if await self._branch_repo.add_if_absent(branch):
                inserted += 1

        logger.info("default_branches_seeded", inserted=inserted)
        return inserted
