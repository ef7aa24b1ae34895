"""
Fixtures for unit tests.

Provides in-memory fakes for the repository ports so services can be
tested without a database.
"""

import asyncio
from typing import Dict, List, Optional

import pytest

from src.domain.entities import DEFAULT_BRANCHES, Branch, Counter, User
from src.domain.exceptions import StorageUnavailableException
from src.domain.interfaces import BranchRepository, CounterRepository, UserRepository
from src.service.sequence import SequenceSettings


# =============================================================================
# Fake Repositories
# =============================================================================

class InMemoryCounterRepository(CounterRepository):
    """Counter store kept in a dict."""

    def __init__(self):
        self.counters: Dict[str, int] = {}
        self.increment_calls = 0

    async def increment(self, key: str, base: int = 0) -> int:
        self.increment_calls += 1
        await asyncio.sleep(0)
        # No await between read and write
        value = self.counters.get(key, base) + 1
        self.counters[key] = value
        return value

    async def ensure(self, key: str, base: int = 0) -> None:
        self.counters.setdefault(key, base)

    async def get(self, key: str) -> Optional[Counter]:
        if key not in self.counters:
            return None
        return Counter(counter_key=key, sequence=self.counters[key])


class FailingCounterRepository(InMemoryCounterRepository):
    """Counter store that is always unreachable."""

    async def increment(self, key: str, base: int = 0) -> int:
        self.increment_calls += 1
        raise StorageUnavailableException(key=key)


class SlowCounterRepository(InMemoryCounterRepository):
    """Counter store that never answers in time."""

    def __init__(self, delay: float = 10.0):
        super().__init__()
        self.delay = delay

    async def increment(self, key: str, base: int = 0) -> int:
        await asyncio.sleep(self.delay)
        return await super().increment(key, base)


class InMemoryBranchRepository(BranchRepository):
    def __init__(self, branches: List[Branch] = ()):
        self.branches: Dict[str, Branch] = {b.branch_id: b for b in branches}

    async def get_active_by_id(self, branch_id: str) -> Optional[Branch]:
        branch = self.branches.get(branch_id)
        if branch is None or not branch.is_active:
            return None
        return branch

    async def list_active(self) -> List[Branch]:
        active = [b for b in self.branches.values() if b.is_active]
        return sorted(active, key=lambda b: b.branch_name)

    async def add_if_absent(self, branch: Branch) -> bool:
        taken_codes = {b.branch_code for b in self.branches.values()}
        if branch.branch_id in self.branches or branch.branch_code in taken_codes:
            return False
        self.branches[branch.branch_id] = branch
        return True


class InMemoryUserRepository(UserRepository):
    def __init__(self):
        self.users: List[User] = []

    async def save(self, user: User) -> User:
        self.users.append(user)
        return user

    async def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.users if u.email == email.lower()), None)

    async def get_by_unique_id(self, unique_id: str) -> Optional[User]:
        return next(
            (u for u in self.users if u.unique_id == unique_id and u.is_active),
            None,
        )


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def counter_repository() -> InMemoryCounterRepository:
    return InMemoryCounterRepository()


@pytest.fixture
def sequence_settings() -> SequenceSettings:
    return SequenceSettings(start=0, allocation_timeout=1.0)


@pytest.fixture
def branch_repository() -> InMemoryBranchRepository:
    """Default branches plus one inactive branch."""
    inactive = Branch("closed", "Closed Branch", "Nowhere", "CLS", is_active=False)
    return InMemoryBranchRepository([*DEFAULT_BRANCHES, inactive])


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def failing_counter_repository() -> FailingCounterRepository:
    return FailingCounterRepository()


@pytest.fixture
def slow_counter_repository() -> SlowCounterRepository:
    return SlowCounterRepository()


@pytest.fixture
def empty_branch_repository() -> InMemoryBranchRepository:
    return InMemoryBranchRepository()
