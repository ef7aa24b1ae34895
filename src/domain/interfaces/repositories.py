"""Repository interfaces for data persistence."""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import Branch, Counter, User


class CounterRepository(ABC):
    """
    Abstract store of named sequence counters.

    Every mutation must be a single atomic operation against the shared
    store: implementations never read a value and write it back in two
    steps, and never cache counter values in process memory.
    """

    @abstractmethod
    async def increment(self, key: str, base: int = 0) -> int:
        """
        Atomically increment a counter and return the new value.

        A missing counter is created at ``base`` and incremented in the
        same operation, so the first call for a key returns ``base + 1``.

        Args:
            key: Counter key (e.g. a branch code)
            base: Initial stored value for a counter that does not exist

        Returns:
            The newly allocated sequence value

        Raises:
            StorageUnavailableException: If the store cannot be reached or
                the update fails. The counter is left unchanged.
        """
        ...

    @abstractmethod
    async def ensure(self, key: str, base: int = 0) -> None:
        """
        Create a counter at ``base`` if it does not exist yet.

        Existing counters are never modified.
        """
        ...

    @abstractmethod
    async def get(self, key: str) -> Optional[Counter]:
        """
        Read a counter without modifying it.

        Returns:
            The counter if it exists, None otherwise
        """
        ...


class BranchRepository(ABC):
    """Abstract repository for Branch persistence."""

    @abstractmethod
    async def get_active_by_id(self, branch_id: str) -> Optional[Branch]:
        """
        Retrieve an active branch by its branch ID.

        Returns:
            The branch if it exists and is active, None otherwise
        """
        ...

    @abstractmethod
    async def list_active(self) -> List[Branch]:
        """List active branches ordered by name."""
        ...

    @abstractmethod
    async def add_if_absent(self, branch: Branch) -> bool:
        """
        Insert a branch unless its branch ID or branch code is taken.

        Returns:
            True if the branch was inserted
        """
        ...


class UserRepository(ABC):
    """Abstract repository for User persistence."""

    @abstractmethod
    async def save(self, user: User) -> User:
        """Persist a new user."""
        ...

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Retrieve a user by (lower-cased) email."""
        ...

    @abstractmethod
    async def get_by_unique_id(self, unique_id: str) -> Optional[User]:
        """Retrieve an active user by unique ID (e.g. "DH-0001")."""
        ...
