"""Repository implementations."""

from .counter_repository import PostgresCounterRepository
from .branch_repository import PostgresBranchRepository
from .user_repository import PostgresUserRepository

__all__ = [
    "PostgresCounterRepository",
    "PostgresBranchRepository",
    "PostgresUserRepository",
]
