"""Application services (use cases)."""

from .sequence_service import SequenceAllocator
from .branch_service import BranchService
from .user_service import UserService

__all__ = [
    "SequenceAllocator",
    "BranchService",
    "UserService",
]
