"""Domain Entities - Core business objects."""

from .branch import Branch, DEFAULT_BRANCHES
from .counter import Counter
from .user import User, UserRole

__all__ = [
    "Branch",
    "DEFAULT_BRANCHES",
    "Counter",
    "User",
    "UserRole",
]
