"""Database infrastructure."""

from .connection import get_db_session, DatabaseSessionManager, db_manager
from .dialects import dialect_insert
from .models import Base, CounterModel, BranchModel, UserModel

__all__ = [
    "get_db_session",
    "DatabaseSessionManager",
    "db_manager",
    "dialect_insert",
    "Base",
    "CounterModel",
    "BranchModel",
    "UserModel",
]
