"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.database import db_manager, get_db_session
from src.infrastructure.repositories import (
    PostgresBranchRepository,
    PostgresCounterRepository,
    PostgresUserRepository,
)
from src.application.services import BranchService, SequenceAllocator, UserService


# Repository dependencies
def get_counter_repository() -> PostgresCounterRepository:
    """Get a CounterRepository that runs its own short transactions."""
    return PostgresCounterRepository(db_manager.sessionmaker)


async def get_branch_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresBranchRepository:
    """Get a BranchRepository instance."""
    return PostgresBranchRepository(session)


async def get_user_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresUserRepository:
    """Get a UserRepository instance."""
    return PostgresUserRepository(session)


# Service dependencies
def get_sequence_allocator(
    counter_repo: Annotated[PostgresCounterRepository, Depends(get_counter_repository)],
) -> SequenceAllocator:
    """Get a SequenceAllocator instance."""
    return SequenceAllocator(counter_repository=counter_repo)


async def get_branch_service(
    branch_repo: Annotated[PostgresBranchRepository, Depends(get_branch_repository)],
    counter_repo: Annotated[PostgresCounterRepository, Depends(get_counter_repository)],
) -> BranchService:
    """Get a BranchService instance."""
    return BranchService(
        branch_repository=branch_repo,
        counter_repository=counter_repo,
    )


async def get_user_service(
    user_repo: Annotated[PostgresUserRepository, Depends(get_user_repository)],
    branch_service: Annotated[BranchService, Depends(get_branch_service)],
    allocator: Annotated[SequenceAllocator, Depends(get_sequence_allocator)],
) -> UserService:
    """Get a UserService instance with all dependencies."""
    return UserService(
        user_repository=user_repo,
        branch_service=branch_service,
        allocator=allocator,
    )
