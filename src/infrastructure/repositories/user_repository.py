"""PostgreSQL implementation of UserRepository."""

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import User, UserRole
from src.domain.exceptions import UserAlreadyExistsException
from src.domain.interfaces import UserRepository
from src.infrastructure.database.models import UserModel
from .errors import store_errors


class PostgresUserRepository(UserRepository):
    """
    PostgreSQL implementation of the User repository.

    Uses SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, user: User) -> User:
        """
        Persist a user to the database.

        Raises:
            UserAlreadyExistsException: The email was taken by a signup
                that committed after the caller's duplicate check
            StorageUnavailableException: The database could not be reached
        """
        model = UserModel(
            id=str(user.id),
            unique_id=user.unique_id,
            display_name=user.display_name,
            email=user.email,
            branch_id=user.branch_id,
            branch_name=user.branch_name,
            branch_location=user.branch_location,
            firebase_uid=user.firebase_uid,
            role=user.role.value,
            is_active=user.is_active,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

        with store_errors("save user", key=user.unique_id):
            self._session.add(model)
            try:
                await self._session.flush()
            except IntegrityError as e:
                # unique_id comes from the atomic counter, so email is the clash
                raise UserAlreadyExistsException(user.email) from e

        return user

    async def get_by_email(self, email: str) -> Optional[User]:
        """Retrieve a user by email, active or not."""
        stmt = select(UserModel).where(UserModel.email == email.lower())
        with store_errors("look up user by email"):
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def get_by_unique_id(self, unique_id: str) -> Optional[User]:
        """Retrieve an active user by unique ID."""
        stmt = select(UserModel).where(
            UserModel.unique_id == unique_id,
            UserModel.is_active.is_(True),
        )
        with store_errors(f"look up user '{unique_id}'", key=unique_id):
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    def _to_entity(self, model: UserModel) -> User:
        """Convert database model to domain entity."""
        return User(
            id=UUID(model.id),
            unique_id=model.unique_id,
            display_name=model.display_name,
            email=model.email,
            branch_id=model.branch_id,
            branch_name=model.branch_name,
            branch_location=model.branch_location,
            firebase_uid=model.firebase_uid,
            role=UserRole(model.role),
            is_active=model.is_active,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
