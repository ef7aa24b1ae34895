"""User service - orchestrates user signup and lookup."""

import structlog

from src.application.dto import RegisterUserRequest, UserResponse
from src.application.services.branch_service import BranchService
from src.application.services.sequence_service import SequenceAllocator
from src.core.metrics import record_user_created
from src.domain.entities import User, UserRole
from src.domain.exceptions import (
    InvalidUserRequestException,
    UserAlreadyExistsException,
    UserNotFoundException,
)
from src.domain.interfaces import UserRepository

logger = structlog.get_logger(__name__)


class UserService:
    """
    Application service for user use cases.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        branch_service: BranchService,
        allocator: SequenceAllocator,
    ):
        self._user_repo = user_repository
        self._branch_service = branch_service
        self._allocator = allocator

    async def register_user(self, request: RegisterUserRequest) -> UserResponse:
        """
        Create a user under an active branch with a freshly minted unique ID.

        Args:
            request: Registration details

        Returns:
            UserResponse including the assigned unique_id

        Raises:
            InvalidUserRequestException: If request validation fails
            UserAlreadyExistsException: If the email is already registered
            BranchNotFoundException: If the branch is unknown or inactive
            StorageUnavailableException: If no sequence number could be allocated
        """
        errors = request.validate()
        try:
            role = UserRole(request.role.lower())
        except ValueError:
            valid = ", ".join(r.value for r in UserRole)
            errors.append(f"role must be one of: {valid}")
        if errors:
            raise InvalidUserRequestException("; ".join(errors))

        email = request.email.strip().lower()
        log = logger.bind(email=email, branch_id=request.branch_id)

        if await self._user_repo.get_by_email(email) is not None:
            log.info("user_already_exists")
            raise UserAlreadyExistsException(email)

        branch = await self._branch_service.get_active_branch(request.branch_id)

        unique_id = await self._allocator.next_unique_id(branch.branch_code)

        user = User(
            unique_id=unique_id,
            display_name=request.display_name.strip(),
            email=email,
            branch_id=branch.branch_id,
            branch_name=branch.branch_name,
            branch_location=branch.branch_location,
            firebase_uid=request.firebase_uid,
            role=role,
        )
        await self._user_repo.save(user)

        record_user_created(branch.branch_code)
        log.info("user_created", unique_id=unique_id, role=role.value)

        return UserResponse.from_entity(user)

    async def get_user(self, unique_id: str) -> UserResponse:
        """
        Retrieve an active user by unique ID.

        Raises:
            UserNotFoundException: If no active user has that ID
        """
        user = await self._user_repo.get_by_unique_id(unique_id)
        if user is None:
            raise UserNotFoundException(unique_id)
        return UserResponse.from_entity(user)
