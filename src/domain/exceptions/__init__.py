"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .sequence import (
    InvalidBranchCodeException,
    StorageUnavailableException,
)
from .branch import BranchNotFoundException
from .user import (
    InvalidUserRequestException,
    UserAlreadyExistsException,
    UserNotFoundException,
)

__all__ = [
    "DomainException",
    "InvalidBranchCodeException",
    "StorageUnavailableException",
    "BranchNotFoundException",
    "InvalidUserRequestException",
    "UserAlreadyExistsException",
    "UserNotFoundException",
]
