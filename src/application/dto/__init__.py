"""Data Transfer Objects for application layer."""

from .branch import BranchResponse
from .user import RegisterUserRequest, UserResponse

__all__ = [
    "BranchResponse",
    "RegisterUserRequest",
    "UserResponse",
]
