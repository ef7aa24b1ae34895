"""Pydantic schemas for API request/response validation."""

from .branch import BranchSchema, BranchListResponseSchema
from .user import UserCreateSchema, UserResponseSchema
from .error import ErrorResponseSchema

__all__ = [
    "BranchSchema",
    "BranchListResponseSchema",
    "UserCreateSchema",
    "UserResponseSchema",
    "ErrorResponseSchema",
]
