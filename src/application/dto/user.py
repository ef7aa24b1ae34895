"""Data transfer objects for user operations."""

import re
from dataclasses import dataclass
from typing import List

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass(frozen=True)
class RegisterUserRequest:
    """Input data for registering a user under a branch."""

    email: str
    display_name: str
    branch_id: str
    firebase_uid: str
    role: str = "user"

    def validate(self) -> List[str]:
        errors = []

        if not self.email or not _EMAIL_PATTERN.match(self.email.strip()):
            errors.append("a valid email is required")

        if not self.display_name or not self.display_name.strip():
            errors.append("display_name is required")

        if not self.branch_id or not self.branch_id.strip():
            errors.append("branch_id is required")

        if not self.firebase_uid or not self.firebase_uid.strip():
            errors.append("firebase_uid is required")

        return errors


@dataclass(frozen=True)
class UserResponse:
    """Response data for a user."""

    id: str
    unique_id: str
    display_name: str
    email: str
    role: str
    branch_id: str
    branch_name: str
    created_at: str

    @classmethod
    def from_entity(cls, user) -> "UserResponse":
        return cls(
            id=str(user.id),
            unique_id=user.unique_id,
            display_name=user.display_name,
            email=user.email,
            role=user.role.value,
            branch_id=user.branch_id,
            branch_name=user.branch_name,
            created_at=user.created_at.isoformat(),
        )
