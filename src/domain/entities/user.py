"""User entity representing an ERP dashboard account."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4


class UserRole(str, Enum):
    SUPER_ADMIN = "super admin"
    ADMIN = "admin"
    ACCOUNT = "account"
    RESERVATION = "reservation"
    USER = "user"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class User:
    """
    A dashboard user.

    ``unique_id`` is the human-readable identifier minted from the
    branch counter at signup (e.g. "DH-0001").
    """

    unique_id: str
    display_name: str
    email: str
    branch_id: str
    branch_name: str
    branch_location: str
    firebase_uid: str
    role: UserRole = UserRole.USER
    is_active: bool = True
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "unique_id": self.unique_id,
            "display_name": self.display_name,
            "email": self.email,
            "role": self.role.value,
            "branch_id": self.branch_id,
            "branch_name": self.branch_name,
            "created_at": self.created_at.isoformat(),
        }
