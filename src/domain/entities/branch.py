"""Branch entity representing an organizational unit."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Branch:
    """
    A physical office of the organization.

    Users and sequence counters are scoped to a branch through its
    short ``branch_code`` (e.g. "DH").
    """

    branch_id: str
    branch_name: str
    branch_location: str
    branch_code: str
    is_active: bool = True
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def to_dict(self) -> dict:
        return {
            "branch_id": self.branch_id,
            "branch_name": self.branch_name,
            "branch_location": self.branch_location,
            "branch_code": self.branch_code,
        }


DEFAULT_BRANCHES: tuple[Branch, ...] = (
    Branch("main", "Main Office", "Dhaka, Bangladesh", "DH"),
    Branch("bogra", "Bogra Branch", "Bogra, Bangladesh", "BOG"),
    Branch("dupchanchia", "Dupchanchia Branch", "Dupchanchia, Bangladesh", "DUP"),
    Branch("chittagong", "Chittagong Branch", "Chittagong, Bangladesh", "CTG"),
    Branch("sylhet", "Sylhet Branch", "Sylhet, Bangladesh", "SYL"),
    Branch("rajshahi", "Rajshahi Branch", "Rajshahi, Bangladesh", "RAJ"),
    Branch("khulna", "Khulna Branch", "Khulna, Bangladesh", "KHU"),
    Branch("barisal", "Barisal Branch", "Barisal, Bangladesh", "BAR"),
    Branch("rangpur", "Rangpur Branch", "Rangpur, Bangladesh", "RAN"),
    Branch("mymensingh", "Mymensingh Branch", "Mymensingh, Bangladesh", "MYM"),
)
