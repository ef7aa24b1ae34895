"""Data transfer objects for branch operations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BranchResponse:
    """Public view of an active branch."""

    branch_id: str
    branch_name: str
    branch_location: str
    branch_code: str

    @classmethod
    def from_entity(cls, branch) -> "BranchResponse":
        return cls(
            branch_id=branch.branch_id,
            branch_name=branch.branch_name,
            branch_location=branch.branch_location,
            branch_code=branch.branch_code,
        )
