"""Branch-related domain exceptions."""

from .base import DomainException


class BranchNotFoundException(DomainException):
    """Raised when a branch does not exist or is inactive."""

    def __init__(self, branch_id: str):
        super().__init__(
            message=f"Invalid branch ID: {branch_id}",
            code="INVALID_BRANCH",
        )
        self.branch_id = branch_id
