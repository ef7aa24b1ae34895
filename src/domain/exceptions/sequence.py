"""Sequence allocation domain exceptions."""

from .base import DomainException


class InvalidBranchCodeException(DomainException):
    """Raised when a branch code is empty or malformed."""

    def __init__(self, branch_code: str | None):
        super().__init__(
            message=f"Invalid branch code: {branch_code!r}",
            code="INVALID_BRANCH_CODE",
        )
        self.branch_code = branch_code


class StorageUnavailableException(DomainException):
    """
    Raised when the counter store cannot be reached or the atomic
    update fails.

    The counter is guaranteed to be left as it was before the call.
    """

    def __init__(self, message: str = "Counter store unavailable", key: str | None = None):
        super().__init__(
            message=message,
            code="STORAGE_UNAVAILABLE",
        )
        self.key = key
