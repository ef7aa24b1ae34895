"""Shape checks for counter inputs."""

import re

from src.domain.exceptions import InvalidBranchCodeException

# Hyphens are excluded so "{code}-{sequence}" stays unambiguous.
BRANCH_CODE_PATTERN = re.compile(r"[A-Za-z0-9]{1,16}")


def validate_branch_code(branch_code: str | None) -> str:
    """
    Check that a branch code is non-empty and well-formed.

    Only the shape is checked; whether the branch exists is the
    caller's concern.

    Returns:
        The branch code, unchanged

    Raises:
        InvalidBranchCodeException: If the code is empty or malformed
    """
    if not isinstance(branch_code, str) or not BRANCH_CODE_PATTERN.fullmatch(branch_code):
        raise InvalidBranchCodeException(branch_code)
    return branch_code
