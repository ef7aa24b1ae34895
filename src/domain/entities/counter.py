"""Counter entity representing a persisted sequence."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Counter:
    """
    Last-issued value of a named sequence.

    Attributes:
        counter_key: Key the sequence is scoped to (a branch code for
            user IDs, or a daily customer/transaction key)
        sequence: Last value handed out; a fresh counter holds its base
        updated_at: When the counter was last incremented
    """

    counter_key: str
    sequence: int
    updated_at: Optional[datetime] = None

    @property
    def next_value(self) -> int:
        """The value the next allocation will return."""
        return self.sequence + 1
