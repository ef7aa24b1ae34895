"""
Sequence Module for branch-scoped unique ID generation
"""

from .settings import SequenceSettings, sequence_settings
from .validation import BRANCH_CODE_PATTERN, validate_branch_code
from .formatting import (
    date_stamp,
    format_unique_id,
    format_customer_id,
    format_transaction_id,
)
from .keys import (
    unique_id_counter_key,
    customer_counter_key,
    transaction_counter_key,
)

__all__ = [
    # Settings
    "SequenceSettings",
    "sequence_settings",
    # Validation
    "BRANCH_CODE_PATTERN",
    "validate_branch_code",
    # Formatting
    "date_stamp",
    "format_unique_id",
    "format_customer_id",
    "format_transaction_id",
    # Keys
    "unique_id_counter_key",
    "customer_counter_key",
    "transaction_counter_key",
]
