"""Counter keys for each ID family."""

from datetime import date

from .formatting import date_stamp
from .validation import validate_branch_code


def unique_id_counter_key(branch_code: str) -> str:
    """User unique IDs share one counter per branch, keyed by the bare code."""
    return validate_branch_code(branch_code)


def customer_counter_key(customer_type: str, day: date) -> str:
    """Daily counter for a customer type, e.g. "customer_haj_050925"."""
    if not customer_type or not customer_type.strip():
        raise ValueError("Customer type is required")
    return f"customer_{customer_type.strip().lower()}_{date_stamp(day)}"


def transaction_counter_key(branch_code: str, day: date) -> str:
    """Daily counter for a branch's transactions, e.g. "transaction_DH_290825"."""
    validate_branch_code(branch_code)
    return f"transaction_{branch_code}_{date_stamp(day)}"
