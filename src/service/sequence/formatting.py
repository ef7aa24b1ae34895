"""
ID formatting for sequence-backed identifiers.

All functions here are pure: they never touch the counter store.

Formats:
    User unique ID:   {branch_code}-{sequence:04d}          DH-0001
    Customer ID:      {PREFIX}{DDMMYY}{serial:05d}          HAJ05092500001
    Transaction ID:   TXN{branch_code}{DDMMYY}{serial:04d}  TXNDH2908250001

Widths are minimums: larger numbers widen the field instead of being
truncated.
"""

from datetime import date

from .settings import SequenceSettings, sequence_settings
from .validation import validate_branch_code


def _pad(number: int, width: int) -> str:
    if number < 0:
        raise ValueError(f"Sequence numbers must be non-negative, got {number}")
    return str(number).zfill(width)


def date_stamp(day: date) -> str:
    """Render a date as DDMMYY."""
    return day.strftime("%d%m%y")


def format_unique_id(
    branch_code: str,
    sequence: int,
    settings: SequenceSettings = sequence_settings,
) -> str:
    """
    Format a user unique ID.

    Args:
        branch_code: Short branch code, e.g. "DH"
        sequence: Allocated sequence number (non-negative)
        settings: Sequence settings (uses defaults if not provided)

    Returns:
        "{branch_code}-{sequence}" with the sequence zero-padded,
        e.g. format_unique_id("BOG", 23) == "BOG-0023"

    Raises:
        InvalidBranchCodeException: If the branch code is malformed
        ValueError: If the sequence is negative
    """
    validate_branch_code(branch_code)
    return f"{branch_code}-{_pad(sequence, settings.unique_id_width)}"


def format_customer_id(
    prefix: str,
    day: date,
    serial: int,
    settings: SequenceSettings = sequence_settings,
) -> str:
    """Format a customer ID, e.g. ("haj", 2025-09-05, 1) -> "HAJ05092500001"."""
    if not prefix or not prefix.strip():
        raise ValueError("Customer ID prefix is required")
    return f"{prefix.strip().upper()}{date_stamp(day)}{_pad(serial, settings.customer_serial_width)}"


def format_transaction_id(
    branch_code: str,
    day: date,
    serial: int,
    settings: SequenceSettings = sequence_settings,
) -> str:
    """Format a transaction ID, e.g. ("DH", 2025-08-29, 1) -> "TXNDH2908250001"."""
    validate_branch_code(branch_code)
    return (
        f"{settings.transaction_prefix}{branch_code}{date_stamp(day)}"
        f"{_pad(serial, settings.transaction_serial_width)}"
    )
