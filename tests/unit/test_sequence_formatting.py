"""
Unit Tests for the Sequence ID formatting module.

These tests verify:
1. User unique ID formatting (padding, widening, rejection of bad input)
2. Customer and transaction ID formats
3. Counter keys for each ID family
4. Branch code shape validation

Test Categories:
- test_unique_id_*: "{code}-{seq:04d}" formatting
- test_customer_id_* / test_transaction_id_*: daily ID formats
- test_*_key_*: counter key builders
- test_branch_code_*: validation
"""

from datetime import date

import pytest

from src.domain.exceptions import InvalidBranchCodeException
from src.service.sequence import (
    SequenceSettings,
    customer_counter_key,
    date_stamp,
    format_customer_id,
    format_transaction_id,
    format_unique_id,
    transaction_counter_key,
    unique_id_counter_key,
    validate_branch_code,
)


# =============================================================================
# Unique ID Tests
# =============================================================================

class TestUniqueId:
    """Tests for format_unique_id."""

    @pytest.mark.parametrize(
        "branch_code,sequence,expected",
        [
            ("DH", 1, "DH-0001"),
            ("BOG", 23, "BOG-0023"),
            ("DH", 9999, "DH-9999"),
            ("CTG", 12345, "CTG-12345"),
            ("SYL", 0, "SYL-0000"),
        ],
    )
    def test_unique_id_examples(self, branch_code, sequence, expected):
        assert format_unique_id(branch_code, sequence) == expected

    def test_unique_id_widens_instead_of_truncating(self):
        """Numbers wider than the pad width keep every digit."""
        assert format_unique_id("DH", 1234567) == "DH-1234567"

    def test_unique_id_negative_sequence_raises(self):
        with pytest.raises(ValueError):
            format_unique_id("DH", -1)

    @pytest.mark.parametrize("branch_code", ["", "   ", "D-H", "DH ", "DH\n", "ÄB", "A" * 17])
    def test_unique_id_rejects_malformed_branch_code(self, branch_code):
        with pytest.raises(InvalidBranchCodeException):
            format_unique_id(branch_code, 1)

    def test_unique_id_custom_width(self):
        settings = SequenceSettings(unique_id_width=6)

        assert format_unique_id("DH", 42, settings) == "DH-000042"

    def test_unique_id_is_pure(self):
        """Same input, same output, no matter how often it is called."""
        results = {format_unique_id("RAJ", 7) for _ in range(10)}

        assert results == {"RAJ-0007"}


# =============================================================================
# Customer / Transaction ID Tests
# =============================================================================

class TestDailyIds:
    """Tests for the date-stamped ID families."""

    def test_date_stamp_is_ddmmyy(self):
        assert date_stamp(date(2025, 9, 5)) == "050925"
        assert date_stamp(date(2025, 12, 31)) == "311225"

    def test_customer_id_format(self):
        assert format_customer_id("HAJ", date(2025, 9, 5), 1) == "HAJ05092500001"

    def test_customer_id_prefix_is_upper_cased(self):
        assert format_customer_id("umrah", date(2025, 9, 5), 12) == "UMRAH05092500012"

    def test_customer_id_empty_prefix_raises(self):
        with pytest.raises(ValueError):
            format_customer_id("  ", date(2025, 9, 5), 1)

    def test_customer_id_widens(self):
        assert format_customer_id("HAJ", date(2025, 9, 5), 123456) == "HAJ050925123456"

    def test_transaction_id_format(self):
        assert format_transaction_id("DH", date(2025, 8, 29), 1) == "TXNDH2908250001"

    def test_transaction_id_custom_prefix(self):
        settings = SequenceSettings(transaction_prefix="TX")

        assert format_transaction_id("BOG", date(2025, 8, 29), 3, settings) == "TXBOG2908250003"

    def test_transaction_id_rejects_bad_branch(self):
        with pytest.raises(InvalidBranchCodeException):
            format_transaction_id("", date(2025, 8, 29), 1)


# =============================================================================
# Counter Key Tests
# =============================================================================

class TestCounterKeys:
    """Tests for counter key builders."""

    def test_unique_id_key_is_bare_branch_code(self):
        assert unique_id_counter_key("DH") == "DH"

    def test_unique_id_key_validates(self):
        with pytest.raises(InvalidBranchCodeException):
            unique_id_counter_key("")

    def test_customer_key(self):
        assert customer_counter_key("HAJ", date(2025, 9, 5)) == "customer_haj_050925"

    def test_customer_key_requires_type(self):
        with pytest.raises(ValueError):
            customer_counter_key("", date(2025, 9, 5))

    def test_transaction_key(self):
        assert transaction_counter_key("DH", date(2025, 8, 29)) == "transaction_DH_290825"

    def test_daily_keys_change_with_the_day(self):
        """A new day means a fresh counter, which restarts the serial."""
        today = transaction_counter_key("DH", date(2025, 8, 29))
        tomorrow = transaction_counter_key("DH", date(2025, 8, 30))

        assert today != tomorrow


# =============================================================================
# Validation Tests
# =============================================================================

class TestBranchCodeValidation:
    """Tests for validate_branch_code."""

    @pytest.mark.parametrize("branch_code", ["DH", "BOG", "x1", "A" * 16])
    def test_branch_code_valid(self, branch_code):
        assert validate_branch_code(branch_code) == branch_code

    @pytest.mark.parametrize("branch_code", [None, 12, "", " ", "DH-1", "D H", "DH\n", "\nDH"])
    def test_branch_code_invalid(self, branch_code):
        with pytest.raises(InvalidBranchCodeException) as exc_info:
            validate_branch_code(branch_code)

        assert exc_info.value.code == "INVALID_BRANCH_CODE"
        assert exc_info.value.branch_code == branch_code
