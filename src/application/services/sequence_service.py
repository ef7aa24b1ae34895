"""Sequence allocator - mints branch-scoped sequence numbers and IDs."""

import asyncio
from datetime import date, datetime
from zoneinfo import ZoneInfo

import structlog

from src.core.metrics import (
    record_allocation,
    record_allocation_failure,
    track_allocation_latency,
)
from src.domain.exceptions import (
    InvalidBranchCodeException,
    StorageUnavailableException,
)
from src.domain.interfaces import CounterRepository
from src.service.sequence import (
    SequenceSettings,
    sequence_settings,
    customer_counter_key,
    format_customer_id,
    format_transaction_id,
    format_unique_id,
    transaction_counter_key,
    unique_id_counter_key,
)

logger = structlog.get_logger(__name__)


class SequenceAllocator:
    """
    Application service for sequence allocation.

    Every call goes straight to the counter store; nothing is cached
    between calls, so any number of server processes can share one
    store without coordinating.
    """

    def __init__(
        self,
        counter_repository: CounterRepository,
        settings: SequenceSettings = sequence_settings,
    ):
        self._counters = counter_repository
        self._settings = settings

    async def allocate_next(self, branch_code: str) -> int:
        """
        Allocate the next sequence number for a branch.

        Args:
            branch_code: Short code of an active branch (e.g. "DH")

        Returns:
            The allocated sequence number, starting at ``start + 1``

        Raises:
            InvalidBranchCodeException: If the branch code is empty or malformed
            StorageUnavailableException: If the store is unreachable, the
                update fails, or the allocation deadline passes
        """
        try:
            key = unique_id_counter_key(branch_code)
        except InvalidBranchCodeException:
            record_allocation_failure("user", "invalid")
            raise

        return await self._allocate(key, family="user")

    async def next_unique_id(self, branch_code: str) -> str:
        """Allocate and format a user unique ID, e.g. "DH-0001"."""
        sequence = await self.allocate_next(branch_code)
        return format_unique_id(branch_code, sequence, self._settings)

    async def next_customer_id(
        self,
        customer_type: str,
        prefix: str,
        on: date | None = None,
    ) -> str:
        """
        Allocate and format a customer ID from the customer type's daily counter.

        Args:
            customer_type: Customer type value (e.g. "haj")
            prefix: ID prefix configured for the type (e.g. "HAJ")
            on: Day of the counter; defaults to today in the configured timezone
        """
        day = on or self.today()
        serial = await self._allocate(
            customer_counter_key(customer_type, day),
            family="customer",
        )
        return format_customer_id(prefix, day, serial, self._settings)

    async def next_transaction_id(self, branch_code: str, on: date | None = None) -> str:
        """Allocate and format a transaction ID from the branch's daily counter."""
        day = on or self.today()
        try:
            key = transaction_counter_key(branch_code, day)
        except InvalidBranchCodeException:
            record_allocation_failure("transaction", "invalid")
            raise

        serial = await self._allocate(key, family="transaction")
        return format_transaction_id(branch_code, day, serial, self._settings)

    async def current_value(self, branch_code: str) -> int:
        """Last sequence number issued for a branch (the base if none yet)."""
        counter = await self._counters.get(unique_id_counter_key(branch_code))
        return counter.sequence if counter else self._settings.start

    def today(self) -> date:
        return datetime.now(ZoneInfo(self._settings.timezone)).date()

    async def _allocate(self, key: str, family: str) -> int:
        log = logger.bind(counter_key=key, family=family)

        with track_allocation_latency():
            try:
                sequence = await asyncio.wait_for(
                    self._counters.increment(key, base=self._settings.start),
                    timeout=self._settings.allocation_timeout,
                )
            except asyncio.TimeoutError:
                record_allocation_failure(family, "unavailable")
                log.error(
                    "sequence_allocation_timeout",
                    timeout=self._settings.allocation_timeout,
                )
                raise StorageUnavailableException(
                    message=f"Timed out allocating from counter '{key}'",
                    key=key,
                ) from None
            except StorageUnavailableException:
                record_allocation_failure(family, "unavailable")
                log.error("sequence_allocation_failed")
                raise

        record_allocation(family, sequence)
        log.info("sequence_allocated", sequence=sequence)

        return sequence
