"""Translation of driver and pool errors into StorageUnavailableException."""

from contextlib import contextmanager
from typing import Iterator, Optional

import structlog
from sqlalchemy.exc import DBAPIError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from src.domain.exceptions import StorageUnavailableException

logger = structlog.get_logger(__name__)

# Driver errors, pool exhaustion and refused connections
STORE_ERRORS = (DBAPIError, PoolTimeoutError, OSError)


@contextmanager
def store_errors(operation: str, key: Optional[str] = None) -> Iterator[None]:
    """
    Re-raise store failures inside the block as StorageUnavailableException.

    Domain exceptions raised in the block pass through untouched, so a
    repository can map specific driver errors (e.g. IntegrityError) to
    its own exception before this catches the rest.
    """
    try:
        yield
    except STORE_ERRORS as e:
        logger.warning(
            "store_operation_failed",
            operation=operation,
            key=key,
            error=str(e),
            error_type=type(e).__name__,
        )
        raise StorageUnavailableException(
            message=f"Unable to {operation}",
            key=key,
        ) from e
