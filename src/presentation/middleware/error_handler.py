"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import structlog

from src.domain.exceptions import (
    DomainException,
    BranchNotFoundException,
    InvalidBranchCodeException,
    InvalidUserRequestException,
    StorageUnavailableException,
    UserAlreadyExistsException,
    UserNotFoundException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def _error_response(status_code: int, exc: DomainException, message: str | None = None) -> JSONResponse:
    body = exc.to_dict()
    if message:
        body["message"] = message
    body["request_id"] = get_request_id()
    return JSONResponse(status_code=status_code, content=body)


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(UserNotFoundException)
    async def user_not_found_handler(
        request: Request,
        exc: UserNotFoundException,
    ) -> JSONResponse:
        """Handle user not found errors."""
        return _error_response(404, exc)

    @app.exception_handler(UserAlreadyExistsException)
    async def user_exists_handler(
        request: Request,
        exc: UserAlreadyExistsException,
    ) -> JSONResponse:
        """Handle duplicate registrations."""
        return _error_response(409, exc)

    @app.exception_handler(BranchNotFoundException)
    async def branch_not_found_handler(
        request: Request,
        exc: BranchNotFoundException,
    ) -> JSONResponse:
        """Unknown or inactive branches are a client error on signup."""
        return _error_response(400, exc)

    @app.exception_handler(InvalidBranchCodeException)
    async def invalid_branch_code_handler(
        request: Request,
        exc: InvalidBranchCodeException,
    ) -> JSONResponse:
        """Handle malformed branch codes."""
        logger.warning(
            "invalid_branch_code",
            request_id=get_request_id(),
            branch_code=exc.branch_code,
        )
        return _error_response(400, exc)

    @app.exception_handler(InvalidUserRequestException)
    async def invalid_request_handler(
        request: Request,
        exc: InvalidUserRequestException,
    ) -> JSONResponse:
        """Handle invalid request errors."""
        return _error_response(400, exc)

    @app.exception_handler(StorageUnavailableException)
    async def storage_unavailable_handler(
        request: Request,
        exc: StorageUnavailableException,
    ) -> JSONResponse:
        """Handle counter store outages."""
        logger.error(
            "storage_unavailable",
            request_id=get_request_id(),
            message=exc.message,
            counter_key=exc.key,
        )
        return _error_response(
            503,
            exc,
            message="Service temporarily unavailable. Please try again.",
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return _error_response(400, exc)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            request_id=get_request_id(),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "INTERNAL_ERROR",
                "message": "An unexpected error occurred.",
                "request_id": get_request_id(),
            },
        )
