"""API error taxonomy and the FastAPI handlers that render it.

Every error leaves the service as ``{"message": ...}`` with the status code
carried by the exception class.
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

logger = structlog.get_logger()


class ApiError(Exception):
    """Base exception for errors surfaced to API callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class UnauthorizedError(ApiError):
    """Raised when a bearer token is missing, malformed, forged or expired."""

    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Unauthorized access"


class ConflictError(ApiError):
    """Raised when a resource with the same natural key already exists."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Resource already exists"


class InvalidIdError(ApiError):
    """Raised when a path or body id is not a valid ObjectId."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid id"


class UpstreamError(ApiError):
    """Raised when the store or the payment provider fails."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Upstream service failure"


async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("api_error", status_code=exc.status_code, error=exc.message)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def _store_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    logger.error("store_operation_failed", error=str(exc)[:200], error_type=type(exc).__name__)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Database operation failed"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the API error handlers to the FastAPI application."""
    app.add_exception_handler(ApiError, _api_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(PyMongoError, _store_error_handler)  # type: ignore[arg-type]
