"""
Global exception handling for the application.
Standardizes error responses as a JSON `{"error": {...}}` envelope.
"""

from typing import Any, Dict, Optional

import structlog
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = structlog.get_logger(__name__)


class DuplicateKeyError(Exception):
    """A write rejected by a uniqueness constraint.

    ``field`` names the colliding key (``"id"`` or ``"email"``) so callers
    never have to parse driver error text.
    """
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"duplicate {field}")


class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(AppError):
    """Missing or malformed input."""
    def __init__(self, message: str = "Invalid request", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_400_BAD_REQUEST, details)


class UnauthorizedException(AppError):
    """Authentication failure error."""
    def __init__(self, message: str = "Unauthorized", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_401_UNAUTHORIZED, details)


class ConflictException(AppError):
    """Uniqueness violation on an account key."""
    def __init__(self, message: str, field: str):
        self.field = field
        super().__init__(message, status.HTTP_409_CONFLICT, {"field": field})


class InternalException(AppError):
    """Store, hashing or verification failure. The message stays generic."""
    def __init__(self, message: str = "Internal server error.", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_500_INTERNAL_SERVER_ERROR, details)


def _error_body(code: str, message: str, path: str, details: Optional[Dict[str, Any]] = None) -> dict:
    body = {"code": code, "message": message, "path": path}
    if details is not None:
        body["details"] = details
    return {"error": body}


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report unparsable bodies as 400 instead of FastAPI's default 422."""
    fields = [".".join(str(p) for p in err.get("loc", ()) if p != "body") for err in exc.errors()]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(
            ValidationException.__name__,
            "Malformed request body.",
            request.url.path,
            {"fields": [f for f in fields if f]},
        ),
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions globally."""

    if isinstance(exc, AppError):
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.__class__.__name__, exc.message, request.url.path, exc.details),
        )

    logger.exception("Unexpected error occurred", path=request.url.path)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(
            "InternalServerError",
            "An unexpected error occurred. Please try again later.",
            request.url.path,
        ),
    )
