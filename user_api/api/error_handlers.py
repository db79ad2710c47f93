"""Error Handlers — global exception handlers for the User API.

Invariants:
    - UserApiError → structured JSON with error code, message, severity
    - RequestValidationError → mapped to UserValidationError (400, field-level details)
    - Exception (catch-all) → 500 INTERNAL_ERROR, never leaks internal details
    - Every response uses the UserApiError.to_response() envelope

Design Decisions:
    - Three-layer handler: domain (UserApiError), validation (Pydantic), catch-all (Exception)
    - Shape errors from Pydantic and value errors from validate_user_fields share
      the VALIDATION_ERROR envelope, so clients see one 400 format
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from user_api.core.errors import (
    ErrorCategory, ErrorSeverity, UserApiError, UserValidationError,
)
from user_api.core.validate_user import FieldError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_user_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_user_api_error_handler(app: FastAPI) -> None:
    """Register domain error handler."""

    @app.exception_handler(UserApiError)
    async def user_api_error_handler(request: Request, exc: UserApiError):
        """Handle all User API domain errors."""
        log = logger.warning if exc.http_status < 500 else logger.error
        log(
            f"UserApiError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )

def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Convert Pydantic shape errors into a UserValidationError response."""
        error = UserValidationError(
            [e.to_dict() for e in _field_errors(exc)],
        )
        logger.warning(
            f"Validation error on {request.url.path}: {error.message}",
            extra={"error_code": error.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=error.http_status, content=error.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        error = UserApiError(
            "An unexpected error occurred", "INTERNAL_ERROR",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        )
        return JSONResponse(
            status_code=error.http_status, content=error.to_response(),
        )


def _field_errors(exc: RequestValidationError) -> list[FieldError]:
    # loc is ("body", "email") / ("path", "user_id"); kept dotted
    return [
        FieldError(
            field=".".join(str(loc) for loc in e["loc"]),
            message=e["msg"],
            type=e["type"],
        )
        for e in exc.errors()
    ]
