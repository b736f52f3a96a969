"""Exception handlers rendering errors in the response envelope."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ...domain.exceptions import (
    DomainException,
    InvalidPasswordError,
    MalformedHashError,
)
from ...infrastructure.config.settings import get_settings
from .dependencies.validation import DtoValidationError, format_validation_errors
from .responses import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)


def _error_response(
    status_code: int,
    message: str,
    errors: list[dict[str, str]] | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        message=message,
        errors=[ErrorDetail(**error) for error in errors] if errors else None,
    )
    # ``data`` is always null; ``errors`` only appears for validation failures
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude=None if errors else {"errors"}),
    )


async def dto_validation_exception_handler(
    request: Request, exc: DtoValidationError
) -> JSONResponse:
    """Render DTO validation failures as 400."""
    return _error_response(status.HTTP_400_BAD_REQUEST, exc.message, exc.errors)


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render FastAPI parameter validation failures like DTO failures."""
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        "Validation failed",
        format_validation_errors(exc.errors()),
    )


async def domain_exception_handler(
    request: Request, exc: DomainException
) -> JSONResponse:
    """Render domain exceptions that escaped the route handlers."""
    if isinstance(exc, (InvalidPasswordError, MalformedHashError)):
        return _error_response(status.HTTP_400_BAD_REQUEST, str(exc))

    logger.error(
        "Unhandled domain exception on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    message = "Internal server error" if get_settings().is_production else str(exc)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, message)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope exception handlers on an application.

    Args:
        app: FastAPIアプリケーション
    """
    app.add_exception_handler(DtoValidationError, dto_validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(
        RequestValidationError, request_validation_exception_handler  # type: ignore[arg-type]
    )
    app.add_exception_handler(DomainException, domain_exception_handler)  # type: ignore[arg-type]
