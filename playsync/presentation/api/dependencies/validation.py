"""Request DTO validation dependency."""

import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

DtoT = TypeVar("DtoT", bound=BaseModel)


class DtoValidationError(Exception):
    """Raised when a request does not match its DTO schema."""

    def __init__(
        self,
        errors: list[dict[str, str]],
        message: str = "Validation failed",
    ) -> None:
        """Initialize the exception.

        Args:
            errors: Field level errors as ``{"field": ..., "message": ...}``
            message: The error message
        """
        super().__init__(message)
        self.message = message
        self.errors = errors


def format_validation_errors(errors: Sequence[Any]) -> list[dict[str, str]]:
    """Convert pydantic error dicts into ``{"field", "message"}`` pairs."""
    return [
        {
            "field": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
        }
        for error in errors
    ]


async def _read_body(request: Request) -> Any:
    raw = await request.body()
    if not raw:
        return {}
    try:
        return await request.json()
    except ValueError as e:
        raise DtoValidationError(
            [{"field": "body", "message": "Request body is not valid JSON"}]
        ) from e


def validate_dto(schema: type[DtoT]) -> Callable[[Request], Awaitable[DtoT]]:
    """Build a dependency validating the whole request against ``schema``.

    The schema receives ``{"body": ..., "query": ..., "params": ...}`` so a
    single model can constrain the JSON body, the query string and the path
    parameters at once.

    Args:
        schema: Pydantic model describing the request

    Returns:
        FastAPI dependency returning the validated model

    Raises:
        DtoValidationError: From the dependency, when validation fails
    """

    async def dependency(request: Request) -> DtoT:
        payload = {
            "body": await _read_body(request),
            "query": dict(request.query_params),
            "params": dict(request.path_params),
        }
        try:
            return schema.model_validate(payload)
        except ValidationError as e:
            errors = format_validation_errors(e.errors())
            logger.debug(
                "%s validation failed for %s: %s",
                schema.__name__,
                request.url.path,
                errors,
            )
            raise DtoValidationError(errors) from e

    return dependency
