"""Response envelope shared by every endpoint."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Uniform success response envelope."""

    success: bool = Field(default=True, description="Whether the request succeeded")
    message: str = Field(default="Success", description="Human readable message")
    data: T | None = Field(default=None, description="Response payload")
    meta: dict[str, Any] | None = Field(default=None, description="Extra metadata")


class ErrorDetail(BaseModel):
    """A single field level error."""

    field: str = Field(..., description="Dotted location of the invalid value")
    message: str = Field(..., description="Why the value was rejected")


class ErrorResponse(BaseModel):
    """Uniform error response envelope."""

    success: bool = Field(default=False, description="Always false")
    message: str = Field(..., description="Human readable message")
    data: None = None
    errors: list[ErrorDetail] | None = Field(
        default=None, description="Field level errors"
    )


def api_response(
    data: T,
    message: str = "Success",
    meta: dict[str, Any] | None = None,
) -> ApiResponse[T]:
    """Wrap a payload in the success envelope.

    Args:
        data: Response payload
        message: Human readable message
        meta: Extra metadata (e.g. pagination)

    Returns:
        The response envelope
    """
    return ApiResponse(success=True, message=message, data=data, meta=meta)
