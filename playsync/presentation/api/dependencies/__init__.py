"""API dependencies."""

from .pagination import paginate, parse_positive_int
from .validation import DtoValidationError, format_validation_errors, validate_dto

__all__ = [
    "DtoValidationError",
    "format_validation_errors",
    "paginate",
    "parse_positive_int",
    "validate_dto",
]
