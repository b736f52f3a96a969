"""Domain services package."""

from .password_hasher import (
    DEFAULT_TEMPORARY_PASSWORD_LENGTH,
    TEMPORARY_PASSWORD_ALPHABET,
    PasswordHasher,
)

__all__ = [
    "DEFAULT_TEMPORARY_PASSWORD_LENGTH",
    "PasswordHasher",
    "TEMPORARY_PASSWORD_ALPHABET",
]
