"""Domain exception package."""

from .base import DomainException
from .credential_exceptions import (
    CredentialException,
    InvalidPasswordError,
    MalformedHashError,
    PasswordHashingError,
)

__all__ = [
    # Base
    "DomainException",
    # Credentials
    "CredentialException",
    "InvalidPasswordError",
    "MalformedHashError",
    "PasswordHashingError",
]
