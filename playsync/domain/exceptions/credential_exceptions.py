"""Credential hashing related exceptions."""

from .base import DomainException


class CredentialException(DomainException):
    """Base exception for credential hashing errors."""

    pass


class InvalidPasswordError(CredentialException, ValueError):
    """Exception raised when a plaintext password cannot be hashed or checked."""

    def __init__(self, message: str = "Password must be a non-empty string") -> None:
        """Initialize the exception.

        Args:
            message: The error message
        """
        super().__init__(message)


class MalformedHashError(CredentialException, ValueError):
    """Exception raised when a stored representation is not a valid bcrypt hash."""

    def __init__(self, message: str = "Invalid hashed password format") -> None:
        """Initialize the exception.

        Args:
            message: The error message
        """
        super().__init__(message)


class PasswordHashingError(CredentialException):
    """Exception raised when the underlying hashing primitive fails."""

    def __init__(self, message: str = "Password hashing failed") -> None:
        """Initialize the exception.

        Args:
            message: The error message
        """
        super().__init__(message)
