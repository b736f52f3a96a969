"""Password hasher domain service."""

from abc import ABC, abstractmethod

from ..value_objects import HashedPassword

# Visually ambiguous characters (I, l, O, 0, 1 and friends) are left out.
TEMPORARY_PASSWORD_ALPHABET = (
    "ABCDEFGHJKMNPQRSTUVWXYZabcdefghjkmnpqrstuvwxyz23456789!@#$"
)
DEFAULT_TEMPORARY_PASSWORD_LENGTH = 12


class PasswordHasher(ABC):
    """Abstract base class for password hashing and verification.

    Implementations are stateless apart from their pepper and cost factor,
    so a single instance can be shared by concurrent requests.
    """

    @abstractmethod
    async def hash(self, plain_password: str) -> str:
        """Hash a plain text password.

        Args:
            plain_password: The plain text password to hash

        Returns:
            The stored representation (embeds salt and cost factor)

        Raises:
            InvalidPasswordError: If the password is not a non-empty string
            PasswordHashingError: If the hashing primitive fails
        """
        pass

    @abstractmethod
    async def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a plain password against a stored representation.

        Args:
            plain_password: The plain text password to verify
            hashed_password: The stored representation to verify against

        Returns:
            True if the password matches, False otherwise

        Raises:
            InvalidPasswordError: If the password is not a string
            MalformedHashError: If the stored representation is malformed
        """
        pass

    @abstractmethod
    def needs_rehash(self, hashed_password: str) -> bool:
        """Check whether a representation was computed with a weaker cost factor.

        Args:
            hashed_password: The stored representation

        Returns:
            True if the embedded cost factor is below the configured one

        Raises:
            MalformedHashError: If the stored representation is malformed
        """
        pass

    @abstractmethod
    def generate_temporary_password(
        self, length: int = DEFAULT_TEMPORARY_PASSWORD_LENGTH
    ) -> str:
        """Generate a one-time password from TEMPORARY_PASSWORD_ALPHABET.

        Args:
            length: Number of characters

        Returns:
            The generated password

        Raises:
            ValueError: If length is smaller than 1
        """
        pass

    async def hash_password(self, plain_password: str) -> HashedPassword:
        """Hash a plain text password into a HashedPassword value object.

        Args:
            plain_password: The plain text password to hash

        Returns:
            A HashedPassword value object
        """
        return HashedPassword(await self.hash(plain_password))
