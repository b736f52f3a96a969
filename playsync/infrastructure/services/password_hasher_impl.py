"""Password hasher implementation."""

import logging
import random
import secrets
from functools import lru_cache

import anyio.to_thread
from passlib.context import CryptContext

from ...domain.exceptions import InvalidPasswordError, PasswordHashingError
from ...domain.services import (
    DEFAULT_TEMPORARY_PASSWORD_LENGTH,
    TEMPORARY_PASSWORD_ALPHABET,
    PasswordHasher,
)
from ...domain.value_objects import HashedPassword, Pepper
from ..config.settings import get_settings

logger = logging.getLogger(__name__)

DEFAULT_ROUNDS = 12


class BcryptPasswordHasher(PasswordHasher):
    """Password hasher combining bcrypt with an application-level pepper.

    The pepper is never stored with the hash; it only lives in configuration.
    bcrypt runs in a worker thread so that a slow hash does not block the
    event loop.
    """

    def __init__(
        self,
        pepper: Pepper,
        rounds: int = DEFAULT_ROUNDS,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the hasher.

        Args:
            pepper: Process-wide pepper applied to every password
            rounds: bcrypt cost factor used for new hashes
            rng: Random source for temporary passwords (secure by default)
        """
        self._pepper = pepper
        self._rounds = rounds
        self._rng = rng or secrets.SystemRandom()
        self._pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

        if pepper.is_default:
            logger.warning(
                "Password hasher is using the default pepper; set PASSWORD_PEPPER"
            )

    @property
    def rounds(self) -> int:
        """Cost factor used for new hashes."""
        return self._rounds

    async def hash(self, plain_password: str) -> str:
        """Hash a plain text password.

        Args:
            plain_password: The plain text password to hash

        Returns:
            The bcrypt hash string

        Raises:
            InvalidPasswordError: If the password is not a non-empty string
            PasswordHashingError: If bcrypt rejects the input
        """
        if not isinstance(plain_password, str) or not plain_password:
            raise InvalidPasswordError()

        peppered = self._pepper.apply(plain_password)
        try:
            return await anyio.to_thread.run_sync(self._pwd_context.hash, peppered)
        except (TypeError, ValueError) as e:
            logger.error("bcrypt failed to hash password: %s", type(e).__name__)
            raise PasswordHashingError(f"Password hashing failed: {e}") from e

    async def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a plain password against a hash.

        Args:
            plain_password: The plain text password to verify
            hashed_password: The hashed password to verify against

        Returns:
            True if the password matches, False otherwise

        Raises:
            InvalidPasswordError: If the password is not a string
            MalformedHashError: If the hash is not a valid bcrypt hash
            PasswordHashingError: If bcrypt rejects the input
        """
        if not isinstance(plain_password, str):
            raise InvalidPasswordError("Password must be a string")

        hashed = HashedPassword(hashed_password)
        if not plain_password:
            return False

        peppered = self._pepper.apply(plain_password)
        try:
            return await anyio.to_thread.run_sync(
                self._pwd_context.verify, peppered, hashed.value
            )
        except (TypeError, ValueError) as e:
            logger.error("bcrypt failed to verify password: %s", type(e).__name__)
            raise PasswordHashingError(f"Password verification failed: {e}") from e

    def needs_rehash(self, hashed_password: str) -> bool:
        """Check whether the hash was computed with fewer rounds than configured."""
        return HashedPassword(hashed_password).rounds < self._rounds

    def generate_temporary_password(
        self, length: int = DEFAULT_TEMPORARY_PASSWORD_LENGTH
    ) -> str:
        """Generate a one-time password without visually ambiguous characters."""
        if length < 1:
            raise ValueError("Temporary password length must be at least 1")

        return "".join(
            self._rng.choice(TEMPORARY_PASSWORD_ALPHABET) for _ in range(length)
        )


@lru_cache
def get_password_hasher() -> PasswordHasher:
    """Get the process-wide password hasher built from settings.

    Returns:
        Password hasher instance
    """
    settings = get_settings()
    return BcryptPasswordHasher(
        pepper=settings.pepper,
        rounds=settings.password_hash_rounds,
    )
