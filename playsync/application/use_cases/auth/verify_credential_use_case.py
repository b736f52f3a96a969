"""Use case for verifying a credential and upgrading weak hashes."""

import logging
from dataclasses import dataclass

from ....domain.services import PasswordHasher

logger = logging.getLogger(__name__)


@dataclass
class VerifyCredentialInput:
    """Input for verify credential use case."""

    plain_password: str
    hashed_password: str


@dataclass
class VerifyCredentialOutput:
    """Output for verify credential use case.

    ``upgraded_hash`` is set only when the password matched and the stored
    hash was computed with a lower cost factor than currently configured;
    the caller is expected to persist it in place of the old hash.
    """

    is_valid: bool
    upgraded_hash: str | None = None

    @property
    def needs_update(self) -> bool:
        """Whether the caller should persist ``upgraded_hash``."""
        return self.upgraded_hash is not None


class VerifyCredentialUseCase:
    """Use case for checking a password at login."""

    def __init__(self, password_hasher: PasswordHasher) -> None:
        """Initialize verify credential use case.

        Args:
            password_hasher: Password hasher service
        """
        self._password_hasher = password_hasher

    async def execute(self, input_data: VerifyCredentialInput) -> VerifyCredentialOutput:
        """Execute verify credential use case.

        Args:
            input_data: Input data

        Returns:
            Verification result

        Raises:
            MalformedHashError: If the stored hash is malformed
            InvalidPasswordError: If the password is not a string
        """
        is_valid = await self._password_hasher.verify(
            input_data.plain_password, input_data.hashed_password
        )
        if not is_valid:
            return VerifyCredentialOutput(is_valid=False)

        if not self._password_hasher.needs_rehash(input_data.hashed_password):
            return VerifyCredentialOutput(is_valid=True)

        logger.info("Stored password hash uses an outdated cost factor; rehashing")
        upgraded_hash = await self._password_hasher.hash(input_data.plain_password)
        return VerifyCredentialOutput(is_valid=True, upgraded_hash=upgraded_hash)
