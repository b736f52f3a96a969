"""Use case for issuing a temporary password."""

from dataclasses import dataclass

from ....domain.services import DEFAULT_TEMPORARY_PASSWORD_LENGTH, PasswordHasher


@dataclass
class IssueTemporaryPasswordInput:
    """Input for issue temporary password use case."""

    length: int = DEFAULT_TEMPORARY_PASSWORD_LENGTH


@dataclass
class IssueTemporaryPasswordOutput:
    """Output for issue temporary password use case.

    ``plain_password`` is handed to the user once; only ``hashed_password``
    may be stored.
    """

    plain_password: str
    hashed_password: str

    def __repr__(self) -> str:
        """Keep the plaintext out of logs and tracebacks."""
        return "IssueTemporaryPasswordOutput(plain_password='********', hashed_password='********')"


class IssueTemporaryPasswordUseCase:
    """Use case for the credential reset flow."""

    def __init__(self, password_hasher: PasswordHasher) -> None:
        """Initialize issue temporary password use case.

        Args:
            password_hasher: Password hasher service
        """
        self._password_hasher = password_hasher

    async def execute(
        self, input_data: IssueTemporaryPasswordInput | None = None
    ) -> IssueTemporaryPasswordOutput:
        """Generate a temporary password together with its hash.

        Args:
            input_data: Input data (defaults to a 12 character password)

        Returns:
            The temporary password and its stored representation

        Raises:
            ValueError: If the requested length is smaller than 1
        """
        input_data = input_data or IssueTemporaryPasswordInput()
        plain_password = self._password_hasher.generate_temporary_password(
            input_data.length
        )
        hashed_password = await self._password_hasher.hash(plain_password)
        return IssueTemporaryPasswordOutput(
            plain_password=plain_password, hashed_password=hashed_password
        )
