"""HashedPassword value object implementation."""

from dataclasses import dataclass

from passlib.hash import bcrypt

from ..exceptions import MalformedHashError


@dataclass(frozen=True)
class HashedPassword:
    """Value object representing a stored bcrypt password hash.

    The value embeds the bcrypt variant, the cost factor and the salt, e.g.
    ``$2b$12$<22 chars of salt><31 chars of checksum>``.
    """

    value: str

    def __post_init__(self) -> None:
        """Validate the hashed password."""
        if not isinstance(self.value, str) or not self.value:
            raise MalformedHashError("Hashed password cannot be empty")

        if not bcrypt.identify(self.value):
            raise MalformedHashError()

        try:
            bcrypt.from_string(self.value)
        except ValueError as e:
            raise MalformedHashError(f"Invalid hashed password format: {e}") from e

    @property
    def rounds(self) -> int:
        """Return the cost factor embedded in the hash (log2 of iterations)."""
        return int(bcrypt.from_string(self.value).rounds)

    def __str__(self) -> str:
        """Return masked representation for security."""
        return "********"
