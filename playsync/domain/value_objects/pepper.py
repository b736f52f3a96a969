"""Pepper value object implementation."""

from dataclasses import dataclass, field
from typing import ClassVar

DEFAULT_PEPPER = "playsync_secret_pepper_v1"


@dataclass(frozen=True)
class Pepper:
    """Process-wide secret mixed into every password before hashing.

    Unlike a salt the pepper is never stored next to the hash; changing it
    invalidates every hash computed with the previous value.
    """

    value: str = field(repr=False)

    SEPARATOR: ClassVar[str] = ":"

    def __post_init__(self) -> None:
        """Validate the pepper."""
        if not isinstance(self.value, str) or not self.value:
            raise ValueError("Pepper cannot be empty")

    @classmethod
    def default(cls) -> "Pepper":
        """Return the well-known fallback pepper (never for production use)."""
        return cls(DEFAULT_PEPPER)

    @property
    def is_default(self) -> bool:
        """Whether this is the well-known fallback pepper."""
        return self.value == DEFAULT_PEPPER

    def apply(self, plain_password: str) -> str:
        """Combine a plaintext password with the pepper."""
        return f"{plain_password}{self.SEPARATOR}{self.value}"

    def __str__(self) -> str:
        """Return masked representation for security."""
        return "********"
