"""Infrastructure services."""

from .password_hasher_impl import BcryptPasswordHasher, get_password_hasher

__all__ = [
    "BcryptPasswordHasher",
    "get_password_hasher",
]
