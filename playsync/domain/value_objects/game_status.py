"""Game status value object."""

from enum import Enum


class GameStatus(str, Enum):
    """Lifecycle status of a game."""

    OPEN = "OPEN"
    FULL = "FULL"
    ENDED = "ENDED"

    @classmethod
    def active(cls) -> frozenset["GameStatus"]:
        """Statuses of games that can still be joined or are about to start."""
        return frozenset({cls.OPEN, cls.FULL})
