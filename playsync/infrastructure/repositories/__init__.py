"""Infrastructure repository implementations."""

from .in_memory_game_tag_repository import GameTagRecord, InMemoryGameTagRepository

__all__ = [
    "GameTagRecord",
    "InMemoryGameTagRepository",
]
