"""Repository interfaces."""

from .game_tag_repository import GameTagRepository

__all__ = ["GameTagRepository"]
