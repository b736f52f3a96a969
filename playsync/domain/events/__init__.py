"""Domain events package."""

from .game_events import GameEvent, GameEventPayload, create_game_event

__all__ = ["GameEvent", "GameEventPayload", "create_game_event"]
