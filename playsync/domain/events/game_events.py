"""Game domain event definitions."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any


class GameEvent(str, Enum):
    """Canonical names of events emitted by the game feature."""

    CREATED = "game:created"
    UPDATED = "game:updated"
    PLAYER_JOINED = "game:player_joined"
    PLAYER_LEFT = "game:player_left"
    PLAYER_KICKED = "game:player_kicked"
    STARTED = "game:started"
    COMPLETED = "game:completed"
    CANCELLED = "game:cancelled"
    INVITATION_SENT = "game:invitation_sent"
    INVITATION_ACCEPTED = "game:invitation_accepted"
    INVITATION_DECLINED = "game:invitation_declined"
    CAPACITY_FULL = "game:capacity_full"
    SCORE_SUBMITTED = "game:score_submitted"


@dataclass(frozen=True)
class GameEventPayload:
    """Payload broadcast alongside a game event."""

    event: GameEvent
    game_id: str
    data: Any = None
    triggered_by: str | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate the payload."""
        if not self.game_id:
            raise ValueError("Game ID cannot be empty")

    def to_dict(self) -> dict[str, Any]:
        """Render the payload in the shape sent to clients.

        Returns:
            Dictionary with camelCase keys and an ISO-8601 timestamp
        """
        return {
            "event": self.event.value,
            "gameId": self.game_id,
            "triggeredBy": self.triggered_by,
            "data": self.data,
            "timestamp": self.timestamp.isoformat(),
        }


def create_game_event(
    event: GameEvent | str,
    game_id: str,
    data: Any = None,
    triggered_by: str | None = None,
) -> GameEventPayload:
    """Create a game event payload stamped with the current time.

    Args:
        event: Event enum member or its wire name (e.g. ``"game:started"``)
        game_id: ID of the game the event belongs to
        data: Optional event specific data
        triggered_by: Optional ID of the user who caused the event

    Returns:
        The event payload

    Raises:
        ValueError: If the event name is unknown or the game ID is empty
    """
    try:
        game_event = GameEvent(event)
    except ValueError as e:
        raise ValueError(f"Unknown game event: {event}") from e

    return GameEventPayload(
        event=game_event,
        game_id=game_id,
        data=data,
        triggered_by=triggered_by,
    )
