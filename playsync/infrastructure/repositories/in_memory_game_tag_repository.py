"""In-memory game tag repository implementation."""

import logging
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

from ...domain.repositories import GameTagRepository
from ...domain.value_objects import GameStatus, PopularTag

logger = logging.getLogger(__name__)


@dataclass
class GameTagRecord:
    """Tags attached to a single game."""

    game_id: str
    status: GameStatus
    tags: list[str] = field(default_factory=list)


class InMemoryGameTagRepository(GameTagRepository):
    """Game tag repository kept in process memory.

    Every occurrence of a tag counts, including repeats on one game.
    Blank tags are ignored.
    """

    def __init__(self, records: Iterable[GameTagRecord] | None = None) -> None:
        """Initialize the repository.

        Args:
            records: Initial game records
        """
        self._records: dict[str, GameTagRecord] = {}
        for record in records or []:
            self.add(record)

    def add(self, record: GameTagRecord) -> None:
        """Add or replace the tags of a game."""
        self._records[record.game_id] = record

    def remove(self, game_id: str) -> None:
        """Forget a game. Unknown IDs are ignored."""
        self._records.pop(game_id, None)

    def _count(self, statuses: Iterable[GameStatus] | None) -> Counter[str]:
        wanted = set(statuses) if statuses is not None else None
        counter: Counter[str] = Counter()
        for record in self._records.values():
            if wanted is not None and record.status not in wanted:
                continue
            counter.update(tag.strip() for tag in record.tags if tag.strip())
        return counter

    async def find_popular_tags(
        self,
        limit: int,
        skip: int = 0,
        statuses: Iterable[GameStatus] | None = None,
    ) -> list[PopularTag]:
        """Find tags ordered by their number of occurrences."""
        if limit < 1:
            raise ValueError("Limit must be at least 1")
        if skip < 0:
            raise ValueError("Skip cannot be negative")

        ranked = sorted(self._count(statuses).items(), key=lambda kv: (-kv[1], kv[0]))
        logger.debug("Ranked %d distinct tags", len(ranked))
        return [
            PopularTag(tag=tag, count=count)
            for tag, count in ranked[skip : skip + limit]
        ]

    async def count_distinct_tags(
        self, statuses: Iterable[GameStatus] | None = None
    ) -> int:
        """Count the distinct tags in use."""
        return len(self._count(statuses))
