"""Game tag repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from ..value_objects import GameStatus, PopularTag


class GameTagRepository(ABC):
    """Abstract repository interface for tag usage across games."""

    @abstractmethod
    async def find_popular_tags(
        self,
        limit: int,
        skip: int = 0,
        statuses: Iterable[GameStatus] | None = None,
    ) -> list[PopularTag]:
        """Find tags ordered by their number of occurrences.

        Args:
            limit: Maximum number of tags to return
            skip: Number of tags to skip
            statuses: Only count games in these statuses (all games if None)

        Returns:
            Tags sorted by count descending, then by tag name
        """
        pass

    @abstractmethod
    async def count_distinct_tags(
        self, statuses: Iterable[GameStatus] | None = None
    ) -> int:
        """Count the distinct tags in use.

        Args:
            statuses: Only count games in these statuses (all games if None)

        Returns:
            Number of distinct tags
        """
        pass
