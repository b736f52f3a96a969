"""Pagination dependency for list endpoints."""

import re
from collections.abc import Callable
from typing import Annotated

from fastapi import Query

from ....domain.value_objects import PaginationParams
from ....infrastructure.config.settings import get_settings

_LEADING_INT = re.compile(r"^\s*[+-]?\d+")


def parse_positive_int(raw: str | None) -> int | None:
    """Parse the leading integer of a query value.

    ``"3"`` and ``"3abc"`` both give 3. Missing, unparsable, zero and
    negative values give None.
    """
    if raw is None:
        return None
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    value = int(match.group())
    return value if value > 0 else None


def paginate(default_limit: int | None = None) -> Callable[..., PaginationParams]:
    """Build a dependency that reads ``page`` and ``limit`` from the query string.

    Invalid values never fail the request; they fall back to page 1 and
    ``default_limit`` (or the configured default). The limit is capped at
    the configured maximum.

    Args:
        default_limit: Page size used when ``limit`` is missing or invalid

    Returns:
        FastAPI dependency returning PaginationParams
    """

    def dependency(
        page: Annotated[
            str | None, Query(description="ページ番号（1から開始）")
        ] = None,
        limit: Annotated[
            str | None, Query(description="1ページあたりの件数")
        ] = None,
    ) -> PaginationParams:
        settings = get_settings()
        fallback_limit = default_limit or settings.pagination_default_limit

        page_number = parse_positive_int(page) or 1
        page_size = min(
            parse_positive_int(limit) or fallback_limit,
            settings.pagination_max_limit,
        )
        return PaginationParams.create(page=page_number, limit=page_size)

    return dependency
