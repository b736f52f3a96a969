"""Value objects package."""

from .game_status import GameStatus
from .hashed_password import HashedPassword
from .page_info import PageInfo
from .pagination_params import PaginationParams
from .pepper import DEFAULT_PEPPER, Pepper
from .popular_tag import PopularTag

__all__ = [
    "GameStatus",
    "HashedPassword",
    "PageInfo",
    "PaginationParams",
    "DEFAULT_PEPPER",
    "Pepper",
    "PopularTag",
]
