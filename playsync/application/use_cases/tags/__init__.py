"""Game tag use cases."""

from .get_popular_tags_use_case import (
    GetPopularTagsInput,
    GetPopularTagsOutput,
    GetPopularTagsUseCase,
)
from .get_tag_list_use_case import GetTagListOutput, GetTagListUseCase

__all__ = [
    "GetPopularTagsInput",
    "GetPopularTagsOutput",
    "GetPopularTagsUseCase",
    "GetTagListOutput",
    "GetTagListUseCase",
]
