"""Game tags API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from ....application.use_cases.tags import (
    GetPopularTagsInput,
    GetPopularTagsUseCase,
    GetTagListUseCase,
)
from ....domain.value_objects import PaginationParams, PopularTag
from ....infrastructure.config.settings import get_settings
from ...dependencies import get_popular_tags_use_case, get_tag_list_use_case
from ..dependencies import paginate, validate_dto
from ..responses import ApiResponse, ErrorResponse, api_response

router = APIRouter(prefix="/games/tags", tags=["Games"])


class PopularTagsQuery(BaseModel):
    """Query string of the popular tags endpoint."""

    limit: int | None = Field(
        default=None,
        ge=1,
        le=100,
        description="Maximum number of tags (POPULAR_TAGS_DEFAULT_LIMIT when omitted)",
    )
    active: bool = Field(default=False, description="Only count OPEN and FULL games")


class PopularTagsRequest(BaseModel):
    """Popular tags request DTO."""

    query: PopularTagsQuery = Field(default_factory=PopularTagsQuery)


class TagsData(BaseModel):
    """Tags payload."""

    tags: list[PopularTag] = Field(..., description="Tags with their usage count")

    model_config = {
        "json_schema_extra": {
            "example": {
                "tags": [
                    {"tag": "valorant", "count": 42},
                    {"tag": "pubg", "count": 38},
                    {"tag": "ranked", "count": 35},
                ]
            }
        }
    }


@router.get(
    "/popular",
    response_model=ApiResponse[TagsData],
    responses={400: {"model": ErrorResponse, "description": "Invalid query parameters"}},
)
async def get_popular_tags(
    request_dto: Annotated[PopularTagsRequest, Depends(validate_dto(PopularTagsRequest))],
    use_case: Annotated[GetPopularTagsUseCase, Depends(get_popular_tags_use_case)],
) -> ApiResponse[TagsData]:
    """Get the most popular game tags by usage count.

    Args:
        request_dto: Validated request
        use_case: Popular tags use case

    Returns:
        Tags sorted by usage count
    """
    query = request_dto.query
    limit = query.limit or get_settings().popular_tags_default_limit

    output = await use_case.execute(
        GetPopularTagsInput(limit=limit, active_only=query.active)
    )
    return api_response(
        TagsData(tags=output.tags),
        message="Popular tags retrieved successfully",
    )


@router.get("", response_model=ApiResponse[TagsData])
async def list_tags(
    pagination: Annotated[PaginationParams, Depends(paginate())],
    use_case: Annotated[GetTagListUseCase, Depends(get_tag_list_use_case)],
) -> ApiResponse[TagsData]:
    """List every tag in use, most used first, one page at a time.

    Args:
        pagination: Page and limit parsed from the query string
        use_case: Tag list use case

    Returns:
        A page of tags; ``meta.page_info`` describes the page
    """
    output = await use_case.execute(pagination)
    return api_response(
        TagsData(tags=output.tags),
        message="Tags retrieved successfully",
        meta={"page_info": output.page_info.model_dump()},
    )
