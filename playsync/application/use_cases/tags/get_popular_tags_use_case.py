"""人気タグ取得ユースケース。"""

import logging

from pydantic import BaseModel, Field

from ....domain.repositories import GameTagRepository
from ....domain.value_objects import GameStatus, PopularTag

logger = logging.getLogger(__name__)


class GetPopularTagsInput(BaseModel):
    """人気タグ取得の入力DTO。

    Attributes:
        limit: 取得件数
        active_only: 募集中・満員のゲームのみを集計するか
    """

    limit: int = Field(default=20, ge=1, le=100, description="取得件数（最大100）")
    active_only: bool = Field(default=False, description="アクティブなゲームのみ")


class GetPopularTagsOutput(BaseModel):
    """人気タグ取得の出力DTO。"""

    tags: list[PopularTag] = Field(..., description="利用数の多い順のタグ")


class GetPopularTagsUseCase:
    """利用数の多いゲームタグを取得するユースケース。"""

    def __init__(self, game_tag_repository: GameTagRepository) -> None:
        """初期化する。

        Args:
            game_tag_repository: ゲームタグリポジトリ
        """
        self._game_tag_repository = game_tag_repository

    async def execute(self, input_dto: GetPopularTagsInput) -> GetPopularTagsOutput:
        """人気タグを取得する。

        Args:
            input_dto: 入力DTO

        Returns:
            出力DTO
        """
        statuses = GameStatus.active() if input_dto.active_only else None
        tags = await self._game_tag_repository.find_popular_tags(
            limit=input_dto.limit, statuses=statuses
        )
        logger.debug(
            "Popular tags: limit=%d active_only=%s found=%d",
            input_dto.limit,
            input_dto.active_only,
            len(tags),
        )
        return GetPopularTagsOutput(tags=tags)
