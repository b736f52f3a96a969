"""タグ一覧取得ユースケース。"""

from pydantic import BaseModel, Field

from ....domain.repositories import GameTagRepository
from ....domain.value_objects import PageInfo, PaginationParams, PopularTag


class GetTagListOutput(BaseModel):
    """タグ一覧取得の出力DTO。"""

    tags: list[PopularTag] = Field(..., description="タグと利用数")
    page_info: PageInfo = Field(..., description="ページ情報")


class GetTagListUseCase:
    """利用中の全タグをページ単位で取得するユースケース。"""

    def __init__(self, game_tag_repository: GameTagRepository) -> None:
        """初期化する。

        Args:
            game_tag_repository: ゲームタグリポジトリ
        """
        self._game_tag_repository = game_tag_repository

    async def execute(self, pagination: PaginationParams) -> GetTagListOutput:
        """タグ一覧を取得する。

        Args:
            pagination: ページネーションパラメータ

        Returns:
            出力DTO
        """
        total_count = await self._game_tag_repository.count_distinct_tags()
        tags = await self._game_tag_repository.find_popular_tags(
            limit=pagination.limit, skip=pagination.skip
        )
        return GetTagListOutput(
            tags=tags,
            page_info=PageInfo.from_pagination(pagination, total_count),
        )
