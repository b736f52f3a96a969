"""タグ一覧取得ユースケースのテスト。"""

import pytest

from playsync.application.use_cases.tags import GetTagListUseCase
from playsync.domain.value_objects import PaginationParams
from playsync.infrastructure.repositories import InMemoryGameTagRepository


class TestGetTagListUseCase:
    """GetTagListUseCaseのテストクラス。"""

    @pytest.mark.asyncio
    async def test_first_page(self, game_tag_repository: InMemoryGameTagRepository) -> None:
        """1ページ目の取得をテストする。"""
        use_case = GetTagListUseCase(game_tag_repository)

        output = await use_case.execute(PaginationParams.create(page=1, limit=3))

        assert [t.tag for t in output.tags] == ["ranked", "valorant", "pubg"]
        assert output.page_info.total_count == 4
        assert output.page_info.total_pages == 2
        assert output.page_info.has_next is True

    @pytest.mark.asyncio
    async def test_last_page(self, game_tag_repository: InMemoryGameTagRepository) -> None:
        """最終ページの取得をテストする。"""
        use_case = GetTagListUseCase(game_tag_repository)

        output = await use_case.execute(PaginationParams.create(page=2, limit=3))

        assert [t.tag for t in output.tags] == ["casual"]
        assert output.page_info.has_next is False

    @pytest.mark.asyncio
    async def test_page_past_the_end(
        self, game_tag_repository: InMemoryGameTagRepository
    ) -> None:
        """範囲外のページが空になることをテストする。"""
        use_case = GetTagListUseCase(game_tag_repository)

        output = await use_case.execute(PaginationParams.create(page=10, limit=3))

        assert output.tags == []
        assert output.page_info.page == 10
