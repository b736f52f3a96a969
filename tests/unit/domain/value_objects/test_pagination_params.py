"""PaginationParams値オブジェクトのテスト。"""

import pytest
from pydantic import ValidationError

from playsync.domain.value_objects import PaginationParams


class TestPaginationParams:
    """PaginationParamsのテストクラス。"""

    def test_create_computes_skip(self) -> None:
        """skipが(page - 1) * limitになることをテストする。"""
        params = PaginationParams.create(page=3, limit=10)

        assert params.page == 3
        assert params.limit == 10
        assert params.skip == 20

    def test_first_page_has_no_skip(self) -> None:
        """1ページ目のskipが0であることをテストする。"""
        assert PaginationParams.create(page=1, limit=25).skip == 0

    def test_inconsistent_skip(self) -> None:
        """skipが一致しない場合のテスト。"""
        with pytest.raises(ValidationError, match="Skip must be 10"):
            PaginationParams(page=2, limit=10, skip=5)

    def test_invalid_page(self) -> None:
        """無効なページ番号のテスト。"""
        with pytest.raises(ValidationError):
            PaginationParams.create(page=0, limit=10)

    def test_immutability(self) -> None:
        """不変性のテスト。"""
        params = PaginationParams.create(page=1, limit=10)

        with pytest.raises(ValidationError):
            params.page = 2  # type: ignore
