"""ページ情報値オブジェクト。"""

from typing import Self

from pydantic import BaseModel, Field, model_validator

from .pagination_params import PaginationParams


class PageInfo(BaseModel):
    """ページングされた結果セットの位置情報。

    Attributes:
        page: ページ番号（1から開始）
        page_size: 1ページあたりの件数
        total_count: 総件数
        total_pages: 総ページ数
    """

    page: int = Field(..., ge=1, description="ページ番号（1から開始）")
    page_size: int = Field(..., ge=1, description="1ページあたりの件数")
    total_count: int = Field(..., ge=0, description="総件数")
    total_pages: int = Field(..., ge=0, description="総ページ数")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_total_pages(self) -> Self:
        """総ページ数が総件数とページサイズから導かれる値と一致するか検証する。"""
        expected_pages = -(-self.total_count // self.page_size)
        if self.total_pages != expected_pages:
            raise ValueError(
                f"Total pages must be {expected_pages} for total_count={self.total_count} and page_size={self.page_size}"
            )
        return self

    @classmethod
    def from_pagination(
        cls, pagination: PaginationParams, total_count: int
    ) -> "PageInfo":
        """リクエストのページネーションパラメータと総件数からPageInfoを作成する。

        Args:
            pagination: リクエストから解釈したパラメータ
            total_count: 総件数

        Returns:
            新しいPageInfoインスタンス
        """
        return cls(
            page=pagination.page,
            page_size=pagination.limit,
            total_count=total_count,
            total_pages=-(-total_count // pagination.limit),  # 切り上げ
        )

    @property
    def has_next(self) -> bool:
        """次のページが存在するか。"""
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        """前のページが存在するか。"""
        return self.page > 1

    @property
    def next_page(self) -> int | None:
        """次のページ番号。存在しない場合はNone。"""
        return self.page + 1 if self.has_next else None

    @property
    def previous_page(self) -> int | None:
        """前のページ番号。存在しない場合はNone。"""
        return self.page - 1 if self.has_previous else None
