"""ページネーションパラメータ値オブジェクト。"""

from typing import Self

from pydantic import BaseModel, Field, model_validator


class PaginationParams(BaseModel):
    """リクエストから解釈したページネーションパラメータ。

    Attributes:
        page: ページ番号（1から開始）
        limit: 1ページあたりの件数
        skip: 読み飛ばす件数（``(page - 1) * limit``）
    """

    page: int = Field(..., ge=1, description="ページ番号（1から開始）")
    limit: int = Field(..., ge=1, description="1ページあたりの件数")
    skip: int = Field(..., ge=0, description="読み飛ばす件数")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_skip(self) -> Self:
        """skipがpageとlimitに一致することを検証する。"""
        expected_skip = (self.page - 1) * self.limit
        if self.skip != expected_skip:
            raise ValueError(
                f"Skip must be {expected_skip} for page={self.page} and limit={self.limit}"
            )
        return self

    @classmethod
    def create(cls, page: int, limit: int) -> "PaginationParams":
        """PaginationParamsを作成する。

        Args:
            page: ページ番号（1から開始）
            limit: 1ページあたりの件数

        Returns:
            新しいPaginationParamsインスタンス
        """
        return cls(page=page, limit=limit, skip=(page - 1) * limit)
