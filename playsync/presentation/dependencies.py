"""FastAPIの依存性注入設定。"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from ..application.use_cases.auth import (
    IssueTemporaryPasswordUseCase,
    VerifyCredentialUseCase,
)
from ..application.use_cases.tags import GetPopularTagsUseCase, GetTagListUseCase
from ..domain.repositories import GameTagRepository
from ..domain.services import PasswordHasher
from ..infrastructure.repositories import InMemoryGameTagRepository
from ..infrastructure.services import get_password_hasher


@lru_cache
def get_game_tag_repository() -> GameTagRepository:
    """ゲームタグリポジトリを取得する。

    Returns:
        GameTagRepository: プロセス内で共有されるリポジトリ
    """
    return InMemoryGameTagRepository()


def get_popular_tags_use_case(
    game_tag_repository: Annotated[GameTagRepository, Depends(get_game_tag_repository)],
) -> GetPopularTagsUseCase:
    """人気タグ取得ユースケースを取得する。"""
    return GetPopularTagsUseCase(game_tag_repository)


def get_tag_list_use_case(
    game_tag_repository: Annotated[GameTagRepository, Depends(get_game_tag_repository)],
) -> GetTagListUseCase:
    """タグ一覧取得ユースケースを取得する。"""
    return GetTagListUseCase(game_tag_repository)


def get_verify_credential_use_case(
    password_hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
) -> VerifyCredentialUseCase:
    """資格情報検証ユースケースを取得する。

    Args:
        password_hasher: パスワードハッシャー

    Returns:
        VerifyCredentialUseCase: ログインフロー用ユースケース
    """
    return VerifyCredentialUseCase(password_hasher)


def get_issue_temporary_password_use_case(
    password_hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
) -> IssueTemporaryPasswordUseCase:
    """一時パスワード発行ユースケースを取得する。

    Args:
        password_hasher: パスワードハッシャー

    Returns:
        IssueTemporaryPasswordUseCase: パスワードリセットフロー用ユースケース
    """
    return IssueTemporaryPasswordUseCase(password_hasher)
