"""アプリケーション設定管理。"""

import warnings
from functools import lru_cache
from typing import Literal, Self

from pydantic import Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ...domain.value_objects import Pepper


class Settings(BaseSettings):
    """アプリケーション設定。

    環境変数から設定を読み込み、バリデーションを行う。
    """

    # Application Configuration
    environment: Literal["development", "test", "production"] = Field(
        default="development", description="実行環境"
    )
    debug: bool = Field(default=False, description="デバッグモード")
    log_level: str = Field(default="INFO", description="ログレベル")

    # Password Hashing Configuration
    password_pepper: SecretStr | None = Field(
        default=None,
        description="パスワードに付加するペッパー（DBには保存しない）",
    )
    password_hash_rounds: int = Field(
        default=12, ge=4, le=31, description="bcryptのコストファクター"
    )

    # Pagination Configuration
    pagination_default_limit: int = Field(
        default=10, ge=1, description="デフォルトの1ページあたりの件数"
    )
    pagination_max_limit: int = Field(
        default=100, ge=1, description="1ページあたりの最大件数"
    )
    popular_tags_default_limit: int = Field(
        default=20, ge=1, le=100, description="人気タグのデフォルト取得件数"
    )

    # CORS Configuration
    cors_allowed_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"],
        description="許可されたCORSオリジンのリスト",
    )
    cors_allow_credentials: bool = Field(
        default=True,
        description="CORSでクレデンシャル（Cookie、認証ヘッダー）を許可",
    )
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        description="許可されたHTTPメソッド",
    )
    cors_allow_headers: list[str] = Field(
        default=["*"],
        description="許可されたHTTPヘッダー",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """ログレベルのバリデーション。"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    @field_validator("password_pepper")
    @classmethod
    def validate_password_pepper(cls, v: SecretStr | None) -> SecretStr | None:
        """空文字のペッパーは未設定として扱う。"""
        if v is not None and not v.get_secret_value():
            return None
        return v

    @field_validator("cors_allowed_origins")
    @classmethod
    def validate_cors_origins(cls, v: list[str]) -> list[str]:
        """CORSオリジンのバリデーション。"""
        if "*" in v and len(v) > 1:
            raise ValueError(
                "CORS: Cannot use wildcard '*' with other specific origins"
            )
        if "*" in v:
            warnings.warn(
                "Using wildcard '*' for CORS origins. This is insecure in production!",
                UserWarning,
                stacklevel=2,
            )
        return v

    @model_validator(mode="after")
    def validate_pepper_for_environment(self) -> Self:
        """本番環境ではペッパーの設定を必須とする。"""
        if self.password_pepper is None:
            if self.environment == "production":
                raise ValueError("PASSWORD_PEPPER must be set in production")
            warnings.warn(
                "Using default password pepper. Please set PASSWORD_PEPPER in production!",
                UserWarning,
                stacklevel=2,
            )
        return self

    @model_validator(mode="after")
    def validate_pagination_limits(self) -> Self:
        """デフォルト件数が最大件数を超えないことを検証する。"""
        if self.pagination_default_limit > self.pagination_max_limit:
            raise ValueError(
                "pagination_default_limit must not exceed pagination_max_limit"
            )
        return self

    @property
    def is_production(self) -> bool:
        """本番環境かどうか。"""
        return self.environment == "production"

    @property
    def pepper(self) -> Pepper:
        """パスワードハッシュに使うペッパーを返す。

        未設定の場合は固定のフォールバック値を返す（開発・テスト用）。
        """
        if self.password_pepper is None:
            return Pepper.default()
        return Pepper(self.password_pepper.get_secret_value())


@lru_cache
def get_settings() -> Settings:
    """設定のシングルトンインスタンスを取得する。

    Returns:
        Settings: アプリケーション設定
    """
    return Settings()
