"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from playsync.domain.value_objects import DEFAULT_PEPPER
from playsync.infrastructure.config.settings import Settings


class TestSettings:
    """Test cases for Settings."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Remove settings that the test session may have exported."""
        for name in ("PASSWORD_PEPPER", "PASSWORD_HASH_ROUNDS", "ENVIRONMENT"):
            monkeypatch.delenv(name, raising=False)

    def test_defaults(self) -> None:
        """Test default values."""
        with pytest.warns(UserWarning, match="default password pepper"):
            settings = Settings(_env_file=None)

        assert settings.environment == "development"
        assert settings.password_hash_rounds == 12
        assert settings.pagination_default_limit == 10
        assert settings.pagination_max_limit == 100
        assert settings.popular_tags_default_limit == 20
        assert settings.pepper.value == DEFAULT_PEPPER

    def test_pepper_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test reading the pepper from PASSWORD_PEPPER."""
        monkeypatch.setenv("PASSWORD_PEPPER", "from-env")

        settings = Settings(_env_file=None)

        assert settings.pepper.value == "from-env"
        assert "from-env" not in repr(settings)

    def test_empty_pepper_is_treated_as_unset(self) -> None:
        """Test that an empty pepper falls back to the default."""
        with pytest.warns(UserWarning):
            settings = Settings(_env_file=None, password_pepper="")

        assert settings.password_pepper is None
        assert settings.pepper.is_default is True

    def test_production_requires_pepper(self) -> None:
        """Test failing fast when production has no pepper."""
        with pytest.raises(ValidationError, match="PASSWORD_PEPPER must be set"):
            Settings(_env_file=None, environment="production")

    def test_production_with_pepper(self) -> None:
        """Test a valid production configuration."""
        settings = Settings(
            _env_file=None, environment="production", password_pepper="prod-pepper"
        )

        assert settings.is_production is True
        assert settings.pepper.value == "prod-pepper"

    def test_invalid_rounds(self) -> None:
        """Test bcrypt cost bounds."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, password_pepper="p", password_hash_rounds=3)

        with pytest.raises(ValidationError):
            Settings(_env_file=None, password_pepper="p", password_hash_rounds=32)

    def test_log_level_is_normalized(self) -> None:
        """Test log level validation."""
        settings = Settings(_env_file=None, password_pepper="p", log_level="debug")
        assert settings.log_level == "DEBUG"

        with pytest.raises(ValidationError, match="Invalid log level"):
            Settings(_env_file=None, password_pepper="p", log_level="verbose")

    def test_default_limit_cannot_exceed_max(self) -> None:
        """Test pagination limit consistency."""
        with pytest.raises(ValidationError, match="must not exceed"):
            Settings(
                _env_file=None,
                password_pepper="p",
                pagination_default_limit=50,
                pagination_max_limit=20,
            )

    def test_cors_wildcard_with_origins_rejected(self) -> None:
        """Test CORS origin validation."""
        with pytest.raises(ValidationError, match="Cannot use wildcard"):
            Settings(
                _env_file=None,
                password_pepper="p",
                cors_allowed_origins=["*", "http://localhost:3000"],
            )
