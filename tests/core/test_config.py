"""Tests for application configuration."""
import pytest
from pydantic import ValidationError

from core.config import Settings


class TestCorsOriginsParsing:
    """Tests for CORS origins parsing from environment variables."""

    def test_parse_single_origin_string(self) -> None:
        """Single origin string is parsed correctly."""
        settings = Settings(
            database_url="postgresql+asyncpg://test",
            api_token="secret",
            cors_origins="http://localhost:5173",
        )
        assert settings.cors_origins == ["http://localhost:5173"]

    def test_parse_multiple_origins_with_whitespace(self) -> None:
        """Comma-separated origins are split and stripped."""
        settings = Settings(
            database_url="postgresql+asyncpg://test",
            api_token="secret",
            cors_origins="  http://localhost:5173 , https://example.com  ",
        )
        assert settings.cors_origins == [
            "http://localhost:5173",
            "https://example.com",
        ]

    def test_parse_origins_list_passthrough(self) -> None:
        """List of origins is passed through unchanged."""
        origins = ["http://localhost:5173", "https://example.com"]
        settings = Settings(
            database_url="postgresql+asyncpg://test",
            api_token="secret",
            cors_origins=origins,
        )
        assert settings.cors_origins == origins

    def test_parse_empty_string_and_trailing_comma(self) -> None:
        """Empty entries are filtered."""
        settings = Settings(
            database_url="postgresql+asyncpg://test",
            api_token="secret",
            cors_origins="http://localhost:5173,",
        )
        assert settings.cors_origins == ["http://localhost:5173"]

    def test_parse_origins_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A comma-separated env var is not treated as JSON."""
        monkeypatch.setenv("CORS_ORIGINS", "http://a.test,http://b.test")
        settings = Settings(_env_file=None)
        assert settings.cors_origins == ["http://a.test", "http://b.test"]


class TestRequiredSettings:
    """Tests for settings without defaults."""

    def test_api_token_is_required(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Settings refuse to load without a shared secret."""
        monkeypatch.delenv("API_TOKEN", raising=False)
        with pytest.raises(ValidationError):
            Settings(_env_file=None, database_url="postgresql+asyncpg://test")

    def test_defaults(self) -> None:
        """Optional settings have sensible defaults."""
        settings = Settings(
            _env_file=None,
            database_url="postgresql+asyncpg://test",
            api_token="secret",
            create_tables=True,
        )
        assert settings.log_level == "INFO"
        assert settings.create_tables is True
        assert settings.cors_origins == ["http://localhost:5173"]
