# Configuration Tests
"""Tests for settings loading and startup checks."""

import pytest
from pydantic import ValidationError

from microcms_mcp import stdio_server
from microcms_mcp.config import DEFAULT_BASE_URL, Settings, settings
from microcms_mcp.exceptions import ConfigurationError


class TestSettings:
    """Test Settings parsing."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("MICROCMS_API_KEY", raising=False)
        monkeypatch.delenv("MICROCMS_BASE_URL", raising=False)

        config = Settings(_env_file=None)

        assert config.microcms_api_key == ""
        assert config.microcms_base_url == DEFAULT_BASE_URL
        assert config.microcms_timeout == 30.0
        assert config.batch_max_concurrency == 1
        assert config.port == 8020

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("MICROCMS_API_KEY", "env-key")
        monkeypatch.setenv("MICROCMS_BASE_URL", "https://env.microcms.io//")
        monkeypatch.setenv("BATCH_MAX_CONCURRENCY", "4")

        config = Settings(_env_file=None)

        assert config.microcms_api_key == "env-key"
        assert config.microcms_base_url == "https://env.microcms.io"
        assert config.batch_max_concurrency == 4

    def test_concurrency_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, batch_max_concurrency=0)

    def test_global_settings_stripped(self):
        assert settings.microcms_base_url == "https://example.microcms.io"


class TestRequireCredentials:
    """Test the startup credential check."""

    def test_missing_api_key(self):
        config = Settings(_env_file=None, microcms_api_key="")

        with pytest.raises(ConfigurationError, match="MICROCMS_API_KEY"):
            config.require_credentials()

    def test_missing_base_url(self):
        config = Settings(_env_file=None, microcms_api_key="key", microcms_base_url="/")

        with pytest.raises(ConfigurationError, match="MICROCMS_BASE_URL"):
            config.require_credentials()

    def test_complete(self):
        Settings(
            _env_file=None,
            microcms_api_key="key",
            microcms_base_url="https://example.microcms.io",
        ).require_credentials()


class TestStdioEntryPoint:
    """Test the stdio console entry point."""

    def test_exits_without_api_key(self, monkeypatch):
        monkeypatch.setattr(settings, "microcms_api_key", "")

        with pytest.raises(SystemExit) as exc_info:
            stdio_server.main()

        assert exc_info.value.code == 1
