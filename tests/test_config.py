"""Tests for catalog settings."""

import pytest
from pydantic import ValidationError

from fakestore.config import CatalogSettings, get_settings


class TestCatalogSettings:
    """Test cases for CatalogSettings."""

    def test_defaults(self, monkeypatch):
        """Test settings initialization with defaults."""
        for name in ("BASE_URL", "TIMEOUT", "LOG_LEVEL", "LOG_FORMAT"):
            monkeypatch.delenv(f"FAKESTORE_{name}", raising=False)

        settings = CatalogSettings()
        assert settings.base_url == "https://fakestoreapi.com/"
        assert settings.timeout == 30
        assert settings.log_level == "WARNING"

    def test_settings_with_env_vars(self, monkeypatch):
        """Test settings loading from environment variables."""
        monkeypatch.setenv("FAKESTORE_BASE_URL", "http://localhost:8000/")
        monkeypatch.setenv("FAKESTORE_TIMEOUT", "5")
        monkeypatch.setenv("fakestore_log_level", "DEBUG")

        settings = get_settings()
        assert settings.base_url == "http://localhost:8000/"
        assert settings.timeout == 5.0
        assert settings.log_level == "DEBUG"

    def test_timeout_can_be_disabled(self):
        """Test that a None timeout is accepted."""
        assert CatalogSettings(timeout=None).timeout is None

    @pytest.mark.parametrize("timeout", [0, -1])
    def test_timeout_must_be_positive(self, timeout):
        """Test that non-positive timeouts are rejected."""
        with pytest.raises(ValidationError):
            CatalogSettings(timeout=timeout)

    def test_unknown_log_level_rejected(self, monkeypatch):
        """Test that an unknown log level fails validation up front."""
        monkeypatch.setenv("FAKESTORE_LOG_LEVEL", "VERBOSE")

        with pytest.raises(ValidationError):
            CatalogSettings()
