"""Configuration management using pydantic-settings."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogSettings(BaseSettings):
    """Catalog configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FAKESTORE_",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # API configuration
    base_url: str = Field(
        default="https://fakestoreapi.com/",
        description="Base URL that request paths are appended to",
    )

    timeout: float | None = Field(
        default=30,
        description="Request timeout in seconds, or None to wait indefinitely",
        gt=0,
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log message format string",
    )


def get_settings() -> CatalogSettings:
    """Get the catalog settings instance."""
    return CatalogSettings()
