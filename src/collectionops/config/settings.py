"""Configuration management for collectionops using pydantic-settings.

Supports environment variables (``COLLECTIONOPS_`` prefix), ``.env`` files
and type validation.
"""

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..config_exceptions import ConfigurationException
from ..logging.log_level import LogLevel


class CollectionOpsSettings(BaseSettings):
    """Main configuration settings for collectionops."""

    model_config = SettingsConfigDict(
        env_prefix="COLLECTIONOPS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    debug_mode: bool = Field(False, description="Enable debug logging")

    # Logging settings
    log_level: LogLevel = Field(LogLevel.INFO, description="Minimum level for emitted logs")
    structured_logging: bool = Field(False, description="Render logs as JSON lines")
    colorize: bool = Field(False, description="Colorize console output (non-structured only)")
    log_file: Path | None = Field(None, description="Optional file receiving log output")
    auto_setup_logging: bool = Field(
        False, description="Install log handlers the first time a logger is requested"
    )

    def model_post_init(self, __context) -> None:
        """Post-initialization validation."""
        if self.colorize and self.structured_logging:
            raise ConfigurationException(
                "colorize", "colored output is not available for structured (JSON) logging"
            )


class DevelopmentSettings(CollectionOpsSettings):
    """Development-specific settings."""

    model_config = SettingsConfigDict(env_file=".env.development")

    debug_mode: bool = True
    log_level: LogLevel = LogLevel.DEBUG


class ProductionSettings(CollectionOpsSettings):
    """Production-specific settings."""

    model_config = SettingsConfigDict(env_file=".env.production")

    debug_mode: bool = False
    log_level: LogLevel = LogLevel.WARN
    structured_logging: bool = True


class TestSettings(CollectionOpsSettings):
    """Test-specific settings."""

    __test__ = False

    model_config = SettingsConfigDict(env_file=".env.test")

    log_level: LogLevel = LogLevel.DEBUG
    auto_setup_logging: bool = False


_PROFILES: dict[str, type[CollectionOpsSettings]] = {
    "development": DevelopmentSettings,
    "production": ProductionSettings,
    "test": TestSettings,
}

# Singleton instance
_settings: CollectionOpsSettings | None = None


def get_settings(env: str | None = None) -> CollectionOpsSettings:
    """Get the singleton settings instance.

    Args:
        env: Environment name ('development', 'production', 'test').
            Defaults to ``COLLECTIONOPS_ENV``; unknown names fall back
            to the base settings.

    Returns:
        CollectionOpsSettings instance
    """
    global _settings

    if _settings is None:
        env_name = (env or os.getenv("COLLECTIONOPS_ENV", "")).lower()
        settings_class = _PROFILES.get(env_name, CollectionOpsSettings)
        _settings = settings_class()

    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (mainly for testing)."""
    global _settings
    _settings = None
