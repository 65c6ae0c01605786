"""
Application settings loaded from environment variables.

Uses pydantic-settings for automatic loading from .env file.
All settings have sensible defaults for development mode.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration.

    All values are loaded from environment variables.
    Copy .env.example to .env and fill in your values.

    Attributes:
        telegram_bot_token: Bot token from @BotFather (required)
        environment: Runtime environment (development/production)
        use_mock_services: Use the mock provider instead of DexScreener
        log_level: Logging verbosity
        api_timeout_seconds: Timeout for external API calls
        dexscreener_base_url: DexScreener API root
        snapshot_cache_seconds: How long a fetched snapshot is reused
        alert_cooldown_seconds: How long an alerted token stays silent
        max_alerts: Alerts returned per live scan
    """

    # Required
    telegram_bot_token: str

    # Environment
    environment: Literal["development", "production"] = "development"
    use_mock_services: bool = True

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Timeouts
    api_timeout_seconds: float = 10.0

    # DexScreener (public API, no key)
    dexscreener_base_url: str = "https://api.dexscreener.com"

    # Short-lived state
    snapshot_cache_seconds: float = 30.0
    alert_cooldown_seconds: float = 120.0
    max_alerts: int = 3

    # Pydantic settings config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # Case-insensitive env var names
        case_sensitive=False,
        # Don't fail if .env doesn't exist
        env_ignore_empty=True,
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Uses lru_cache to avoid re-reading .env file on every call.

    Returns:
        Settings instance with all configuration values.
    """
    return Settings()
