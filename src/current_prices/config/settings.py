"""Application settings and configuration."""

from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Current Prices"
    app_version: str = "0.1.0"

    log_level: str = "INFO"

    # Price loading
    price_provider: Literal["stub", "yfinance"] = "stub"
    price_load_max_workers: int = 8
    price_load_timeout_seconds: float = 10.0

    # Drop failures from batches superseded by a newer load_prices call
    ignore_stale_price_failures: bool = False

    # Alert shown when a batch fails
    price_alert_title: str = "Error"
    price_alert_message: str = "Error loading current prices"


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
