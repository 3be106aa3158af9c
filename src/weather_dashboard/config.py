"""
Application settings.

Loaded from environment variables prefixed with ``WEATHER_`` and from an
optional ``.env`` file, e.g. ``WEATHER_DEFAULT_LOCATION=Pune``.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from weather_dashboard.schemas import Unit


class Settings(BaseSettings):
    """Dashboard configuration."""

    model_config = SettingsConfigDict(env_prefix="WEATHER_", env_file=".env", extra="ignore")

    app_name: str = "Weather Dashboard"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Location used when geolocation is unavailable or refused
    default_location: str = "Mumbai"
    unit: Unit = Unit.CELSIUS

    # Static "device" position; leave unset to make geolocation fail over
    home_lat: float | None = Field(default=None, ge=-90, le=90)
    home_lon: float | None = Field(default=None, ge=-180, le=180)

    refresh_interval_minutes: float = Field(default=5, gt=0)
    clock_interval_seconds: float = Field(default=1, gt=0)
    http_timeout: float = Field(default=30, gt=0)

    api_port: int = 8000
    site_dir: str = "site"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
