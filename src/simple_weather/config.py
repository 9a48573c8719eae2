"""
Application settings.

Values come from the environment (prefix ``SIMPLE_WEATHER_``) or a ``.env``
file, e.g. ``SIMPLE_WEATHER_LAT=45.5``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from platformdirs import user_data_path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from simple_weather.services.http import DEFAULT_TIMEOUT
from simple_weather.store import DEFAULT_NAMESPACE

APP_NAME = "simple-weather"


class Settings(BaseSettings):
    """Runtime configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SIMPLE_WEATHER_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = APP_NAME
    app_env: str = "development"
    debug: bool = False

    # Fallback location when no location provider is wired in (Stockholm)
    lat: float = Field(default=59.3293, ge=-90, le=90)
    lon: float = Field(default=18.0686, ge=-180, le=180)

    # Shared snapshot store; absolute so the app and widget processes agree
    store_dir: Path = Field(default_factory=lambda: user_data_path(APP_NAME))
    store_namespace: str = DEFAULT_NAMESPACE

    http_timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process."""
    return Settings()
