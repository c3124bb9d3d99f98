"""
This module contains configuration settings for the application.
"""

from functools import lru_cache
from typing import List

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration using Pydantic BaseSettings.
    Automatically handles environment variable parsing and type conversion.

    The upstream API key is required: constructing settings without it fails,
    so a misconfigured process dies at startup instead of on the first request.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", populate_by_name=True
    )

    # Application settings
    app_name: str = "Weather Tracker API"
    app_version: str = "1.0.0"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    # External API settings
    weather_api_key: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("weather_api_key", "api_key"),
    )
    weather_api_url: str = "https://api.openweathermap.org/data/2.5/weather"
    weather_api_units: str = "metric"
    weather_api_timeout: float = 10.0

    # CORS settings
    cors_origins: List[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: List[str] = ["GET"]
    cors_allow_headers: List[str] = ["*"]


@lru_cache()
def get_settings() -> Settings:
    """
    Get the application settings.
    """
    return Settings()
