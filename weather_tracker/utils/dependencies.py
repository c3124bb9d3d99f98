"""
FastAPI dependency injection providers.

Services are built per request from the application settings and the shared
HTTP client the lifespan handler stores on ``app.state``.
"""

import httpx
from fastapi import Depends, Request

from weather_tracker.config import Settings, get_settings
from weather_tracker.services.external_api import WeatherAPIClient
from weather_tracker.services.weather_service import WeatherService


def get_http_client(request: Request) -> httpx.AsyncClient:
    """
    Provide the shared outbound HTTP client.

    Returns:
        httpx.AsyncClient: Client created during application startup
    """
    return request.app.state.http_client  # type: ignore[attr-defined]


def get_weather_api_client(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> WeatherAPIClient:
    """
    Provide the upstream weather API client.

    Args:
        client: Shared HTTP client from dependency
        settings: Application settings from dependency

    Returns:
        WeatherAPIClient: Client bound to the configured key and units
    """
    return WeatherAPIClient.from_settings(client, settings)


def get_weather_service(
    api_client: WeatherAPIClient = Depends(get_weather_api_client),
) -> WeatherService:
    """
    Provide the weather service.

    Returns:
        WeatherService: Service wired to the upstream client
    """
    return WeatherService(api_client)
