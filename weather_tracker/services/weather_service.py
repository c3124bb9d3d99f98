"""
This module provides weather-related services.
"""

from weather_tracker.api.crud import WeatherCRUD
from weather_tracker.exceptions import MalformedUpstreamResponseException
from weather_tracker.schemas.weather import WeatherResponse
from weather_tracker.services.external_api import WeatherAPIClient
from weather_tracker.utils.logger import setup_logger

logger = setup_logger(__name__)


class WeatherService:
    """
    Fetches current weather from the provider and shapes it for the API.
    """

    def __init__(self, api_client: WeatherAPIClient):
        self.api_client = api_client

    async def get_weather(self, city: str) -> WeatherResponse:
        """
        Get current weather for a city.

        Upstream failures propagate unchanged; extraction failures surface as
        MalformedUpstreamResponseException.
        """
        logger.info(
            "Fetching weather from external API",
            extra={"city": city, "event": "api_call", "api": "weather"},
        )
        raw = await self.api_client.fetch_weather(city)

        try:
            result = WeatherCRUD.extract(raw, city)
        except MalformedUpstreamResponseException as e:
            logger.error(
                "Malformed weather payload",
                extra={"city": city, "event": "upstream_malformed", "detail": e.detail},
            )
            raise

        logger.info(
            "Weather retrieved",
            extra={
                "city": city,
                "event": "api_success",
                "description": result.description,
                "temperature": result.temperature,
            },
        )
        return result
