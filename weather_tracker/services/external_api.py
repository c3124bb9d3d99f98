from typing import Any, Dict, Optional

import httpx

from weather_tracker.config import Settings
from weather_tracker.exceptions import (
    BadRequestException,
    MalformedUpstreamResponseException,
    UpstreamErrorException,
    UpstreamUnavailableException,
)
from weather_tracker.utils.logger import setup_logger

logger = setup_logger(__name__)


class WeatherAPIClient:
    """
    Thin client for the OpenWeatherMap current-weather endpoint.

    One GET per call, no retries. The API key and unit system are fixed at
    construction time from the application settings.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: str,
        base_url: str,
        units: str = "metric",
    ):
        self.client = client
        self.api_key = api_key
        self.base_url = base_url
        self.units = units

    @classmethod
    def from_settings(
        cls, client: httpx.AsyncClient, settings: Settings
    ) -> "WeatherAPIClient":
        return cls(
            client=client,
            api_key=settings.weather_api_key,
            base_url=settings.weather_api_url,
            units=settings.weather_api_units,
        )

    async def fetch_weather(self, city: str) -> Dict[str, Any]:
        """
        Fetch the raw current-weather payload for a city.

        Raises:
            BadRequestException: city is empty
            UpstreamUnavailableException: the provider could not be reached
            UpstreamErrorException: the provider answered with a non-success status
            MalformedUpstreamResponseException: the success body is not JSON
        """
        if not city or not city.strip():
            raise BadRequestException("City must be a non-empty string")

        try:
            response = await self.client.get(
                self.base_url,
                params={"q": city, "appid": self.api_key, "units": self.units},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            detail = self._error_message(e.response)
            logger.warning(
                "Weather API returned an error status",
                extra={
                    "event": "upstream_error",
                    "city": city,
                    "status_code": status,
                    "detail": detail,
                },
            )
            raise UpstreamErrorException(
                "City not found"
                if status == 404
                else f"Weather provider responded with status {status}",
                upstream_status=status,
                detail=detail,
            ) from e
        except httpx.RequestError as e:
            logger.error(
                "Weather API unreachable",
                extra={
                    "event": "upstream_unavailable",
                    "city": city,
                    "error": str(e),
                    "error_type": type(e).__name__,
                },
            )
            raise UpstreamUnavailableException(
                "Weather provider is unavailable", detail=str(e) or type(e).__name__
            ) from e

        try:
            return response.json()
        except ValueError as e:
            logger.error(
                "Weather API returned a non-JSON body",
                extra={"event": "upstream_malformed", "city": city, "error": str(e)},
            )
            raise MalformedUpstreamResponseException(
                "Weather provider returned an unreadable response", detail=str(e)
            ) from e

    @staticmethod
    def _error_message(response: httpx.Response) -> Optional[str]:
        """Pull the provider's own message out of an error body, if any."""
        try:
            body = response.json()
        except ValueError:
            return response.text or None

        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return response.text or None
