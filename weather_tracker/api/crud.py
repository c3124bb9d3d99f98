from typing import Any, Mapping

from pydantic import ValidationError

from weather_tracker.exceptions import MalformedUpstreamResponseException
from weather_tracker.models.weather import ExternalAPIWeatherResponse
from weather_tracker.schemas.weather import WeatherResponse
from weather_tracker.utils.logger import setup_logger

logger = setup_logger(__name__)


class WeatherCRUD:

    @staticmethod
    def extract(raw: Mapping[str, Any], city: str) -> WeatherResponse:
        """
        Transform a raw provider payload to API format.

        Reads ``weather[0].description`` and ``main.temp``. The returned city is
        the one passed in, whatever name the provider used.
        """
        if not isinstance(raw, Mapping):
            raise MalformedUpstreamResponseException(
                "Weather provider returned an unexpected response",
                detail=f"expected a JSON object, got {type(raw).__name__}",
            )

        try:
            validated = ExternalAPIWeatherResponse.model_validate(dict(raw))
        except ValidationError as e:
            fields = ", ".join(
                ".".join(str(part) for part in err["loc"]) for err in e.errors()
            )
            raise MalformedUpstreamResponseException(
                "Weather provider returned an unexpected response",
                detail=f"invalid or missing fields: {fields}",
            ) from e
        except (TypeError, ValueError) as e:
            raise MalformedUpstreamResponseException(
                "Weather provider returned an unexpected response", detail=str(e)
            ) from e

        return WeatherResponse(
            city=city,
            description=validated.weather[0].description,
            temperature=validated.main.temp,
        )
