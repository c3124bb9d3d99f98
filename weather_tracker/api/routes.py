from datetime import datetime, UTC
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from weather_tracker.config import get_settings
from weather_tracker.exceptions import BadRequestException, WeatherServiceException
from weather_tracker.models.responses import HealthResponse
from weather_tracker.schemas.weather import ErrorResponse, WeatherResponse
from weather_tracker.services.weather_service import WeatherService
from weather_tracker.utils.dependencies import get_weather_service
from weather_tracker.utils.logger import setup_logger

logger = setup_logger(__name__)
settings = get_settings()

router = APIRouter(prefix="/api", tags=["weather"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing or invalid city"},
    404: {"model": ErrorResponse, "description": "City not known to the provider"},
    502: {"model": ErrorResponse, "description": "Weather provider error"},
    503: {"model": ErrorResponse, "description": "Weather provider unreachable"},
}


def error_response(
    request: Request, status_code: int, error: str, detail: Optional[str] = None
) -> JSONResponse:
    body = ErrorResponse(
        error=error,
        detail=detail,
        request_id=getattr(request.state, "request_id", None),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


@router.get("/weather", response_model=WeatherResponse, responses=ERROR_RESPONSES)
async def get_weather(
    request: Request,
    city: Optional[str] = Query(None, description="City name"),
    weather_service: WeatherService = Depends(get_weather_service),
):
    """
    Get the current weather description and temperature (Celsius) for a city.
    """
    try:
        if city is None or not city.strip():
            raise BadRequestException(
                "Missing required query parameter: city", detail="city"
            )

        return await weather_service.get_weather(city)

    except WeatherServiceException as e:
        logger.error(
            "Error getting weather",
            extra={
                "event": "api_error",
                "city": city,
                "error": e.message,
                "detail": e.detail,
                "error_type": type(e).__name__,
                "status_code": e.status_code,
                "request_id": getattr(request.state, "request_id", None),
            },
        )
        return error_response(request, e.status_code, e.message, e.detail)
    except Exception as e:
        logger.error(
            "Unexpected error getting weather",
            extra={
                "event": "api_error",
                "city": city,
                "error": str(e),
                "error_type": type(e).__name__,
                "request_id": getattr(request.state, "request_id", None),
            },
        )
        return error_response(
            request, 500, "Internal server error", "Failed to retrieve weather data"
        )


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Liveness check. Does not contact the weather provider.
    """
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        timestamp=datetime.now(UTC).isoformat(),
    )
