"""
Services package initialization.
"""

from weather_tracker.services.external_api import WeatherAPIClient
from weather_tracker.services.weather_service import WeatherService

__all__ = [
    "WeatherAPIClient",
    "WeatherService",
]
