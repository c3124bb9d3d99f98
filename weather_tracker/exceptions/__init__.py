"""Weather service exceptions."""

from .common import (
    WeatherServiceException,
    BadRequestException,
    ExternalAPIException,
    UpstreamUnavailableException,
    UpstreamErrorException,
    MalformedUpstreamResponseException,
)

__all__ = [
    "WeatherServiceException",
    "BadRequestException",
    "ExternalAPIException",
    "UpstreamUnavailableException",
    "UpstreamErrorException",
    "MalformedUpstreamResponseException",
]
