from typing import Optional


class WeatherServiceException(Exception):
    """Base exception for weather service."""

    status_code: int = 500

    def __init__(self, message: str, detail: Optional[str] = None):
        self.message = message
        self.detail = detail
        super().__init__(message)


class BadRequestException(WeatherServiceException):
    """Raised when the caller's input is invalid."""

    status_code = 400


class ExternalAPIException(WeatherServiceException):
    """Raised when the external weather API call fails."""

    status_code = 502


class UpstreamUnavailableException(ExternalAPIException):
    """Raised when the weather provider cannot be reached."""

    status_code = 503


class UpstreamErrorException(ExternalAPIException):
    """Raised when the weather provider answers with a non-success status."""

    def __init__(
        self, message: str, upstream_status: int, detail: Optional[str] = None
    ):
        self.upstream_status = upstream_status
        super().__init__(message, detail)

    @property
    def status_code(self) -> int:  # type: ignore[override]
        return 404 if self.upstream_status == 404 else 502


class MalformedUpstreamResponseException(ExternalAPIException):
    """Raised when the provider's payload lacks the expected fields."""
