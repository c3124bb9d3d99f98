"""
This module defines the public API schemas for weather data.
"""

from typing import Optional

from pydantic import BaseModel, Field


class WeatherResponse(BaseModel):
    """
    API response model for current weather in a city.

    ``city`` is the value the caller asked for, not the name variant the
    provider echoes back.
    """

    city: str = Field(..., description="Requested city name")
    description: str = Field(..., description="Weather condition description")
    temperature: float = Field(..., description="Temperature in degrees Celsius")


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Detailed error information")
    request_id: Optional[str] = Field(None, description="Request tracking ID")
