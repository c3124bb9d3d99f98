from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OpenWeatherCondition(BaseModel):
    model_config = ConfigDict(extra="ignore")

    description: str = Field(..., description="Human readable weather condition")


class OpenWeatherMain(BaseModel):
    model_config = ConfigDict(extra="ignore")

    temp: float = Field(..., allow_inf_nan=False, description="Temperature value")

    @field_validator("temp", mode="before")
    @classmethod
    def reject_boolean(cls, v):
        # bool is an int subclass and would otherwise coerce to 0.0/1.0
        if isinstance(v, bool):
            raise ValueError("temperature must be numeric")
        return v


class ExternalAPIWeatherResponse(BaseModel):
    """
    The subset of the OpenWeatherMap current-weather payload that is consumed.

    Only ``weather[0].description`` and ``main.temp`` are read; everything
    else the provider sends is ignored.
    """

    model_config = ConfigDict(extra="ignore")

    weather: List[OpenWeatherCondition] = Field(..., min_length=1)
    main: OpenWeatherMain
