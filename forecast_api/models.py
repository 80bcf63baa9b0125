"""
Forecast API Response Models

Pydantic schemas for the JSON body returned by both endpoints.

This is structural decoding only: fields are typed and enum tokens are
mapped through the wire codec, but values are not range-checked. Every data
point field except `time` is optional because the API omits what it does not
know.

Reference: https://pirateweather.net/en/latest/API/
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Annotated, Any

import httpx
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from .errors import UnrecognizedToken
from .wire import (
    ICON_CODEC,
    PRECIP_TYPE_CODEC,
    SEVERITY_CODEC,
    UNITS_CODEC,
    Icon,
    PrecipType,
    Severity,
    Units,
    WireCodec,
)


# -----------------------------------------------------------------------------
# Wire Enum Field Types
# -----------------------------------------------------------------------------


def _decoder(codec: WireCodec) -> Callable[[Any], Enum]:
    def decode(value: Any) -> Enum:
        if isinstance(value, codec.enum_type):
            return value
        try:
            return codec.decode(value)
        except UnrecognizedToken as e:
            # pydantic only turns ValueError into a ValidationError
            raise ValueError(str(e)) from e

    return decode


WireIcon = Annotated[
    Icon,
    BeforeValidator(_decoder(ICON_CODEC)),
    PlainSerializer(ICON_CODEC.encode, return_type=str),
]

WirePrecipType = Annotated[
    PrecipType,
    BeforeValidator(_decoder(PRECIP_TYPE_CODEC)),
    PlainSerializer(PRECIP_TYPE_CODEC.encode, return_type=str),
]

WireSeverity = Annotated[
    Severity,
    BeforeValidator(_decoder(SEVERITY_CODEC)),
    PlainSerializer(SEVERITY_CODEC.encode, return_type=str),
]

WireUnits = Annotated[
    Units,
    BeforeValidator(_decoder(UNITS_CODEC)),
    PlainSerializer(UNITS_CODEC.encode, return_type=str),
]


class _ApiModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# -----------------------------------------------------------------------------
# Data Points and Blocks
# -----------------------------------------------------------------------------


class DataPoint(_ApiModel):
    """Weather conditions at one instant (currently) or over one hour/day."""

    time: int

    apparent_temperature: float | None = None
    apparent_temperature_high: float | None = None
    apparent_temperature_high_time: int | None = None
    apparent_temperature_low: float | None = None
    apparent_temperature_low_time: int | None = None
    cloud_cover: float | None = None
    dew_point: float | None = None
    humidity: float | None = None
    icon: WireIcon | None = None
    moon_phase: float | None = None
    nearest_storm_bearing: float | None = None
    nearest_storm_distance: float | None = None
    ozone: float | None = None
    precip_accumulation: float | None = None
    precip_intensity: float | None = None
    precip_intensity_max: float | None = None
    precip_intensity_max_time: int | None = None
    precip_probability: float | None = None
    precip_type: WirePrecipType | None = None
    pressure: float | None = None
    summary: str | None = None
    sunrise_time: int | None = None
    sunset_time: int | None = None
    temperature: float | None = None
    temperature_high: float | None = None
    temperature_high_time: int | None = None
    temperature_low: float | None = None
    temperature_low_time: int | None = None
    uv_index: float | None = None
    uv_index_time: int | None = None
    visibility: float | None = None
    wind_bearing: float | None = None
    wind_gust: float | None = None
    wind_gust_time: int | None = None
    wind_speed: float | None = None

    # Deprecated by the API in favour of the *High/*Low fields
    apparent_temperature_max: float | None = None
    apparent_temperature_max_time: int | None = None
    apparent_temperature_min: float | None = None
    apparent_temperature_min_time: int | None = None
    temperature_max: float | None = None
    temperature_max_time: int | None = None
    temperature_min: float | None = None
    temperature_min_time: int | None = None


class DataBlock(_ApiModel):
    """A series of data points (minutely, hourly or daily) with a summary."""

    data: list[DataPoint] = Field(default_factory=list)
    summary: str | None = None
    icon: WireIcon | None = None


class Alert(_ApiModel):
    """A severe weather warning issued by a governmental authority."""

    description: str
    expires: int
    regions: list[str] = Field(default_factory=list)
    severity: WireSeverity
    time: int
    title: str
    uri: str


class Flags(_ApiModel):
    """Miscellaneous metadata about the request."""

    darksky_unavailable: str | None = Field(default=None, alias="darksky-unavailable")
    sources: list[str] = Field(default_factory=list)
    units: WireUnits


class ApiResponse(_ApiModel):
    """Top-level body returned by both the forecast and point-in-time endpoints."""

    latitude: float
    longitude: float
    timezone: str
    offset: float  # deprecated by the API; use timezone
    currently: DataPoint | None = None
    minutely: DataBlock | None = None
    hourly: DataBlock | None = None
    daily: DataBlock | None = None
    alerts: list[Alert] | None = None
    flags: Flags | None = None


# -----------------------------------------------------------------------------
# Helper Functions
# -----------------------------------------------------------------------------


def decode_response(body: httpx.Response | bytes | str) -> ApiResponse:
    """
    Decode a response body into an ApiResponse.

    Accepts the raw result of ForecastClient.fetch_* or its body. The HTTP
    status is not inspected.

    Raises:
        pydantic.ValidationError: If the body does not match the schema.
    """
    if isinstance(body, httpx.Response):
        body = body.content
    return ApiResponse.model_validate_json(body)
