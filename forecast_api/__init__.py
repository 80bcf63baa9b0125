"""Typed client for the Dark Sky compatible forecast API."""

from .builders import (
    ForecastRequest,
    ForecastRequestBuilder,
    HistoricalRequest,
    HistoricalRequestBuilder,
)
from .client import ForecastClient, Transport
from .config import FORECAST_BASE_URL, HTTP_TIMEOUT_SECONDS
from .errors import BuilderConsumed, ForecastApiError, MalformedUrl, UnrecognizedToken
from .models import (
    Alert,
    ApiResponse,
    DataBlock,
    DataPoint,
    Flags,
    decode_response,
)
from .query import encode_query
from .wire import (
    ExcludeBlock,
    ExtendBy,
    Icon,
    Lang,
    PrecipType,
    Severity,
    Units,
    WireCodec,
    decode,
    encode,
)

__all__ = [
    # Client
    "ForecastClient",
    "Transport",
    # Requests
    "ForecastRequest",
    "ForecastRequestBuilder",
    "HistoricalRequest",
    "HistoricalRequestBuilder",
    # Wire
    "ExcludeBlock",
    "ExtendBy",
    "Lang",
    "Units",
    "Severity",
    "Icon",
    "PrecipType",
    "WireCodec",
    "encode",
    "decode",
    "encode_query",
    # Config
    "FORECAST_BASE_URL",
    "HTTP_TIMEOUT_SECONDS",
    # Errors
    "ForecastApiError",
    "UnrecognizedToken",
    "MalformedUrl",
    "BuilderConsumed",
    # Models
    "ApiResponse",
    "DataPoint",
    "DataBlock",
    "Alert",
    "Flags",
    "decode_response",
]
