"""
Shared test fixtures for forecast API client tests.

Provides reusable mock transports, request constants, and sample payloads.
"""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from forecast_api.builders import ForecastRequestBuilder, HistoricalRequestBuilder
from forecast_api.wire import ExcludeBlock, ExtendBy, Lang, Units


# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------

API_KEY = "some_api_key"
LAT = 6.66
LONG = 66.6
TIME = 666
BASE_URL = "https://api.example.com/forecast"

LAT_STR = "6.6600000000000001"
LONG_STR = "66.5999999999999943"


# -----------------------------------------------------------------------------
# Mock HTTP Transports
# -----------------------------------------------------------------------------


class MockTransport(httpx.AsyncBaseTransport):
    """
    Mock transport that returns one predefined response for every request.

    Records each request so tests can inspect the exact URL sent.
    """

    def __init__(self, status: int = 200, data: Any = None):
        self.status = status
        self.data = data if data is not None else {}
        self.requests: list[httpx.Request] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status, json=self.data)


class FailingTransport(httpx.AsyncBaseTransport):
    """Mock transport that raises a connection error for every request."""

    def __init__(self, error: Exception):
        self.error = error

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        raise self.error


class RecordingTransport:
    """Bare transport with a `get` coroutine, returning a fixed sentinel."""

    def __init__(self, result: Any):
        self.result = result
        self.urls: list[httpx.URL] = []

    async def get(self, url: httpx.URL) -> Any:
        self.urls.append(url)
        return self.result


# -----------------------------------------------------------------------------
# Test Data
# -----------------------------------------------------------------------------


MOCK_FORECAST_DATA: dict[str, Any] = {
    "latitude": 6.66,
    "longitude": 66.6,
    "timezone": "Etc/GMT-4",
    "offset": 4,
    "currently": {
        "time": 1509993277,
        "summary": "Drizzle",
        "icon": "rain",
        "precipIntensity": 0.0089,
        "precipProbability": 0.9,
        "precipType": "rain",
        "temperature": 66.1,
        "apparentTemperature": 66.31,
        "dewPoint": 60.77,
        "humidity": 0.83,
        "windSpeed": 7.67,
        "uvIndex": 1,
    },
    "hourly": {
        "summary": "Rain starting later this afternoon.",
        "icon": "partly-cloudy-day",
        "data": [
            {"time": 1509991200, "temperature": 65.76, "icon": "partly-cloudy-day"},
            {"time": 1509994800, "temperature": 66.33, "icon": "rain"},
        ],
    },
    "alerts": [
        {
            "title": "Flood Watch for Mason, WA",
            "time": 1509993360,
            "expires": 1510036680,
            "description": "...FLOOD WATCH REMAINS IN EFFECT THROUGH LATE FRIDAY NIGHT...",
            "uri": "https://alerts.weather.gov/cap/wwacapget.php?x=WA1255E4DB8494.FloodWatch",
            "regions": ["Mason"],
            "severity": "watch",
        }
    ],
    "flags": {
        "sources": ["nwspa", "cmc", "gfs"],
        "units": "us",
    },
}


# -----------------------------------------------------------------------------
# Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def forecast_builder() -> ForecastRequestBuilder:
    """A forecast builder with every optional field set."""
    blocks = [ExcludeBlock.DAILY, ExcludeBlock.ALERTS]
    return (
        ForecastRequestBuilder(API_KEY, LAT, LONG, base_url=BASE_URL)
        .add_exclude(ExcludeBlock.HOURLY)
        .add_excludes(blocks)
        .set_extend(ExtendBy.HOURLY)
        .set_lang(Lang.ARABIC)
        .set_units(Units.IMPERIAL)
    )


@pytest.fixture
def historical_builder() -> HistoricalRequestBuilder:
    """A historical builder with every optional field set."""
    blocks = [ExcludeBlock.DAILY, ExcludeBlock.ALERTS]
    return (
        HistoricalRequestBuilder(API_KEY, LAT, LONG, TIME, base_url=BASE_URL)
        .add_exclude(ExcludeBlock.HOURLY)
        .add_excludes(blocks)
        .set_lang(Lang.ARABIC)
        .set_units(Units.IMPERIAL)
    )


@pytest.fixture
def mock_transport() -> MockTransport:
    """Mock transport answering every GET with the sample forecast."""
    return MockTransport(200, MOCK_FORECAST_DATA)


@pytest.fixture
def http_client(mock_transport: MockTransport) -> httpx.AsyncClient:
    """httpx client wired to the mock transport."""
    return httpx.AsyncClient(transport=mock_transport)
