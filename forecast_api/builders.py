"""
Request Builders

Fluent builders for the two read-only endpoints:

- ForecastRequestBuilder   -> ForecastRequest   (current conditions + forecast)
- HistoricalRequestBuilder -> HistoricalRequest (conditions at a point in time)

A builder starts with the required identity fields, accepts any number of
configuration calls in any order (last call wins), and is finalized exactly
once by build(). build() computes the URL eagerly and returns a frozen
request; the builder cannot be touched afterwards.

URL shape:
    {base}/{api_key}/{latitude:.16f},{longitude:.16f}[,{time}][?{query}]
"""

from __future__ import annotations

import logging
import math
import numbers
import operator
from abc import ABC, abstractmethod
from collections.abc import Iterable, MutableSequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar
from urllib.parse import quote

import httpx

from .config import (
    COORDINATE_PRECISION,
    EXCLUDE,
    EXTEND,
    FORECAST_BASE_URL,
    LANG,
    REDACTED,
    UNITS,
)
from .errors import BuilderConsumed, MalformedUrl
from .query import QueryPair, encode_query
from .wire import ExcludeBlock, ExtendBy, Lang, Units

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)
B = TypeVar("B", bound="_RequestBuilder")


# -----------------------------------------------------------------------------
# Request Values
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class ForecastRequest:
    """A finalized Forecast API request. Build one with ForecastRequestBuilder."""

    api_key: str
    latitude: float
    longitude: float
    url: httpx.URL
    exclude: tuple[ExcludeBlock, ...] = ()
    extend: ExtendBy | None = None
    lang: Lang | None = None
    units: Units | None = None


@dataclass(frozen=True)
class HistoricalRequest:
    """A finalized point-in-time request. Build one with HistoricalRequestBuilder."""

    api_key: str
    latitude: float
    longitude: float
    time: int
    url: httpx.URL
    exclude: tuple[ExcludeBlock, ...] = ()
    lang: Lang | None = None
    units: Units | None = None


# -----------------------------------------------------------------------------
# URL Helpers
# -----------------------------------------------------------------------------


def format_coordinate(value: float) -> str:
    """Render a coordinate as fixed-point with COORDINATE_PRECISION decimals."""
    return f"{value:.{COORDINATE_PRECISION}f}"


def build_url(base_url: str, api_key: str, location: list[str], query: str) -> httpx.URL:
    """
    Assemble and parse a request URL.

    Raises:
        MalformedUrl: If the result is not an absolute http(s) URL.
    """
    raw = f"{base_url}/{quote(api_key, safe='')}/{','.join(location)}"
    if query:
        raw = f"{raw}?{query}"

    try:
        url = httpx.URL(raw)
    except httpx.InvalidURL as e:
        raise MalformedUrl(f"Invalid request URL: {e}", cause=e) from e

    if url.scheme not in ("http", "https") or not url.host:
        raise MalformedUrl(f"Request URL is not absolute http(s): {redact_url(url)}")
    return url


def redact_url(url: httpx.URL | str) -> str:
    """Return the URL as a string with the API key path segment masked."""
    head, sep, query = str(url).partition("?")
    base, _api_key, location = head.rsplit("/", 2)
    return f"{base}/{REDACTED}/{location}{sep}{query}"


def _coordinate(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be a real number, got {value!r}")
    return float(value)


def _require(value: Any, enum_type: type[E]) -> E:
    if not isinstance(value, enum_type):
        raise TypeError(f"Expected {enum_type.__name__}, got {value!r}")
    return value


# -----------------------------------------------------------------------------
# Builders
# -----------------------------------------------------------------------------


class _RequestBuilder(ABC):
    """Fields and configuration calls shared by both endpoint builders."""

    def __init__(
        self,
        api_key: str,
        latitude: float,
        longitude: float,
        *,
        base_url: str | None = None,
    ) -> None:
        self.api_key = api_key
        self.latitude = _coordinate("latitude", latitude)
        self.longitude = _coordinate("longitude", longitude)
        self.base_url = (base_url or FORECAST_BASE_URL).rstrip("/")
        self.exclude: list[ExcludeBlock] = []
        self.lang: Lang | None = None
        self.units: Units | None = None
        self._built = False

    def _check_open(self) -> None:
        if self._built:
            raise BuilderConsumed(
                f"{type(self).__name__} was already finalized by build()"
            )

    def add_exclude(self: B, block: ExcludeBlock) -> B:
        """Exclude one data block from the response. Duplicates are kept."""
        self._check_open()
        self.exclude.append(_require(block, ExcludeBlock))
        return self

    def add_excludes(self: B, blocks: Iterable[ExcludeBlock]) -> B:
        """
        Exclude several data blocks, in order.

        A mutable source sequence is drained: after the call it is empty.
        """
        self._check_open()
        self.exclude.extend([_require(block, ExcludeBlock) for block in blocks])
        if isinstance(blocks, MutableSequence):
            del blocks[:]
        return self

    def set_lang(self: B, lang: Lang) -> B:
        """Set the language for text summaries in the response."""
        self._check_open()
        self.lang = _require(lang, Lang)
        return self

    def set_units(self: B, units: Units) -> B:
        """Set the measurement units for response data."""
        self._check_open()
        self.units = _require(units, Units)
        return self

    def _location(self) -> list[str]:
        for name, value in (("latitude", self.latitude), ("longitude", self.longitude)):
            if not math.isfinite(value):
                raise MalformedUrl(f"{name} must be a finite number, got {value!r}")
        return [format_coordinate(self.latitude), format_coordinate(self.longitude)]

    @abstractmethod
    def _query_pairs(self) -> list[QueryPair]:
        """Query parameters for this endpoint, in wire order."""

    @abstractmethod
    def build(self) -> ForecastRequest | HistoricalRequest:
        """Finalize the request."""

    def _finish_url(self) -> httpx.URL:
        self._check_open()
        url = build_url(
            self.base_url,
            self.api_key,
            self._location(),
            encode_query(self._query_pairs()),
        )
        self._built = True
        logger.debug("Built %s URL %s", type(self).__name__, redact_url(url))
        return url


class ForecastRequestBuilder(_RequestBuilder):
    """
    Builder for Forecast API requests.

    Example:
        request = (
            ForecastRequestBuilder(api_key, 6.66, 66.6)
            .add_exclude(ExcludeBlock.HOURLY)
            .set_lang(Lang.ARABIC)
            .build()
        )
    """

    def __init__(
        self,
        api_key: str,
        latitude: float,
        longitude: float,
        *,
        base_url: str | None = None,
    ) -> None:
        super().__init__(api_key, latitude, longitude, base_url=base_url)
        self.extend: ExtendBy | None = None

    def set_extend(self, extend: ExtendBy) -> ForecastRequestBuilder:
        """Extend the hourly data window from 48 to 168 hours."""
        self._check_open()
        self.extend = _require(extend, ExtendBy)
        return self

    def _query_pairs(self) -> list[QueryPair]:
        return [
            (EXCLUDE, self.exclude),
            (EXTEND, self.extend),
            (LANG, self.lang),
            (UNITS, self.units),
        ]

    def build(self) -> ForecastRequest:
        """
        Finalize the request.

        Raises:
            MalformedUrl: If the URL cannot be constructed from the inputs.
            BuilderConsumed: If build() was already called on this builder.
        """
        url = self._finish_url()
        return ForecastRequest(
            api_key=self.api_key,
            latitude=self.latitude,
            longitude=self.longitude,
            url=url,
            exclude=tuple(self.exclude),
            extend=self.extend,
            lang=self.lang,
            units=self.units,
        )


class HistoricalRequestBuilder(_RequestBuilder):
    """Builder for point-in-time requests. `time` is a UNIX timestamp in seconds."""

    def __init__(
        self,
        api_key: str,
        latitude: float,
        longitude: float,
        time: int,
        *,
        base_url: str | None = None,
    ) -> None:
        super().__init__(api_key, latitude, longitude, base_url=base_url)
        self.time = operator.index(time)

    def _location(self) -> list[str]:
        return super()._location() + [str(self.time)]

    def _query_pairs(self) -> list[QueryPair]:
        return [
            (EXCLUDE, self.exclude),
            (LANG, self.lang),
            (UNITS, self.units),
        ]

    def build(self) -> HistoricalRequest:
        """
        Finalize the request.

        Raises:
            MalformedUrl: If the URL cannot be constructed from the inputs.
            BuilderConsumed: If build() was already called on this builder.
        """
        url = self._finish_url()
        return HistoricalRequest(
            api_key=self.api_key,
            latitude=self.latitude,
            longitude=self.longitude,
            time=self.time,
            url=url,
            exclude=tuple(self.exclude),
            lang=self.lang,
            units=self.units,
        )
