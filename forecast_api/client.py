"""
Forecast API Client

A thin pass-through over an HTTP transport. The client reads the URL a
finalized request computed at build time and issues a GET for it.

The client does NOT:
- Retry
- Interpret status codes
- Parse response bodies (see models.decode_response for that)
- Wrap transport errors

Whatever the transport returns or raises reaches the caller unchanged.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from .builders import ForecastRequest, HistoricalRequest, redact_url
from .config import HTTP_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Anything that can GET a URL asynchronously. httpx.AsyncClient qualifies."""

    async def get(self, url: httpx.URL) -> Any: ...


class ForecastClient:
    """
    Sends Forecast and point-in-time requests through a transport.

    The transport is normally owned by the caller and is never closed here.
    If none is given, the client lazily creates its own httpx.AsyncClient and
    closes it in close() / on leaving `async with`.
    """

    def __init__(self, transport: Transport | None = None) -> None:
        self._transport = transport
        self._owns_transport = transport is None

    @property
    def transport(self) -> Transport:
        """Lazy-initialize HTTP client when none was supplied."""
        if self._transport is None:
            self._transport = httpx.AsyncClient(timeout=HTTP_TIMEOUT_SECONDS)
        return self._transport

    async def close(self) -> None:
        """Clean up the HTTP client if this instance created it."""
        if self._owns_transport and self._transport is not None:
            await self._transport.aclose()  # type: ignore[attr-defined]
            self._transport = None

    async def __aenter__(self) -> ForecastClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def fetch_forecast(self, request: ForecastRequest) -> Any:
        """
        Send a Forecast API request.

        Returns the transport's result as-is (an httpx.Response for httpx).
        Raises whatever the transport raises.
        """
        return await self._get(request.url)

    async def fetch_historical(self, request: HistoricalRequest) -> Any:
        """
        Send a point-in-time (Time Machine) request.

        Returns the transport's result as-is (an httpx.Response for httpx).
        Raises whatever the transport raises.
        """
        return await self._get(request.url)

    async def _get(self, url: httpx.URL) -> Any:
        logger.debug("GET %s", redact_url(url))
        return await self.transport.get(url)
