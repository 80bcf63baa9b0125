"""
Forecast API Failure Types

Canonical failure taxonomy for the client library.
Every failure raised by this package is an instance of one of these types.
Transport failures are NOT wrapped: they reach the caller exactly as the
transport raised them.
"""

from __future__ import annotations

from enum import Enum


class ForecastApiError(Exception):
    """Base class for all forecast API client failures."""

    failure_category: str = "unknown"

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class UnrecognizedToken(ForecastApiError):
    """
    A wire token does not name any variant of the target enumeration.

    - Fatality: Fatal for the decode call. There is no default variant.
    """

    failure_category = "unrecognized_token"

    def __init__(self, enum_type: type[Enum], token: object) -> None:
        super().__init__(f"Unrecognized {enum_type.__name__} token: {token!r}")
        self.enum_type = enum_type
        self.token = token


class MalformedUrl(ForecastApiError):
    """
    A request URL could not be constructed.

    Only reachable when request inputs violate an invariant (for example a
    non-finite coordinate). Surfaces immediately and is never retried.
    """

    failure_category = "malformed_url"


class BuilderConsumed(ForecastApiError):
    """
    A request builder was used after build() finalized it.

    - Fatality: Fatal. Create a new builder for a new request.
    """

    failure_category = "builder_consumed"
