"""
Centralized configuration for the forecast API client.

API URLs, wire constants and HTTP settings in one place.
Supports environment variable overrides for deployment flexibility.
"""

from __future__ import annotations

import os

# -----------------------------------------------------------------------------
# API Base URL
# -----------------------------------------------------------------------------

FORECAST_BASE_URL = os.environ.get(
    "FORECAST_API_BASE_URL",
    "https://api.pirateweather.net/forecast",
)

# -----------------------------------------------------------------------------
# HTTP Configuration
# -----------------------------------------------------------------------------

HTTP_TIMEOUT_SECONDS = float(os.environ.get("FORECAST_API_TIMEOUT", "30.0"))

# -----------------------------------------------------------------------------
# Wire Format
# -----------------------------------------------------------------------------

# Digits after the decimal point for latitude/longitude in the request path.
COORDINATE_PRECISION = 16

EXCLUDE = "exclude"
EXTEND = "extend"
LANG = "lang"
UNITS = "units"

# Characters left unescaped inside a query value.
QUERY_SAFE_CHARS = ","

REDACTED = "***"
