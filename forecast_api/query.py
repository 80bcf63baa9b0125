"""
Query Encoder

Turns an ordered list of optional request fields into a URL query string.

- Pairs are emitted in the order given, never sorted
- Absent values (None, empty strings, empty sequences) are dropped entirely
- Enum values go through the wire codec
- Sequences of enums are joined with "," before percent-encoding
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any
from urllib.parse import quote

from .config import QUERY_SAFE_CHARS
from .wire import encode

QueryPair = tuple[str, Any]


def encode_value(value: Any) -> str | None:
    """
    Render one query value as its unescaped wire string.

    Returns None when the value is absent and the parameter must be omitted.
    """
    if value is None:
        return None
    if isinstance(value, Enum):
        return encode(value)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        rendered = ",".join(
            encode(item) if isinstance(item, Enum) else str(item) for item in value
        )
    else:
        rendered = str(value)
    return rendered or None


def encode_query(pairs: Sequence[QueryPair]) -> str:
    """
    Build a percent-encoded query string from (name, value) pairs.

    Returns an empty string when no pair carries a value.
    """
    parts: list[str] = []
    for name, value in pairs:
        rendered = encode_value(value)
        if rendered is None:
            continue
        parts.append(
            f"{quote(name, safe='')}={quote(rendered, safe=QUERY_SAFE_CHARS)}"
        )
    return "&".join(parts)
