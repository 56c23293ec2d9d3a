"""Query string encoding for list and filter endpoints.

Endpoints such as ``/equity/history/orders`` take optional filters
(cursor, ticker, limit, time).  Callers build a plain mapping of
parameter name to value and :func:`encode_query` renders it as a query
suffix that can be appended to a request path.

Supported value kinds and how they are rendered:

* ``None`` – parameter omitted.
* ``str`` – omitted when empty, otherwise sent verbatim.
* ``bool`` – ``true`` / ``false``.
* ``int`` – plain decimal.
* ``float`` – shortest representation that round-trips, never in
  exponent notation.
* ``datetime`` – RFC 3339 in UTC with a ``Z`` suffix.

Values of any other type are dropped without raising.  Zero values
(``0``, ``0.0``, ``False``) are always sent.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from decimal import Decimal
from typing import Mapping, Optional, Union
from urllib.parse import urlencode

QueryValue = Union[None, str, int, float, bool, datetime]


def format_float(value: float) -> str:
    """Render ``value`` as the shortest decimal string that parses back to it."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_timestamp(value: datetime) -> str:
    """Render ``value`` as ``YYYY-MM-DDTHH:MM:SSZ``; naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def format_query_value(value: object) -> Optional[str]:
    """Return the wire form of a single value, or ``None`` if it must be omitted."""
    if value is None:
        return None
    if isinstance(value, str):
        return value or None
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return format_float(value)
    if isinstance(value, datetime):
        return format_timestamp(value)
    return None


def encode_query(params: Optional[Mapping[str, QueryValue]]) -> str:
    """Encode ``params`` as a ``?key=value&...`` suffix sorted by key.

    Returns an empty string when no parameter survives filtering.
    """
    if not params:
        return ""
    pairs = []
    for key in sorted(params):
        rendered = format_query_value(params[key])
        if rendered is not None:
            pairs.append((key, rendered))
    if not pairs:
        return ""
    return "?" + urlencode(pairs)


__all__ = [
    "QueryValue",
    "encode_query",
    "format_float",
    "format_query_value",
    "format_timestamp",
]
