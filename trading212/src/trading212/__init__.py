"""
Asynchronous client library for the Trading 212 equity REST API.

The package is organised around a single authenticated request pipeline
(``clients.http_client``) and a query string encoder (``query``).  The
endpoint groups in ``services`` are thin typed wrappers over those two,
and ``Trading212Client`` ties everything together.
"""

from .client import Trading212Client  # noqa: F401
from .config import API_PREFIX, ClientConfig, Environment  # noqa: F401
from .errors import (  # noqa: F401
    ApiError,
    ConfigError,
    DecodeError,
    SerializationError,
    Trading212Error,
    TransportError,
)
from .models import (  # noqa: F401
    LimitOrderRequest,
    MarketOrderRequest,
    Page,
    ReportDataIncluded,
    ReportRequest,
    StopLimitOrderRequest,
    StopOrderRequest,
    TimeValidity,
)
from .query import encode_query  # noqa: F401

__version__ = "0.1.0"
