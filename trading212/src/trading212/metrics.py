"""
Prometheus metrics for outgoing API requests.

The collectors are registered on the default registry at import time.
The library never starts an HTTP exposition server; applications that
want to scrape these metrics call ``prometheus_client.start_http_server``
themselves.

Metrics
-------

* ``trading212_requests_total{method,status}`` – completed requests by
  HTTP method and status code; ``status="error"`` counts requests that
  failed before a response arrived.
* ``trading212_request_seconds{method}`` – wall-clock request latency.
"""

from __future__ import annotations

from prometheus_client import Counter, Histogram

REQUESTS_TOTAL = Counter(
    "trading212_requests_total",
    "Trading 212 API requests by method and response status",
    labelnames=["method", "status"],
)

REQUEST_SECONDS = Histogram(
    "trading212_request_seconds",
    "Trading 212 API request latency in seconds",
    labelnames=["method"],
)


def observe_request(method: str, status: str, elapsed: float) -> None:
    """Record one finished request."""
    REQUESTS_TOTAL.labels(method=method, status=status).inc()
    REQUEST_SECONDS.labels(method=method).observe(elapsed)
