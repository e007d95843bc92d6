"""
Metrics middleware for Prometheus.

Records HTTP request metrics for monitoring.
"""

import re
import time
from typing import Callable

from django.http import HttpRequest, HttpResponse

from core.metrics import (
    http_request_duration_seconds,
    http_requests_total,
)

_INVENTORY_PATH = re.compile(r"^/api/inventory/[^/]+/?$")


def normalize_endpoint(path: str) -> str:
    """Collapse per-product paths so metric label cardinality stays bounded."""
    if _INVENTORY_PATH.match(path):
        return "/api/inventory/{product_id}"
    return re.sub(r"/\d+", "/{id}", path)


class MetricsMiddleware:
    """
    Middleware to record HTTP metrics for Prometheus.

    Records:
    - Request count by method, endpoint, status
    - Request duration histogram
    """

    def __init__(self, get_response: Callable):
        """Initialize middleware."""
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Process request and record metrics."""
        start_time = time.time()
        endpoint = normalize_endpoint(request.path)

        try:
            response = self.get_response(request)
        except Exception:
            # Unhandled errors still count as 500s
            self._record(request.method, endpoint, 500, start_time)
            raise

        self._record(request.method, endpoint, response.status_code, start_time)
        return response

    def _record(self, method: str, endpoint: str, status_code: int, start_time: float) -> None:
        """Record request count and duration."""
        http_requests_total.labels(
            method=method,
            endpoint=endpoint,
            status_code=status_code,
        ).inc()
        http_request_duration_seconds.labels(
            method=method,
            endpoint=endpoint,
        ).observe(time.time() - start_time)
