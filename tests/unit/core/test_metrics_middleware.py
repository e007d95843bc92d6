"""
Unit tests for the HTTP metrics middleware.
"""

import pytest
from django.http import HttpResponse
from django.test import RequestFactory
from prometheus_client import REGISTRY

from core.middleware.metrics import MetricsMiddleware, normalize_endpoint


def _requests_total(method, endpoint, status_code):
    value = REGISTRY.get_sample_value(
        "http_requests_total",
        {"method": method, "endpoint": endpoint, "status_code": str(status_code)},
    )
    return value or 0.0


class TestMetricsMiddleware:
    """Tests for MetricsMiddleware."""

    def test_records_response_status(self):
        """Test counting a normal response."""
        middleware = MetricsMiddleware(lambda request: HttpResponse(status=204))
        before = _requests_total("GET", "/metrics-ok/", 204)

        response = middleware(RequestFactory().get("/metrics-ok/"))

        assert response.status_code == 204
        assert _requests_total("GET", "/metrics-ok/", 204) == before + 1

    def test_records_unhandled_error_as_500(self):
        """A raising view is counted as a 500 and the error propagates."""

        def failing_view(request):
            raise RuntimeError("boom")

        middleware = MetricsMiddleware(failing_view)
        before = _requests_total("POST", "/metrics-fail/", 500)

        with pytest.raises(RuntimeError):
            middleware(RequestFactory().post("/metrics-fail/"))

        assert _requests_total("POST", "/metrics-fail/", 500) == before + 1

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("/api/inventory/prod-1", "/api/inventory/{product_id}"),
            ("/api/get-code", "/api/get-code"),
            ("/items/42/", "/items/{id}/"),
        ],
    )
    def test_normalize_endpoint(self, path, expected):
        """Per-resource paths collapse to one label."""
        assert normalize_endpoint(path) == expected
