"""
Prometheus metrics for the code delivery service.

Custom metrics for delivery outcomes, stock loading and HTTP traffic.
"""

from prometheus_client import Counter, Histogram

# HTTP metrics
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0],
)

# Delivery metrics
codes_delivered_total = Counter(
    "codes_delivered_total",
    "Codes handed out to users",
    ["product_id", "outcome"],
)

code_delivery_lost_races_total = Counter(
    "code_delivery_lost_races_total",
    "Delivery attempts that lost the race for a code and were retried",
    ["product_id"],
)

code_delivery_contention_total = Counter(
    "code_delivery_contention_total",
    "Deliveries abandoned after exhausting the retry ceiling",
    ["product_id"],
)

code_delivery_no_stock_total = Counter(
    "code_delivery_no_stock_total",
    "Deliveries refused because the product pool was empty",
    ["product_id"],
)

code_delivery_attempts = Histogram(
    "code_delivery_attempts",
    "Attempts needed per delivery",
    buckets=[1, 2, 3, 5, 8, 13],
)

# Stock metrics
codes_loaded_total = Counter(
    "codes_loaded_total",
    "Codes inserted by bulk loads",
    ["product_id"],
)

codes_load_duplicates_total = Counter(
    "codes_load_duplicates_total",
    "Codes skipped by bulk loads because they already existed",
    ["product_id"],
)

# Error metrics
errors_total = Counter(
    "errors_total",
    "Domain errors returned to callers",
    ["code"],
)
