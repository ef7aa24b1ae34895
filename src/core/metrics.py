"""Prometheus metrics for the ERP Dashboard API.

Metrics are organized into two categories:

Business Metrics (for Operations):
- erp_users_created_total: Users created by branch
- erp_sequence_last_value: Last sequence value handed out per counter

Technical Metrics (for Engineering/SRE):
- erp_sequence_allocations_total: Allocations by outcome
- erp_sequence_allocation_latency_seconds: Allocation latency
- erp_http_requests_total: HTTP requests by endpoint/status
- erp_http_request_latency_seconds: HTTP request latency
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, Gauge, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

users_created_total = Counter(
    "erp_users_created_total",
    "Total number of users created",
    ["branch_code"],
)

sequence_last_value = Gauge(
    "erp_sequence_last_value",
    "Last sequence value allocated for a counter family",
    ["family"],  # user, customer, transaction
)


# =============================================================================
# Technical Metrics
# =============================================================================

sequence_allocations_total = Counter(
    "erp_sequence_allocations_total",
    "Total number of sequence allocations",
    ["family", "outcome"],  # outcome: success, unavailable, invalid
)

sequence_allocation_latency = Histogram(
    "erp_sequence_allocation_latency_seconds",
    "Sequence allocation latency in seconds",
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

http_requests_total = Counter(
    "erp_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "erp_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

@contextmanager
def track_allocation_latency() -> Generator[None, None, None]:
    """Context manager to track sequence allocation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        sequence_allocation_latency.observe(duration)


def record_allocation(family: str, sequence: int) -> None:
    """Record a successful allocation."""
    sequence_allocations_total.labels(family=family, outcome="success").inc()
    sequence_last_value.labels(family=family).set(sequence)


def record_allocation_failure(family: str, outcome: str) -> None:
    """Record a failed allocation (unavailable or invalid)."""
    sequence_allocations_total.labels(family=family, outcome=outcome).inc()


def record_user_created(branch_code: str) -> None:
    """Record a newly created user."""
    users_created_total.labels(branch_code=branch_code).inc()


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
