"""Prometheus metrics for the casework service.

Business Metrics (for program staff):
- casework_payments_issued_total: Gift-card payments issued
- casework_payment_amount_total: Currency units paid out
- casework_payment_rejections_total: Issuance attempts rejected, by reason
- casework_eligibility_checks_total: Eligibility checks by outcome

Technical Metrics (for Engineering/SRE):
- casework_issuance_latency_seconds: Payment issuance latency
- casework_http_requests_total: HTTP requests by endpoint/status
- casework_http_request_latency_seconds: HTTP latency by endpoint
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

payments_issued_total = Counter(
    "casework_payments_issued_total",
    "Total number of gift-card payments issued",
)

payment_amount_total = Counter(
    "casework_payment_amount_total",
    "Total currency units issued as gift-card payments",
)

payment_rejections_total = Counter(
    "casework_payment_rejections_total",
    "Total number of rejected payment issuance attempts",
    ["reason"],  # lifetime_cap, weekly_cap
)

eligibility_checks_total = Counter(
    "casework_eligibility_checks_total",
    "Total number of payment eligibility checks",
    ["outcome"],  # allowed, denied
)


# =============================================================================
# Technical Metrics
# =============================================================================

issuance_latency = Histogram(
    "casework_issuance_latency_seconds",
    "Payment issuance latency in seconds",
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

http_requests_total = Counter(
    "casework_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "casework_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_eligibility_check(allowed: bool) -> None:
    """Record the outcome of an eligibility check."""
    eligibility_checks_total.labels(outcome="allowed" if allowed else "denied").inc()


def record_payment_issued(amount: int) -> None:
    """Record a successfully issued payment."""
    payments_issued_total.inc()
    payment_amount_total.inc(amount)


def record_payment_rejected(reached_lifetime_cap: bool) -> None:
    """Record a rejected issuance attempt."""
    reason = "lifetime_cap" if reached_lifetime_cap else "weekly_cap"
    payment_rejections_total.labels(reason=reason).inc()


@contextmanager
def track_issuance_latency() -> Generator[None, None, None]:
    """Context manager to track payment issuance latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        issuance_latency.observe(duration)


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
