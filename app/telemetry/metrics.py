"""Prometheus metrics definitions and helpers."""

from __future__ import annotations

from prometheus_client import Counter, Gauge, Histogram

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests processed",
    ("method", "route", "status"),
)

REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ("method", "route"),
    buckets=(
        0.005,
        0.01,
        0.025,
        0.05,
        0.1,
        0.25,
        0.5,
        1.0,
        2.5,
        5.0,
        10.0,
    ),
)

ERROR_COUNTER = Counter(
    "app_internal_errors_total",
    "Number of requests ending in internal server error responses",
    ("method", "route"),
)

SUBMISSION_COUNTER = Counter(
    "submissions_received_total",
    "Number of submissions acknowledged and dispatched to the background",
)

SUBMISSION_OUTCOMES = Counter(
    "submission_outcomes_total",
    "Terminal outcomes of background submission tasks",
    ("outcome",),
)

BACKGROUND_IN_FLIGHT = Gauge(
    "background_tasks_in_flight",
    "Background tasks scheduled but not yet finished",
)


def observe_request(
    method: str,
    route: str,
    status_code: int,
    duration_seconds: float,
) -> None:
    """Record metrics for a completed HTTP request."""

    safe_route = route or "unknown"
    safe_method = method or "UNKNOWN"
    status_label = str(status_code)
    observed_duration = duration_seconds if duration_seconds >= 0 else 0

    REQUEST_COUNT.labels(
        method=safe_method,
        route=safe_route,
        status=status_label,
    ).inc()
    REQUEST_LATENCY.labels(
        method=safe_method,
        route=safe_route,
    ).observe(observed_duration)

    if status_code >= 500:
        ERROR_COUNTER.labels(
            method=safe_method,
            route=safe_route,
        ).inc()


def increment_submission() -> None:
    """Increment the acknowledged submission counter."""

    SUBMISSION_COUNTER.inc()


def record_outcome(outcome: str) -> None:
    """Count one terminal background outcome (succeeded, failed, cancelled, crashed)."""

    SUBMISSION_OUTCOMES.labels(outcome=outcome).inc()


def set_in_flight(count: int) -> None:
    BACKGROUND_IN_FLIGHT.set(max(0, count))
