"""Telemetry helpers and metrics."""

from .metrics import (
    BACKGROUND_IN_FLIGHT,
    ERROR_COUNTER,
    REQUEST_COUNT,
    REQUEST_LATENCY,
    SUBMISSION_COUNTER,
    SUBMISSION_OUTCOMES,
    increment_submission,
    observe_request,
    record_outcome,
    set_in_flight,
)

__all__ = [
    "BACKGROUND_IN_FLIGHT",
    "ERROR_COUNTER",
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "SUBMISSION_COUNTER",
    "SUBMISSION_OUTCOMES",
    "increment_submission",
    "observe_request",
    "record_outcome",
    "set_in_flight",
]
