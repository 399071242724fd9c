"""Application middleware package."""

from .framing import AllowFramingMiddleware
from .logging import StructuredLoggingMiddleware
from .telemetry import TelemetryMiddleware

__all__ = ["AllowFramingMiddleware", "StructuredLoggingMiddleware", "TelemetryMiddleware"]
