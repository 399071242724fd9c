"""Pydantic schemas used as views in the MVC architecture."""

from .common import ErrorResponse, HealthResponse
from .submissions import SubmissionAccepted, SubmissionCreate

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "SubmissionAccepted",
    "SubmissionCreate",
]
