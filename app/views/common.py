"""Common response schemas."""

from typing import Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
    message: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    message: str
