"""Liveness endpoint."""

from fastapi import APIRouter

from app.views import HealthResponse

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", message="Server is running")
