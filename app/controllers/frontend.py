"""Serve the prebuilt single-page application.

Registered after every API router: anything under ``/api`` that reached
these routes has no handler and gets a JSON 404.
"""

from pathlib import Path

from fastapi import APIRouter, status
from fastapi.responses import FileResponse, JSONResponse, Response

from app.config.settings import settings

router = APIRouter(tags=["frontend"])

NOT_BUILT_MESSAGE = "Please build the frontend first: cd frontend && npm run build"


def frontend_dist() -> Path:
    return Path(settings.frontend_dist).resolve()


def _api_not_found() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": "API endpoint not found"},
    )


def _not_built() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"error": "Frontend not built", "message": NOT_BUILT_MESSAGE},
    )


@router.api_route(
    "/api/{api_path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
async def unknown_api_route(api_path: str) -> JSONResponse:
    return _api_not_found()


@router.get("/{full_path:path}", include_in_schema=False)
async def serve_frontend(full_path: str) -> Response:
    """Return a built asset, or index.html so client-side routing works."""
    if full_path == "api":
        return _api_not_found()

    dist = frontend_dist()
    if not dist.is_dir():
        return _not_built()

    if full_path:
        candidate = (dist / full_path).resolve()
        if candidate.is_relative_to(dist) and candidate.is_file():
            return FileResponse(candidate)

    index = dist / "index.html"
    if not index.is_file():
        return _not_built()
    return FileResponse(index)
