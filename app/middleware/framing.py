"""Allow the application to be embedded in an iframe."""

from __future__ import annotations

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response


class AllowFramingMiddleware(BaseHTTPMiddleware):
    """Strip frame-blocking headers from every response.

    No ``frame-ancestors`` policy is set either; browser extensions that embed
    the page rely on their own host permissions.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        response = await call_next(request)
        if "x-frame-options" in response.headers:
            del response.headers["x-frame-options"]
        return response
