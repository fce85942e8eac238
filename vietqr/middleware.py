"""Request logging middleware for the QR service."""
from __future__ import annotations

import logging
import time
from typing import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from .monitoring import observe_request

logger = logging.getLogger("vietqr.http")


def route_path(request: Request) -> str:
    """Templated route path when matched, raw URL path otherwise."""

    route = request.scope.get("route")
    return route.path if route else request.url.path


def _status_level(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log request metadata, latency, and status codes."""

    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:  # type: ignore[override]
        start = time.perf_counter()
        client = request.client.host if request.client else None
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start) * 1000
            path = route_path(request)
            logger.exception(
                "request failed",
                extra={"method": request.method, "path": path, "client": client, "duration_ms": round(duration_ms, 2)},
            )
            observe_request(request.method, path, 500, duration_ms)
            raise

        duration_ms = (time.perf_counter() - start) * 1000
        path = route_path(request)
        logger.log(
            _status_level(response.status_code),
            "request completed",
            extra={
                "method": request.method,
                "path": path,
                "status_code": response.status_code,
                "client": client,
                "duration_ms": round(duration_ms, 2),
            },
        )
        observe_request(request.method, path, response.status_code, duration_ms)
        return response
