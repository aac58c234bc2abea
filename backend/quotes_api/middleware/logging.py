"""
Quotes API — Request Logging Middleware
========================================

What:  One access log line per request with method, path, matched route,
       status, duration, request ID and client IP.
When:  Runs inside RequestIDMiddleware so the request ID is already set.

Level by status class:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

The `route` field is the path template (`/quotes/{quote_id}`), so every
single-quote lookup aggregates under one key regardless of the ID asked for.
Request bodies are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from quotes_api.middleware.request_id import request_id_var

logger = logging.getLogger("quotes_api.access")


def route_template(request: Request) -> str:
    """Path template of the matched route, or the raw path when nothing matched."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs structured information about each HTTP request and response."""

    # Probes hit this every few seconds
    SILENT_PATHS = {"/health"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.SILENT_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        # Set by the router during call_next
        route = route_template(request)
        rid = request_id_var.get("")
        logger.log(
            log_level,
            "%s %s (%s) %d %.1fms [%s] from %s",
            request.method,
            request.url.path,
            route,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": request.url.path,
                "route": route,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
