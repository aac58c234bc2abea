"""
Quotes API — Request ID Middleware
===================================

What:  Tags every request with a short correlation ID and returns it in the
       `X-Request-ID` response header.
How:   Reuses the client's X-Request-ID when it is a safe token, otherwise
       generates one; stores it in a ContextVar so log lines and exception
       handlers can read it.

Accepted client IDs:
    1-64 characters of [A-Za-z0-9._-]. Anything else (empty, too long, spaces,
    control characters that could forge log lines) is replaced by a fresh ID.
"""

import re
import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"
MAX_REQUEST_ID_LENGTH = 64
_REQUEST_ID_PATTERN = re.compile(r"[A-Za-z0-9._-]{1,%d}" % MAX_REQUEST_ID_LENGTH)

# Coroutine-local: concurrent requests on one thread each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


def resolve_request_id(supplied: Optional[str]) -> str:
    """Return the client's ID if it is a safe token, else a generated one."""
    if supplied and _REQUEST_ID_PATTERN.fullmatch(supplied):
        return supplied
    return new_request_id()


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns a request ID and echoes it back to the client."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
