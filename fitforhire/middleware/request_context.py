"""Request context middleware: generates/propagates X-Request-ID and logs request timing."""

import logging
import time
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

# Context variable accessible by all loggers within a request
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

logger = logging.getLogger("fitforhire.request")


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Middleware that assigns a request ID, measures duration, and logs each request."""

    async def dispatch(self, request: Request, call_next):
        # Accept from header (the landing page may send one) or generate new
        req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        token = request_id_var.set(req_id)

        try:
            start = time.monotonic()
            response = await call_next(request)
            duration_ms = round((time.monotonic() - start) * 1000, 1)

            logger.info(
                "%s %s %s %.1fms",
                request.method,
                request.url.path,
                response.status_code,
                duration_ms,
                extra={
                    "event": "http.request",
                    "request_id": req_id,
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "duration_ms": duration_ms,
                },
            )
        finally:
            request_id_var.reset(token)

        response.headers["X-Request-ID"] = req_id
        return response
