"""Middleware modules for the FastAPI application."""

from fitforhire.middleware.request_context import RequestContextMiddleware, request_id_var
from fitforhire.middleware.security_headers import SecurityHeadersMiddleware

__all__ = [
    "RequestContextMiddleware",
    "SecurityHeadersMiddleware",
    "request_id_var",
]
