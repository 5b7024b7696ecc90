"""Main FastAPI application.

``create_app`` builds and configures the application; ``app`` is the
instance created at import time for ASGI servers::

    uvicorn fitforhire.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from fitforhire.api import api_router
from fitforhire.config import Settings, get_settings
from fitforhire.dependencies import get_store
from fitforhire.logging_config import configure_logging
from fitforhire.middleware import RequestContextMiddleware, SecurityHeadersMiddleware
from fitforhire.schemas import ErrorResponse
from fitforhire.services import InvalidEmailError, WaitlistError, WaitlistService
from fitforhire.storage import MemoryStorage, WaitlistStore

logger = logging.getLogger(__name__)


def _error_response(exc: WaitlistError) -> JSONResponse:
    body = ErrorResponse(message=exc.message, error=exc.error)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


async def waitlist_error_handler(request: Request, exc: WaitlistError) -> JSONResponse:
    """Render service errors as ErrorResponse bodies."""
    return _error_response(exc)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Treat unparseable request bodies as invalid signups (400, not 422)."""
    logger.info(
        "Rejected unparseable request body",
        extra={"event": "waitlist.invalid_email", "path": request.url.path},
    )
    return _error_response(InvalidEmailError())


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render framework HTTP errors in the ErrorResponse shape.

    A 400 on a POST means the signup body could not be read at all, which
    the landing page reports the same way as a bad address.
    """
    if exc.status_code == 400 and request.method == "POST":
        logger.info(
            "Rejected unreadable request body",
            extra={"event": "waitlist.invalid_email", "path": request.url.path},
        )
        return _error_response(InvalidEmailError())

    body = ErrorResponse(message=str(exc.detail), error="http_error")
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(),
        headers=getattr(exc, "headers", None),
    )


def create_app(
    settings: Settings | None = None,
    store: WaitlistStore | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use; defaults to the cached environment settings
        store: Waitlist store to serve; a fresh MemoryStorage is created at
            startup when omitted

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    configure_logging(settings.debug)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Handle application lifecycle events."""
        # Startup
        app.state.store = store if store is not None else MemoryStorage()
        app.state.waitlist_service = WaitlistService(app.state.store)
        logger.info(
            "Starting %s", settings.app_name, extra={"event": "app.startup"}
        )
        yield
        # Shutdown
        logger.info(
            "Shutting down %s",
            settings.app_name,
            extra={"event": "app.shutdown", "total_count": app.state.store.count()},
        )
        del app.state.waitlist_service
        del app.state.store

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Waitlist signups for the FitForHire landing page",
        lifespan=lifespan,
    )

    app.add_exception_handler(WaitlistError, waitlist_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include API routers
    app.include_router(api_router, prefix=settings.api_prefix)

    @app.get("/")
    async def root():
        """Root endpoint - API health check."""
        return {
            "service": settings.app_name,
            "version": settings.app_version,
            "status": "operational",
        }

    @app.get("/health")
    async def health(store: WaitlistStore = Depends(get_store)):
        """Health check endpoint."""
        return {
            "status": "healthy",
            "waitlist": {"count": store.count()},
        }

    return app


app = create_app()


def run():
    """Console entry point: serve the API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "fitforhire.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_config=None,
    )
