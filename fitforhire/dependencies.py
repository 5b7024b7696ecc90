"""Shared dependencies for FastAPI routes."""

from fastapi import Request

from fitforhire.services import WaitlistService
from fitforhire.storage import WaitlistStore


def get_store(request: Request) -> WaitlistStore:
    """Return the store created for this application instance."""
    return request.app.state.store


def get_waitlist_service(request: Request) -> WaitlistService:
    """Return the waitlist service bound to this application's store."""
    return request.app.state.waitlist_service
