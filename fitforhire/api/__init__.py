"""API routers."""

from fastapi import APIRouter

from fitforhire.api import waitlist

api_router = APIRouter()

# Include routers
api_router.include_router(waitlist.router, tags=["waitlist"])
