"""Pydantic schemas for API request/response models."""

from fitforhire.schemas.waitlist import (
    ErrorResponse,
    WaitlistCountResponse,
    WaitlistCreate,
    WaitlistEntryResponse,
    WaitlistJoinResponse,
)

__all__ = [
    "ErrorResponse",
    "WaitlistCountResponse",
    "WaitlistCreate",
    "WaitlistEntryResponse",
    "WaitlistJoinResponse",
]
