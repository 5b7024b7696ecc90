"""Business logic services."""

from fitforhire.services.waitlist_service import (
    DuplicateEmailError,
    InvalidEmailError,
    JoinResult,
    WaitlistError,
    WaitlistService,
    WaitlistUnavailableError,
)

__all__ = [
    "DuplicateEmailError",
    "InvalidEmailError",
    "JoinResult",
    "WaitlistError",
    "WaitlistService",
    "WaitlistUnavailableError",
]
