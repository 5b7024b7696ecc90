"""Domain records held by the waitlist store."""

from fitforhire.models.user import User
from fitforhire.models.waitlist import WaitlistEntry

__all__ = [
    "User",
    "WaitlistEntry",
]
