"""Waitlist entry record."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class WaitlistEntry:
    """A single recorded signup. Immutable once created."""

    id: int
    email: str
    joined_at: datetime
