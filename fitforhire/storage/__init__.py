"""Storage backends for waitlist data."""

from fitforhire.storage.base import WaitlistStore
from fitforhire.storage.memory import MemoryStorage

__all__ = ["WaitlistStore", "MemoryStorage"]
