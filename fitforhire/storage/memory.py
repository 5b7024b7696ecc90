"""In-memory store implementation.

Holds everything for the lifetime of the process. Nothing is evicted, so
memory grows with every signup; a restart empties the waitlist.
"""

import threading
from datetime import datetime, timezone

from fitforhire.models import User, WaitlistEntry
from fitforhire.storage.base import WaitlistStore


class MemoryStorage(WaitlistStore):
    """Thread-safe in-memory waitlist and user storage."""

    def __init__(self):
        self._lock = threading.Lock()
        self._entries: dict[int, WaitlistEntry] = {}
        self._emails: set[str] = set()
        self._users: dict[int, User] = {}
        self._next_entry_id = 1
        self._next_user_id = 1

    def _insert(self, email: str) -> WaitlistEntry:
        # Caller must hold self._lock
        entry = WaitlistEntry(
            id=self._next_entry_id,
            email=email,
            joined_at=datetime.now(timezone.utc),
        )
        self._next_entry_id += 1
        self._entries[entry.id] = entry
        self._emails.add(email)
        return entry

    def add_entry(self, email: str) -> WaitlistEntry:
        with self._lock:
            return self._insert(email)

    def add_entry_if_absent(self, email: str) -> WaitlistEntry | None:
        with self._lock:
            if email in self._emails:
                return None
            return self._insert(email)

    def count(self) -> int:
        with self._lock:
            return len(self._entries)

    def contains_email(self, email: str) -> bool:
        with self._lock:
            return email in self._emails

    def list_entries(self) -> list[WaitlistEntry]:
        with self._lock:
            return [self._entries[key] for key in sorted(self._entries)]

    def get_user(self, user_id: int) -> User | None:
        with self._lock:
            return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        with self._lock:
            return next(
                (user for user in self._users.values() if user.username == username),
                None,
            )

    def create_user(self, username: str, password: str) -> User:
        with self._lock:
            user = User(id=self._next_user_id, username=username, password=password)
            self._next_user_id += 1
            self._users[user.id] = user
            return user
