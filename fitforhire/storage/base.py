"""Abstract waitlist store interface."""

from abc import ABC, abstractmethod

from fitforhire.models import User, WaitlistEntry


class WaitlistStore(ABC):
    """Abstract interface for waitlist storage."""

    @abstractmethod
    def add_entry(self, email: str) -> WaitlistEntry:
        """
        Record a signup unconditionally.

        Args:
            email: Email address to store

        Returns:
            The created entry with the next sequential id
        """
        pass

    @abstractmethod
    def add_entry_if_absent(self, email: str) -> WaitlistEntry | None:
        """
        Record a signup unless the exact email is already stored.

        The existence check and the write happen as one atomic step.

        Args:
            email: Email address to store

        Returns:
            The created entry, or None if the email was already present
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored entries."""
        pass

    @abstractmethod
    def contains_email(self, email: str) -> bool:
        """
        Check whether an entry with exactly this email exists.

        Args:
            email: Email address to look up (compared case-sensitively)

        Returns:
            True if some stored entry has this email
        """
        pass

    @abstractmethod
    def list_entries(self) -> list[WaitlistEntry]:
        """Return all entries ordered by id."""
        pass

    @abstractmethod
    def get_user(self, user_id: int) -> User | None:
        """Return the user with this id, or None."""
        pass

    @abstractmethod
    def get_user_by_username(self, username: str) -> User | None:
        """Return the user with this username, or None."""
        pass

    @abstractmethod
    def create_user(self, username: str, password: str) -> User:
        """Store a new user under the next sequential id and return it."""
        pass
