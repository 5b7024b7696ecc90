"""Waitlist registration service.

Validates signup payloads, enforces one entry per email address, and
reports the running total. The store is passed in at construction time.
"""

import logging
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from fitforhire.models import WaitlistEntry
from fitforhire.schemas.waitlist import WaitlistCreate
from fitforhire.storage import WaitlistStore

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome to the waitlist! 🚀"
INVALID_EMAIL_MESSAGE = "Please enter a valid email address 📧"
DUPLICATE_EMAIL_MESSAGE = "This email is already on our waitlist! 🎉"
JOIN_FAILED_MESSAGE = "Something went wrong. Please try again! 😅"
COUNT_FAILED_MESSAGE = "Failed to get waitlist count"


class WaitlistError(Exception):
    """Base class for failures that map to a waitlist error response."""

    status_code = 400
    error = "waitlist_error"
    default_message = JOIN_FAILED_MESSAGE

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidEmailError(WaitlistError):
    """Raised when the signup payload does not carry a valid email."""

    error = "invalid_email"
    default_message = INVALID_EMAIL_MESSAGE


class DuplicateEmailError(WaitlistError):
    """Raised when the email is already registered."""

    error = "already_registered"
    default_message = DUPLICATE_EMAIL_MESSAGE


class WaitlistUnavailableError(WaitlistError):
    """Raised when the store fails unexpectedly."""

    status_code = 500
    error = "internal_error"


@dataclass
class JoinResult:
    """Outcome of a successful signup."""

    entry: WaitlistEntry
    total_count: int


def _email_domain(email: str) -> str:
    return email.rpartition("@")[2]


class WaitlistService:
    """Request-handling logic for waitlist signups."""

    def __init__(self, store: WaitlistStore):
        self.store = store

    def validate(self, payload: Any) -> WaitlistCreate:
        """
        Parse a raw request body into a signup request.

        Args:
            payload: Decoded JSON body (any shape)

        Returns:
            Validated signup request

        Raises:
            InvalidEmailError: If the body is not an object with a valid email
        """
        try:
            return WaitlistCreate.model_validate(payload)
        except ValidationError as e:
            logger.info(
                "Rejected waitlist signup with invalid email",
                extra={"event": "waitlist.invalid_email"},
            )
            raise InvalidEmailError() from e

    def join(self, payload: Any) -> JoinResult:
        """
        Add an email to the waitlist.

        Args:
            payload: Decoded JSON body, expected to be {"email": "..."}

        Returns:
            The created entry and the updated total count

        Raises:
            InvalidEmailError: If validation fails
            DuplicateEmailError: If the email is already registered
        """
        email = self.validate(payload).email

        # Fast path; add_entry_if_absent below is the authoritative check
        if self.store.contains_email(email):
            self._log_duplicate(email)
            raise DuplicateEmailError()

        entry = self.store.add_entry_if_absent(email)
        if entry is None:
            # Lost a race with a concurrent signup for the same address
            self._log_duplicate(email)
            raise DuplicateEmailError()

        total_count = self.store.count()
        logger.info(
            "Added waitlist entry %d",
            entry.id,
            extra={
                "event": "waitlist.joined",
                "entry_id": entry.id,
                "total_count": total_count,
                "email_domain": _email_domain(email),
            },
        )
        return JoinResult(entry=entry, total_count=total_count)

    def count(self) -> int:
        """Return the current number of waitlist entries."""
        return self.store.count()

    def _log_duplicate(self, email: str) -> None:
        logger.info(
            "Duplicate waitlist signup",
            extra={"event": "waitlist.duplicate", "email_domain": _email_domain(email)},
        )
