"""User record.

Placeholder identity scaffolding kept alongside the waitlist store. No
endpoint reads or writes users.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """User account."""

    id: int
    username: str
    password: str
