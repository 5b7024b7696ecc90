"""Waitlist schemas.

Response models serialize with camelCase keys, which is what the landing
page reads.
"""

from datetime import datetime

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model emitting camelCase keys and accepting either form."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class WaitlistCreate(BaseModel):
    """Waitlist signup request."""

    email: str

    @field_validator("email")
    @classmethod
    def check_email_format(cls, v: str) -> str:
        """Accept or reject a bare address; the submitted string is kept as-is."""
        if v != v.strip():
            raise ValueError("Email address must not have surrounding whitespace")
        try:
            validate_email(v, check_deliverability=False, allow_display_name=False)
        except EmailNotValidError as e:
            raise ValueError(str(e)) from e
        return v


class WaitlistEntryResponse(CamelModel):
    """A stored waitlist entry."""

    id: int
    email: str
    joined_at: datetime


class WaitlistJoinResponse(CamelModel):
    """Successful signup response."""

    success: bool = True
    message: str
    waitlist_entry: WaitlistEntryResponse
    total_count: int


class WaitlistCountResponse(BaseModel):
    """Current waitlist size."""

    count: int


class ErrorResponse(BaseModel):
    """Error body returned by every failing waitlist request."""

    success: bool = False
    message: str
    error: str
