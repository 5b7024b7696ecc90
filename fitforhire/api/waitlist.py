"""Waitlist API endpoints."""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from fitforhire.dependencies import get_waitlist_service
from fitforhire.schemas import (
    ErrorResponse,
    WaitlistCountResponse,
    WaitlistEntryResponse,
    WaitlistJoinResponse,
)
from fitforhire.services import WaitlistError, WaitlistService, WaitlistUnavailableError
from fitforhire.services.waitlist_service import (
    COUNT_FAILED_MESSAGE,
    JOIN_FAILED_MESSAGE,
    WELCOME_MESSAGE,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/waitlist", tags=["waitlist"])


@router.post(
    "",
    response_model=WaitlistJoinResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def join_waitlist(
    payload: Any = Body(default=None),
    service: WaitlistService = Depends(get_waitlist_service),
) -> WaitlistJoinResponse:
    """Add an email to the waitlist."""
    try:
        result = service.join(payload)
    except WaitlistError:
        raise
    except Exception as e:
        logger.exception(
            "Failed to add waitlist entry",
            extra={"event": "waitlist.error", "error": type(e).__name__},
        )
        raise WaitlistUnavailableError(JOIN_FAILED_MESSAGE) from e

    return WaitlistJoinResponse(
        message=WELCOME_MESSAGE,
        waitlist_entry=WaitlistEntryResponse.model_validate(result.entry),
        total_count=result.total_count,
    )


@router.get(
    "/count",
    response_model=WaitlistCountResponse,
    responses={500: {"model": ErrorResponse}},
)
async def get_waitlist_count(
    service: WaitlistService = Depends(get_waitlist_service),
) -> WaitlistCountResponse:
    """Get the current number of waitlist signups."""
    try:
        count = service.count()
    except Exception as e:
        logger.exception(
            "Failed to get waitlist count",
            extra={"event": "waitlist.error", "error": type(e).__name__},
        )
        raise WaitlistUnavailableError(COUNT_FAILED_MESSAGE) from e

    return WaitlistCountResponse(count=count)
