"""Reviews (SRS) API router."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from studytrack.models import OverdueResponse, ReplayRequest, ReviewRequest, ReviewResponse
from studytrack.srs.quality import InvalidQualityError, describe_quality
from studytrack.srs.schedule import compute_next_review_date, days_until, is_overdue
from studytrack.srs.sm2 import ReviewState, compute_next_review, replay_reviews
from studytrack.srs.time import format_due_date, local_now, parse_due_date

logger = logging.getLogger(__name__)


router = APIRouter(prefix="/reviews", tags=["reviews"])


def get_now() -> datetime:
    """Clock dependency; overridden in tests to freeze 'now'."""
    return local_now()


def _invalid_quality(e: InvalidQualityError) -> HTTPException:
    logger.warning(f"Rejected review rating: {e.quality!r}")
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=str(e),
    )


def _to_response(state: ReviewState, now: datetime, last_quality: int | None) -> ReviewResponse:
    try:
        due = compute_next_review_date(state, now=now)
    except OverflowError:
        logger.warning(f"Next review date out of range: interval={state.interval}")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Next review date is out of range",
        )
    return ReviewResponse(
        interval=state.interval,
        easeFactor=state.ease_factor,
        repetitions=state.repetitions,
        dueDate=format_due_date(due),
        qualityLabel=describe_quality(last_quality) if last_quality is not None else None,
    )


@router.post("/next", response_model=ReviewResponse)
async def next_review(
    request: ReviewRequest, now: Annotated[datetime, Depends(get_now)]
) -> ReviewResponse:
    """Rate one review attempt and get the next scheduling state."""
    try:
        state = compute_next_review(
            request.quality,
            previous_interval=request.interval,
            previous_ease_factor=request.easeFactor,
            previous_repetitions=request.repetitions,
        )
    except InvalidQualityError as e:
        raise _invalid_quality(e)

    logger.info(
        f"Review scheduled: quality={request.quality}, interval={state.interval}, "
        f"ease_factor={state.ease_factor}, repetitions={state.repetitions}"
    )
    return _to_response(state, now, request.quality)


@router.post("/replay", response_model=ReviewResponse)
async def replay(
    request: ReplayRequest, now: Annotated[datetime, Depends(get_now)]
) -> ReviewResponse:
    """Recalculate the scheduling state from a history of ratings."""
    start = ReviewState(
        interval=request.interval,
        ease_factor=request.easeFactor,
        repetitions=request.repetitions,
    )
    try:
        state = replay_reviews(request.qualities, state=start)
    except InvalidQualityError as e:
        raise _invalid_quality(e)

    last_quality = request.qualities[-1] if request.qualities else None
    return _to_response(state, now, last_quality)


@router.get("/overdue", response_model=OverdueResponse)
async def overdue(
    now: Annotated[datetime, Depends(get_now)],
    due_date: Annotated[str, Query(alias="dueDate", description="Due day (YYYY-MM-DD)")],
) -> OverdueResponse:
    """Check whether a stored due date is overdue."""
    try:
        due = parse_due_date(due_date)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    return OverdueResponse(
        dueDate=format_due_date(due),
        overdue=is_overdue(due, now=now),
        daysUntil=days_until(due, now=now),
    )
