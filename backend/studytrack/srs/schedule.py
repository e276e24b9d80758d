"""Day-granular due dates for reviews.

Both helpers take an optional `now`; when it is omitted the real clock is
read through local_now(). Tests pass a fixed `now` instead.
"""

from __future__ import annotations

from datetime import date, datetime

from .sm2 import ReviewState
from .time import add_days, local_day, local_now, start_of_day


def _today(now: datetime | None) -> date:
    return local_day(now if now is not None else local_now())


def compute_next_review_date(review_state: ReviewState, now: datetime | None = None) -> datetime:
    """Return local midnight `review_state.interval` days after today."""
    return start_of_day(add_days(_today(now), review_state.interval))


def is_overdue(due_date: date | datetime, now: datetime | None = None) -> bool:
    """True when the due day is strictly before today.

    A review due today is not overdue.
    """
    return local_day(due_date) < _today(now)


def days_until(due_date: date | datetime, now: datetime | None = None) -> int:
    """Signed number of calendar days from today to the due day."""
    return (local_day(due_date) - _today(now)).days
