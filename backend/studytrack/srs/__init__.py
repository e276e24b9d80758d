"""SRS helpers (SM-2 calculator + day-granular scheduling)."""

from .quality import (
    QUALITY_LABELS,
    Grade,
    InvalidQualityError,
    describe_quality,
    grade_to_quality,
    is_passing,
    validate_quality,
)
from .schedule import compute_next_review_date, days_until, is_overdue
from .sm2 import ReviewState, apply_review, compute_next_review, replay_reviews
from .time import (
    local_now,
    local_day,
    start_of_day,
    format_due_date,
    parse_due_date,
)

__all__ = [
    "QUALITY_LABELS",
    "Grade",
    "InvalidQualityError",
    "describe_quality",
    "grade_to_quality",
    "is_passing",
    "validate_quality",
    "compute_next_review_date",
    "days_until",
    "is_overdue",
    "ReviewState",
    "apply_review",
    "compute_next_review",
    "replay_reviews",
    "local_now",
    "local_day",
    "start_of_day",
    "format_due_date",
    "parse_due_date",
]
