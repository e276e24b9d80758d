"""Recall-quality ratings for SRS.

A rating is an integer 0-5 supplied after a review attempt. Front ends that
offer four buttons instead of a 0-5 slider go through grade_to_quality().
"""

from __future__ import annotations

from typing import Literal


MIN_QUALITY = 0
MAX_QUALITY = 5

# Ratings at or above this count as a successful recall
PASSING_QUALITY = 3

QUALITY_LABELS: dict[int, str] = {
    0: "Total blackout",
    1: "Incorrect response; the correct answer seemed familiar",
    2: "Incorrect response; the correct answer was easily recalled",
    3: "Correct response recalled with difficulty",
    4: "Correct response after hesitation",
    5: "Perfect response",
}

Grade = Literal["again", "hard", "good", "easy"]

_GRADE_TO_QUALITY: dict[str, int] = {
    "again": 0,
    "hard": 3,
    "good": 4,
    "easy": 5,
}


class InvalidQualityError(ValueError):
    """Raised when a recall-quality rating is outside 0-5."""

    def __init__(self, quality: object):
        self.quality = quality
        super().__init__("Quality must be between 0 and 5")


def validate_quality(quality: object) -> int:
    """Return the rating unchanged if it is an integer in 0-5.

    Raises:
        InvalidQualityError: If the rating is not an int (bools included)
            or falls outside the closed range 0-5
    """
    if isinstance(quality, bool) or not isinstance(quality, int):
        raise InvalidQualityError(quality)
    if quality < MIN_QUALITY or quality > MAX_QUALITY:
        raise InvalidQualityError(quality)
    return quality


def is_passing(quality: int) -> bool:
    return validate_quality(quality) >= PASSING_QUALITY


def grade_to_quality(grade: Grade) -> int:
    """Map a button grade to the 0-5 rating the scheduler expects.

    Raises:
        ValueError: If grade is not one of again/hard/good/easy
    """
    try:
        return _GRADE_TO_QUALITY[grade]
    except KeyError:
        raise ValueError(f"Invalid grade: {grade}") from None


def describe_quality(quality: int) -> str:
    return QUALITY_LABELS[validate_quality(quality)]
