"""SM-2 review calculator.

Given a recall-quality rating and the prior scheduling state of a study item,
compute the next interval, ease factor and repetition count. Everything here
is pure; the caller persists the returned ReviewState as a whole.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .quality import PASSING_QUALITY, validate_quality

logger = logging.getLogger(__name__)


DEFAULT_INTERVAL = 0
DEFAULT_EASE_FACTOR = 2.5
DEFAULT_REPETITIONS = 0
MIN_EASE_FACTOR = 1.3

# Warm-up intervals (days) for the first and second successful repetition
FIRST_INTERVAL = 1
SECOND_INTERVAL = 6


@dataclass(frozen=True)
class ReviewState:
    interval: int
    ease_factor: float
    repetitions: int

    @classmethod
    def initial(cls) -> ReviewState:
        """State of an item that has never been reviewed."""
        return cls(
            interval=DEFAULT_INTERVAL,
            ease_factor=DEFAULT_EASE_FACTOR,
            repetitions=DEFAULT_REPETITIONS,
        )

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> ReviewState:
        """Build a state from a stored row; missing fields take initial values."""
        return cls(
            interval=int(record.get("interval", DEFAULT_INTERVAL)),
            ease_factor=float(record.get("ease_factor", DEFAULT_EASE_FACTOR)),
            repetitions=int(record.get("repetitions", DEFAULT_REPETITIONS)),
        )

    def to_record(self) -> dict[str, Any]:
        return {
            "interval": self.interval,
            "ease_factor": self.ease_factor,
            "repetitions": self.repetitions,
        }


def _round_half_up(value: float, ndigits: int = 0) -> float:
    # Python's round() is banker's rounding; stored values use half-up.
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


def _clamp_ease_factor(ef: float) -> float:
    return max(MIN_EASE_FACTOR, ef)


def compute_next_review(
    quality: int,
    previous_interval: int = DEFAULT_INTERVAL,
    previous_ease_factor: float = DEFAULT_EASE_FACTOR,
    previous_repetitions: int = DEFAULT_REPETITIONS,
) -> ReviewState:
    """Compute the next scheduling state after a review.

    Rules:
    - EF' = EF + (0.1 - (5-q)*(0.08 + (5-q)*0.02)), clamped to >= 1.3
    - if q < 3: repetitions = 0, interval = 1
    - else:
        repetitions += 1
        if repetitions == 1: interval = 1
        elif repetitions == 2: interval = 6
        else: interval = round(previous_interval * EF')
    - EF' is stored rounded to 2 decimal places; the interval uses the
      unrounded value

    Args:
        quality: Recall rating 0-5
        previous_interval: Days of the previous interval (0 if never reviewed)
        previous_ease_factor: Previous ease factor
        previous_repetitions: Consecutive successful reviews so far

    Returns:
        A new ReviewState

    Raises:
        InvalidQualityError: If quality is outside 0-5
    """
    quality = validate_quality(quality)

    ease_factor = _clamp_ease_factor(
        previous_ease_factor + (0.1 - (5 - quality) * (0.08 + (5 - quality) * 0.02))
    )

    if quality < PASSING_QUALITY:
        logger.debug(
            "Recall failed (quality=%d); resetting %d repetitions", quality, previous_repetitions
        )
        repetitions = 0
        interval = FIRST_INTERVAL
    else:
        repetitions = previous_repetitions + 1
        if repetitions == 1:
            interval = FIRST_INTERVAL
        elif repetitions == 2:
            interval = SECOND_INTERVAL
        else:
            interval = max(1, int(_round_half_up(previous_interval * ease_factor)))

    return ReviewState(
        interval=interval,
        ease_factor=_round_half_up(ease_factor, 2),
        repetitions=repetitions,
    )


def apply_review(state: ReviewState, quality: int) -> ReviewState:
    """Apply a rating to an existing state."""
    return compute_next_review(
        quality,
        previous_interval=state.interval,
        previous_ease_factor=state.ease_factor,
        previous_repetitions=state.repetitions,
    )


def replay_reviews(qualities: Iterable[int], state: ReviewState | None = None) -> ReviewState:
    """Recalculate a state by applying a history of ratings in order.

    Starts from ReviewState.initial() unless a start state is given. An
    invalid rating anywhere in the history raises InvalidQualityError.
    """
    current = state if state is not None else ReviewState.initial()
    for quality in qualities:
        current = apply_review(current, quality)
    return current
