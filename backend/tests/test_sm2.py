"""Unit tests for the SM-2 review calculator."""

import pytest

from studytrack.srs.quality import InvalidQualityError
from studytrack.srs.sm2 import (
    ReviewState,
    apply_review,
    compute_next_review,
    replay_reviews,
)


EASE_FACTORS = [1.3, 1.5, 2.5, 3.0]
INTERVALS = [0, 1, 6, 30]
REPETITIONS = [0, 1, 2, 5]


class TestComputeNextReview:
    """Tests for compute_next_review."""

    def test_first_review_with_defaults(self):
        result = compute_next_review(5)
        assert result.interval == 1
        assert result.repetitions == 1
        assert result.ease_factor == 2.6

    def test_second_review(self):
        first = compute_next_review(5)
        second = compute_next_review(5, 1, first.ease_factor, 1)
        assert second.interval == 6
        assert second.repetitions == 2

    def test_third_review_uses_previous_interval_times_ease(self):
        result = compute_next_review(5, 6, 2.6, 2)
        # 6 * 2.7 = 16.2
        assert result.interval == 16
        assert result.repetitions == 3
        assert result.ease_factor == 2.7

    def test_lapse_resets_long_streak(self):
        result = compute_next_review(2, 30, 2.5, 5)
        assert result.interval == 1
        assert result.repetitions == 0

    def test_ease_factor_clamped_at_minimum(self):
        result = compute_next_review(0, 0, 1.3, 0)
        assert result.ease_factor == 1.3

    def test_interval_rounds_half_up(self):
        # quality 4 leaves the ease unchanged; 5 * 2.5 = 12.5
        result = compute_next_review(4, 5, 2.5, 2)
        assert result.ease_factor == 2.5
        assert result.interval == 13

    def test_interval_never_zero_once_repeated(self):
        result = compute_next_review(5, 0, 2.5, 2)
        assert result.repetitions == 3
        assert result.interval == 1

    @pytest.mark.parametrize(
        "quality,expected_ease",
        [(0, 1.7), (1, 1.96), (2, 2.18), (3, 2.36), (4, 2.5), (5, 2.6)],
    )
    def test_ease_update_from_default(self, quality, expected_ease):
        assert compute_next_review(quality).ease_factor == expected_ease

    @pytest.mark.parametrize(
        "quality,expected_interval,expected_repetitions",
        [(0, 1, 0), (1, 1, 0), (2, 1, 0), (3, 1, 1), (4, 1, 1), (5, 1, 1)],
    )
    def test_first_review_by_quality(self, quality, expected_interval, expected_repetitions):
        result = compute_next_review(quality)
        assert result.interval == expected_interval
        assert result.repetitions == expected_repetitions

    def test_ease_factor_rounds_half_up_to_two_decimals(self):
        # quality 4 leaves 2.125 unchanged; round() would give 2.12
        result = compute_next_review(4, 6, 2.125, 2)
        assert result.ease_factor == 2.13
        # 6 * 2.125 = 12.75 uses the unrounded ease
        assert result.interval == 13

    def test_ease_factor_truncated_below_half(self):
        assert compute_next_review(4, 6, 2.124, 2).ease_factor == 2.12

    @pytest.mark.parametrize("quality", [-1, 6, 100])
    def test_quality_out_of_range_raises(self, quality):
        with pytest.raises(InvalidQualityError, match="Quality must be between 0 and 5"):
            compute_next_review(quality)

    @pytest.mark.parametrize("quality", [True, 3.0, "3", None])
    def test_non_integer_quality_raises(self, quality):
        with pytest.raises(InvalidQualityError):
            compute_next_review(quality)

    def test_invalid_quality_is_a_value_error(self):
        with pytest.raises(ValueError):
            compute_next_review(-1)


class TestInvariants:
    """Property checks over the whole rating range and a grid of prior states."""

    def _all_inputs(self):
        for quality in range(6):
            for ef in EASE_FACTORS:
                for interval in INTERVALS:
                    for reps in REPETITIONS:
                        yield quality, interval, ef, reps

    def test_ease_factor_never_below_minimum(self):
        for args in self._all_inputs():
            assert compute_next_review(*args).ease_factor >= 1.3

    def test_failed_recall_resets(self):
        for quality, interval, ef, reps in self._all_inputs():
            if quality >= 3:
                continue
            result = compute_next_review(quality, interval, ef, reps)
            assert result.repetitions == 0
            assert result.interval == 1

    def test_successful_recall_increments_repetitions(self):
        for quality, interval, ef, reps in self._all_inputs():
            if quality < 3:
                continue
            result = compute_next_review(quality, interval, ef, reps)
            assert result.repetitions == reps + 1
            assert result.interval >= 1

    def test_deterministic(self):
        for args in self._all_inputs():
            assert compute_next_review(*args) == compute_next_review(*args)


class TestReviewState:
    """Tests for the ReviewState value type."""

    def test_initial(self):
        assert ReviewState.initial() == ReviewState(interval=0, ease_factor=2.5, repetitions=0)

    def test_is_immutable(self):
        state = ReviewState.initial()
        with pytest.raises(AttributeError):
            state.interval = 3

    def test_record_round_trip(self):
        state = ReviewState(interval=16, ease_factor=2.7, repetitions=3)
        assert ReviewState.from_record(state.to_record()) == state

    def test_from_record_defaults_missing_fields(self):
        assert ReviewState.from_record({}) == ReviewState.initial()
        assert ReviewState.from_record({"interval": "6"}).interval == 6


class TestApplyAndReplay:
    """Tests for apply_review and replay_reviews."""

    def test_apply_review_does_not_mutate_input(self):
        state = ReviewState(interval=6, ease_factor=2.6, repetitions=2)
        new_state = apply_review(state, 5)
        assert state == ReviewState(interval=6, ease_factor=2.6, repetitions=2)
        assert new_state.repetitions == 3

    def test_learning_progression(self):
        review = compute_next_review(5)
        assert (review.interval, review.repetitions) == (1, 1)

        review = apply_review(review, 5)
        assert (review.interval, review.repetitions) == (6, 2)

        review = apply_review(review, 4)
        assert review.interval > 6
        assert review.repetitions == 3

        review = apply_review(review, 1)
        assert (review.interval, review.repetitions) == (1, 0)

    def test_replay_matches_step_by_step(self):
        qualities = [5, 5, 4, 1, 3, 4]
        state = ReviewState.initial()
        for q in qualities:
            state = apply_review(state, q)
        assert replay_reviews(qualities) == state

    def test_replay_empty_history_returns_start(self):
        start = ReviewState(interval=6, ease_factor=2.6, repetitions=2)
        assert replay_reviews([]) == ReviewState.initial()
        assert replay_reviews([], state=start) == start

    def test_replay_invalid_rating_raises(self):
        with pytest.raises(InvalidQualityError):
            replay_reviews([5, 5, 7, 4])
