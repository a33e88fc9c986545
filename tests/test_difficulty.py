"""Unit tests for core/difficulty.py — delta curve, milestones, grades."""

import math

import pytest

from core.difficulty import grade, is_milestone, next_delta
from settings import INITIAL_DELTA, MIN_DELTA


class TestNextDelta:
    def test_starts_at_initial(self):
        assert next_delta(0) == INITIAL_DELTA == 20.0

    def test_after_first_hit(self):
        assert next_delta(1) == 16.5

    def test_log_shape(self):
        assert next_delta(3) == pytest.approx(20 - 3.5 * 2)
        assert next_delta(7) == pytest.approx(20 - 3.5 * 3)
        assert next_delta(10) == pytest.approx(20 - 3.5 * math.log2(11))

    def test_floor(self):
        assert next_delta(38) > MIN_DELTA
        assert next_delta(39) == MIN_DELTA
        assert next_delta(10_000) == MIN_DELTA

    def test_bounded(self):
        for score in range(500):
            assert MIN_DELTA <= next_delta(score) <= INITIAL_DELTA

    def test_monotonic_non_increasing(self):
        deltas = [next_delta(s) for s in range(500)]
        assert all(b <= a for a, b in zip(deltas, deltas[1:]))

    def test_diminishing_steps(self):
        steps = [next_delta(s) - next_delta(s + 1) for s in range(30)]
        assert all(b < a for a, b in zip(steps, steps[1:]))


class TestMilestone:
    @pytest.mark.parametrize("score", [10, 20, 30, 100])
    def test_multiples_of_ten(self, score):
        assert is_milestone(score)

    @pytest.mark.parametrize("score", [0, 1, 9, 11, 15, 99])
    def test_others(self, score):
        assert not is_milestone(score)


class TestGrade:
    @pytest.mark.parametrize(
        "score,expected",
        [
            (0, "C"), (20, "C"),
            (21, "B"), (30, "B"),
            (31, "A"), (40, "A"),
            (41, "S"), (90, "S"),
        ],
    )
    def test_thresholds(self, score, expected):
        assert grade(score) == expected
