"""
core/difficulty.py — Difficulty curve and score-derived signals.

The lightness delta for the next level shrinks logarithmically with the
score, so each correct answer makes the game a little harder than the
last, but by less each time:

    delta = max(MIN_DELTA, INITIAL_DELTA - DELTA_LOG_SCALE * log2(score + 1))

With the default constants the floor is reached at score 39.

Everything here is a pure function of the score; the engine keeps no
extra state for milestones or grades.
"""

import math

from settings import (
    INITIAL_DELTA, MIN_DELTA, DELTA_LOG_SCALE,
    MILESTONE_EVERY, GRADE_THRESHOLDS, GRADE_FLOOR,
)


def next_delta(score: int) -> float:
    """Return the lightness delta for the level generated at this score.

    Args:
        score: Correct answers so far (before the new level).

    Returns:
        Float in [MIN_DELTA, INITIAL_DELTA]. Exactly INITIAL_DELTA at 0.
    """
    return max(MIN_DELTA, INITIAL_DELTA - DELTA_LOG_SCALE * math.log2(score + 1))


def is_milestone(score: int) -> bool:
    """Return True on every positive multiple of MILESTONE_EVERY."""
    return score > 0 and score % MILESTONE_EVERY == 0


def grade(score: int) -> str:
    """Map a final score to a letter grade (S, A, B or C)."""
    for letter, threshold in GRADE_THRESHOLDS:
        if score > threshold:
            return letter
    return GRADE_FLOOR
