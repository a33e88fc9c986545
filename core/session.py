"""
core/session.py — One play-through of Chroma Vision.

Session tracks the mutable data of a single run:
    - Score (correct tiles found)
    - Time remaining in whole seconds
    - The live level

Session does NOT own the tick driver, the state enum, or the level
factory. game.py creates a fresh Session on every start and is its sole
caller; nothing outside game.py mutates it. Consumers read GameSnapshot.

Usage:
    session = Session(first_level)

    # correct tile:
    session.register_hit(next_level)

    # wrong tile:
    if session.register_miss():
        # out of time
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from core.level_factory import Level
from settings import INITIAL_TIME, MISS_PENALTY_S


class SessionState(Enum):
    """Engine activity states."""
    IDLE   = "idle"
    ACTIVE = "active"
    OVER   = "over"


class Session:
    """Mutable state for one run, from start to time-out.

    Attributes:
        score:          Correct answers so far. Never decreases.
        time_remaining: Whole seconds left, never negative.
        level:          The level on screen, or None once the run ended.
    """

    def __init__(self, level: Level, time_remaining: int = INITIAL_TIME) -> None:
        self.score:          int             = 0
        self.time_remaining: int             = time_remaining
        self.level:          Optional[Level] = level

    def register_hit(self, next_level: Level) -> None:
        """Count a correct answer and swap in the next level."""
        self.score += 1
        self.level = next_level

    def register_miss(self) -> bool:
        """Apply the wrong-tile penalty.

        Returns:
            True if the penalty used up the remaining time.
        """
        self.time_remaining = max(0, self.time_remaining - MISS_PENALTY_S)
        return self.time_remaining == 0

    def tick(self) -> bool:
        """Remove one second.

        Returns:
            True if time has run out.
        """
        self.time_remaining = max(0, self.time_remaining - 1)
        return self.time_remaining == 0

    def end(self) -> None:
        """Discard the live level at game over."""
        self.level = None


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only projection of the engine after a transition.

    Attributes:
        state:          Current SessionState.
        score:          Correct answers in this run.
        time_remaining: Whole seconds left.
        grid:           Tile colors in row-major order; empty without a level.
        current_delta:  Lightness delta of the latest level.
        milestone:      True when score is a positive multiple of MILESTONE_EVERY.
        grade:          Letter grade for the score so far.
    """

    state: SessionState
    score: int
    time_remaining: int
    grid: tuple
    current_delta: float
    milestone: bool
    grade: str
