"""
core/game.py — Central game state machine for Chroma Vision.

Game owns the top-level state and orchestrates the engine:
    - Session       (score, time remaining, live level)
    - TickDriver    (one tick per second while active)
    - LevelFactory  (random grids)
    - difficulty    (delta curve, milestones, grade)

States:
    IDLE    — no run started yet
    ACTIVE  — timer running, tile clicks accepted
    OVER    — time ran out, clicks ignored

Transitions:
    any     → ACTIVE : start()
    ACTIVE  → OVER   : tick() reaches zero, or a wrong click's penalty does

Every command is a synchronous no-op when it does not apply (wrong state,
tile index outside the grid). Nothing here raises for bad input.

Listener hookup:
    The renderer and presentation layers register one callback with
    set_listener(). It receives a GameEvent and the snapshot taken right
    after the transition. Emitting is a silent no-op if no listener is set.

game.py does NOT import pygame. renderer/view.py translates pygame events
into start() and click() and draws from snapshot().
"""

from __future__ import annotations
import logging
import random
from enum import Enum, auto
from typing import Callable, Optional

from core.difficulty import next_delta, is_milestone, grade
from core.level_factory import Level, LevelFactory
from core.session import GameSnapshot, Session, SessionState
from core.timer import TickDriver
from settings import GRID_CELLS, INITIAL_DELTA, INITIAL_TIME

logger = logging.getLogger(__name__)


class GameEvent(Enum):
    """Notifications for the render and presentation layers."""
    STARTED      = auto()
    TARGET_FOUND = auto()
    MISS         = auto()
    MILESTONE    = auto()
    GAME_OVER    = auto()


Listener = Callable[[GameEvent, GameSnapshot], None]


class Game:
    """Chroma Vision engine.

    Attributes:
        state:    Current SessionState.
        session:  Session of the current or last run. None before the first start.
        factory:  LevelFactory used for every new grid.
        driver:   TickDriver feeding tick() while ACTIVE.
        _delta:   Lightness delta of the most recent level.
        _listener: Callback injected via set_listener(). None until set.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.state:   SessionState      = SessionState.IDLE
        self.session: Optional[Session] = None
        self.factory: LevelFactory      = LevelFactory(rng)
        self.driver:  TickDriver        = TickDriver()
        self._delta:  float             = INITIAL_DELTA
        self._listener: Optional[Listener] = None

    # ── Listener ──────────────────────────────────────────────────────────────

    def set_listener(self, listener: Optional[Listener]) -> None:
        """Register the callback that receives GameEvents. None detaches."""
        self._listener = listener

    def _emit(self, event: GameEvent) -> None:
        if self._listener:
            self._listener(event, self.snapshot())

    # ── Read side ─────────────────────────────────────────────────────────────

    @property
    def level(self) -> Optional[Level]:
        """The live level, or None when no run is active."""
        return self.session.level if self.session else None

    def snapshot(self) -> GameSnapshot:
        """Return an immutable view of the engine right now."""
        score = self.session.score if self.session else 0
        level = self.level
        return GameSnapshot(
            state=self.state,
            score=score,
            time_remaining=self.session.time_remaining if self.session else INITIAL_TIME,
            grid=level.colors if level else (),
            current_delta=self._delta,
            milestone=is_milestone(score),
            grade=grade(score),
        )

    # ── Commands ──────────────────────────────────────────────────────────────

    def start(self) -> None:
        """Begin a fresh run from any state.

        The tick driver is stopped before the new Session exists and only
        restarted once the first level is in place.
        """
        self.driver.stop()
        self._delta = next_delta(0)
        self.session = Session(self.factory.generate(self._delta))
        self.state = SessionState.ACTIVE
        self.driver.start()
        logger.info("session started: time=%ds delta=%.2f",
                    self.session.time_remaining, self._delta)
        self._emit(GameEvent.STARTED)

    def tick(self) -> None:
        """Remove one second from the clock. No-op unless ACTIVE."""
        if self.state is not SessionState.ACTIVE:
            logger.debug("tick ignored in state %s", self.state.value)
            return
        if self.session.tick():
            self._game_over()

    def click(self, index: int) -> None:
        """Handle a tile click.

        A hit scores and replaces the level before returning, so the same
        target can never be counted twice. A miss costs MISS_PENALTY_S
        and ends the run at once if it empties the clock.

        Args:
            index: Row-major tile index from the render surface.
        """
        if self.state is not SessionState.ACTIVE:
            logger.debug("click(%r) ignored in state %s", index, self.state.value)
            return
        if not isinstance(index, int) or not 0 <= index < GRID_CELLS:
            logger.debug("click(%r) ignored: outside grid", index)
            return

        if self.level.is_target(index):
            self._delta = next_delta(self.session.score + 1)
            self.session.register_hit(self.factory.generate(self._delta))
            logger.debug("target found: score=%d next delta=%.2f",
                         self.session.score, self._delta)
            self._emit(GameEvent.TARGET_FOUND)
            if is_milestone(self.session.score):
                self._emit(GameEvent.MILESTONE)
        else:
            out_of_time = self.session.register_miss()
            logger.debug("miss at %d: time=%ds", index, self.session.time_remaining)
            self._emit(GameEvent.MISS)
            if out_of_time:
                self._game_over()

    def update(self, dt: float) -> int:
        """Feed frame time to the tick driver.

        Args:
            dt: Seconds since the last frame.

        Returns:
            Number of ticks applied this frame.
        """
        return self.driver.update(dt, self.tick)

    # ── Internals ─────────────────────────────────────────────────────────────

    def _game_over(self) -> None:
        self.driver.stop()
        self.state = SessionState.OVER
        self.session.end()
        logger.info("session over: score=%d grade=%s",
                    self.session.score, grade(self.session.score))
        self._emit(GameEvent.GAME_OVER)
