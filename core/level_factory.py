"""
core/level_factory.py — Level generation for Chroma Vision.

A level is one 5x5 grid: 24 tiles of a random base color and a single
target tile whose lightness differs by the current delta. game.py asks
for a new level on start and after every correct click, passing the
delta from core/difficulty.py.

Design note:
    The factory owns the random source. Passing a seeded random.Random
    (or any object with random(), randrange()) makes every level
    reproducible, which is what the tests rely on.
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass

from settings import GRID_CELLS
from utils.color import HSLColor, generate_base_color, derive_shifted_color

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Level:
    """One immutable grid instance.

    Attributes:
        base:         The color every non-target tile carries.
        colors:       Tuple of GRID_CELLS colors in row-major order.
        target_index: Index of the odd tile, 0-based.
        delta:        Lightness difference requested for the target.
    """

    base: HSLColor
    colors: tuple[HSLColor, ...]
    target_index: int
    delta: float

    def is_target(self, index: int) -> bool:
        return index == self.target_index

    @property
    def effective_delta(self) -> float:
        """Lightness difference actually visible after clamping."""
        return abs(self.colors[self.target_index].lightness - self.base.lightness)


class LevelFactory:
    """Builds levels from an injectable random source.

    Attributes:
        _rng: random.Random-compatible object used for every draw.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def generate(self, delta: float) -> Level:
        """Return a fresh level at the given difficulty.

        Draw order is fixed: base color, target index, then the shift
        direction.

        Args:
            delta: Lightness difference for the target tile, in percent.

        Returns:
            A new Level.

        Raises:
            ValueError: If delta is not positive. The engine always passes
                        a value from next_delta(), which never is.
        """
        if delta <= 0:
            raise ValueError(f"delta must be positive, got {delta!r}")

        base = generate_base_color(self._rng)
        colors = [base] * GRID_CELLS
        target = self._rng.randrange(GRID_CELLS)
        colors[target] = derive_shifted_color(base, delta, self._rng)

        level = Level(base=base, colors=tuple(colors), target_index=target, delta=delta)
        logger.debug(
            "generated level: base=%s target=%d delta=%.2f effective=%.2f",
            base.to_css(), target, delta, level.effective_delta,
        )
        return level
