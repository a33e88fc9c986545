"""
core/timer.py — Frame-driven tick driver for Chroma Vision.

The pygame loop hands over frame time in seconds; TickDriver turns it
into whole-interval ticks (one per second by default). It owns only its
own accumulator. It does not touch score or time remaining, which are
game.py's business.

Usage:
    driver = TickDriver()
    driver.start()

    # each frame:
    driver.update(dt, on_tick=game.tick)

    # session ended:
    driver.stop()
"""

from typing import Callable

from settings import TICK_INTERVAL_S


class TickDriver:
    """Emits one tick per full interval of accumulated frame time.

    Attributes:
        interval:  Seconds between ticks.
        _elapsed:  Seconds accumulated since the last tick.
        _running:  True between start() and stop().
    """

    def __init__(self, interval: float = TICK_INTERVAL_S) -> None:
        self.interval: float = interval
        self._elapsed: float = 0.0
        self._running: bool  = False

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        """Begin ticking from a full interval.

        A driver that is already running is stopped first, so a restart
        never inherits a partial second from the previous run.
        """
        self.stop()
        self._elapsed = 0.0
        self._running = True

    def stop(self) -> None:
        """Stop ticking and drop any partial interval. Safe to call twice."""
        self._running = False
        self._elapsed = 0.0

    def update(self, dt: float, on_tick: Callable[[], None]) -> int:
        """Advance by dt seconds, calling on_tick for each full interval.

        running is re-checked before every call, so an on_tick that stops
        the driver (session over) suppresses any ticks still owed from
        the same frame.

        Args:
            dt:      Seconds since the last frame.
            on_tick: Callback invoked once per tick.

        Returns:
            Number of ticks delivered.
        """
        if not self._running:
            return 0

        self._elapsed += dt
        delivered = 0
        while self._running and self._elapsed >= self.interval:
            self._elapsed -= self.interval
            delivered += 1
            on_tick()
        return delivered

    def fraction(self) -> float:
        """Return progress through the current interval, 0.0–1.0."""
        if not self._running or self.interval <= 0:
            return 0.0
        return min(1.0, self._elapsed / self.interval)


def fill(time_remaining: float, total: float) -> float:
    """Return remaining time as a fraction of total, for the timer bar.

    Returns:
        Float in [0.0, 1.0]. 0.0 when total is not positive.
    """
    if total <= 0:
        return 0.0
    return max(0.0, min(1.0, time_remaining / total))
