"""
Signal Frontier — Tick Scheduler
Drives Engine.tick on a fixed cadence, decoupled from any real timer.

The deadline is re-armed only after a tick returns, so ticks never
overlap and a stalled host (a suspended process, a slow handler) resumes
with a single tick rather than a burst of catch-up ticks.
"""

from typing import Callable, Optional
import logging
import threading

from .engine import Engine

logger = logging.getLogger(__name__)


class TickScheduler:
    def __init__(
        self,
        engine: Engine,
        interval_ms: Optional[float] = None,
        clock: Optional[Callable[[], float]] = None,
    ):
        self.engine = engine
        self.interval_ms = interval_ms if interval_ms is not None else engine.config.tick_ms
        self.clock = clock or engine.clock
        self.next_due: Optional[float] = None
        self.ticks_run = 0

        if self.interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {self.interval_ms}")

    def advance(self, now: float) -> bool:
        """
        Run at most one tick if the deadline has passed.

        The first call only arms the deadline.

        Returns:
            True if a tick ran.
        """
        if self.next_due is None:
            self.next_due = now + self.interval_ms
            return False
        if now < self.next_due:
            return False

        self.engine.tick(now)
        self.ticks_run += 1
        self.next_due = now + self.interval_ms
        return True

    def run(self, stop_event: threading.Event):
        """Block, ticking on the wall clock until ``stop_event`` is set."""
        logger.info(f"Scheduler started ({self.interval_ms:.0f} ms cadence)")
        while not stop_event.is_set():
            self.advance(self.clock())
            wait_ms = max(0.0, self.next_due - self.clock())
            stop_event.wait(wait_ms / 1000.0)
        logger.info(f"Scheduler stopped after {self.ticks_run} ticks")
