# eventdispatcher/systems/scheduling/manual.py
from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from .interface import Scheduler, TimerCallback

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class ManualTimer:
    """Handle returned by ManualScheduler.call_later()."""
    due_ms: int
    seq: int
    callback: TimerCallback = field(repr=False)
    cancelled: bool = False
    fired: bool = False

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)


class ManualScheduler(Scheduler):
    """
    Deterministic scheduler driven by a virtual millisecond clock.

    Nothing fires on its own: call advance() or run_pending(). Timers that are
    due fire in (due time, scheduling order) order, which makes deferred
    dispatch reproducible in tests without sleeping.
    """

    def __init__(self, start_ms: int = 0) -> None:
        self._now_ms = start_ms
        self._seq = itertools.count()
        self._heap: List[Tuple[int, int, ManualTimer]] = []

    @property
    def now_ms(self) -> int:
        return self._now_ms

    # --- Scheduler protocol -----------------------------------------------

    def call_later(self, delay_ms: int, callback: TimerCallback) -> ManualTimer:
        if delay_ms < 0:
            raise ValueError("delay_ms must be >= 0")
        timer = ManualTimer(due_ms=self._now_ms + delay_ms, seq=next(self._seq), callback=callback)
        heapq.heappush(self._heap, (timer.due_ms, timer.seq, timer))
        return timer

    def cancel(self, handle: ManualTimer) -> None:
        # Fired or already-cancelled timers stay as they are.
        if handle.active:
            handle.cancelled = True

    # --- Clock ------------------------------------------------------------

    def advance(self, ms: int) -> int:
        """
        Move the clock forward by `ms` and fire every timer that becomes due,
        including timers scheduled by callbacks inside the window.

        Returns the number of callbacks fired. A raising callback propagates;
        the clock stays at that timer's due time and later timers remain queued.
        """
        if ms < 0:
            raise ValueError("ms must be >= 0")
        target = self._now_ms + ms
        fired = 0

        while self._heap and self._heap[0][0] <= target:
            due_ms, _, timer = heapq.heappop(self._heap)
            if not timer.active:
                continue
            self._now_ms = due_ms
            timer.fired = True
            fired += 1
            timer.callback()

        self._now_ms = target
        if fired:
            logger.debug("ManualScheduler fired %d timer(s), now=%dms", fired, self._now_ms)
        return fired

    def run_pending(self) -> int:
        """Fire everything already due without moving the clock."""
        return self.advance(0)

    def pending_count(self) -> int:
        return sum(1 for _, _, t in self._heap if t.active)
