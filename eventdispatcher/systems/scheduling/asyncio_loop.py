# eventdispatcher/systems/scheduling/asyncio_loop.py
from __future__ import annotations

import asyncio
from typing import Optional

from ...errors import SchedulerUnavailableError
from .interface import Scheduler, TimerCallback


class AsyncioScheduler(Scheduler):
    """
    Real timers on an asyncio event loop.

    With no explicit loop, the loop running at call_later() time is used, so a
    dispatcher can be built outside the loop and still defer from inside it.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    def _resolve_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is not None:
            return self._loop
        try:
            return asyncio.get_running_loop()
        except RuntimeError as e:
            raise SchedulerUnavailableError(
                "Deferred dispatch needs a running asyncio loop (or inject another Scheduler)."
            ) from e

    def call_later(self, delay_ms: int, callback: TimerCallback) -> asyncio.TimerHandle:
        if delay_ms < 0:
            raise ValueError("delay_ms must be >= 0")
        return self._resolve_loop().call_later(delay_ms / 1000.0, callback)

    def cancel(self, handle: asyncio.TimerHandle) -> None:
        handle.cancel()
