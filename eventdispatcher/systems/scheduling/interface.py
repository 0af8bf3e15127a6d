# eventdispatcher/systems/scheduling/interface.py
from __future__ import annotations

from typing import Callable, Hashable, Protocol, TypeAlias

TimerCallback: TypeAlias = Callable[[], None]
TimerHandle: TypeAlias = Hashable


class Scheduler(Protocol):
    """
    The timer capability a dispatcher needs for deferred dispatch.

    - ManualScheduler: virtual clock, fires only when advanced (tests, sync hosts)
    - AsyncioScheduler: real timers on an asyncio event loop
    - Future: any host loop (GUI toolkit, game loop) that can schedule-after + cancel

    Callbacks run on the host's single logical thread; a scheduler never runs
    two callbacks concurrently.
    """

    def call_later(self, delay_ms: int, callback: TimerCallback) -> TimerHandle: ...

    def cancel(self, handle: TimerHandle) -> None: ...
