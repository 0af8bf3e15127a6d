# eventdispatcher/systems/scheduling/__init__.py
from __future__ import annotations

from .asyncio_loop import AsyncioScheduler
from .interface import Scheduler, TimerCallback, TimerHandle
from .manual import ManualScheduler, ManualTimer

__all__ = [
    "AsyncioScheduler",
    "ManualScheduler",
    "ManualTimer",
    "Scheduler",
    "TimerCallback",
    "TimerHandle",
]
