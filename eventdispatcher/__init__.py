# eventdispatcher/__init__.py
from __future__ import annotations

from .config import DEFAULT_CONFIG, DispatchConfig
from .dispatcher import EventDispatcher, Listener
from .errors import EventDispatcherError, InvalidListenerError, SchedulerUnavailableError
from .models import Event, EventFlags, EventType
from .systems.scheduling import AsyncioScheduler, ManualScheduler, Scheduler

__all__ = [
    "DEFAULT_CONFIG",
    "DispatchConfig",
    "EventDispatcher",
    "Listener",
    "EventDispatcherError",
    "InvalidListenerError",
    "SchedulerUnavailableError",
    "Event",
    "EventFlags",
    "EventType",
    "AsyncioScheduler",
    "ManualScheduler",
    "Scheduler",
]
