# eventdispatcher/models/__init__.py
from __future__ import annotations

from .core import EventType, now_millis
from .events import Event, EventFlags

__all__ = [
    "EventType",
    "now_millis",
    "Event",
    "EventFlags",
]
