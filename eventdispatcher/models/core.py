# eventdispatcher/models/core.py
from __future__ import annotations

import time
from typing import TypeAlias

EventType: TypeAlias = str


def now_millis() -> int:
    """Wall-clock time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000
