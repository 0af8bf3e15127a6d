# eventdispatcher/config.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias

QueueRelease: TypeAlias = Literal["fifo", "lifo"]


@dataclass(frozen=True)
class DispatchConfig:
    """
    Behavior knobs for an EventDispatcher. These are defaults; callers can override.

    stop_interrupts_listeners:
      - True: stop_propagation() skips the remaining listeners on this dispatcher
        and suppresses bubbling
      - False: stop_propagation() only suppresses bubbling
    queue_release:
      - "fifo": queued events are released in the order they were queued
      - "lifo": most recently queued first (legacy stack order)
    """
    default_delay_ms: int = 1000
    stop_interrupts_listeners: bool = True
    queue_release: QueueRelease = "fifo"

    def __post_init__(self) -> None:
        if self.default_delay_ms < 0:
            raise ValueError("default_delay_ms must be >= 0")
        if self.queue_release not in ("fifo", "lifo"):
            raise ValueError(f"queue_release must be 'fifo' or 'lifo', got {self.queue_release!r}")


DEFAULT_CONFIG = DispatchConfig()
