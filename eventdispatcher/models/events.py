# eventdispatcher/models/events.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag
from typing import Optional

from .core import EventType, now_millis


class EventFlags(IntFlag):
    NONE = 0
    PREVENT_DEFAULT = 0x01
    STOP_PROPAGATION = 0x02


@dataclass(frozen=True, eq=False)
class Event:
    """
    One occurrence, handed to every listener of its type.

    Descriptive fields are frozen. Only two things ever change, and only through
    the methods below:
      - current_target: stamped by whichever dispatcher is processing the event
      - suppression flags: set-only, they are never cleared

    The same instance travels through bubbling, deferred and queued dispatches,
    so anything a listener sets is visible to everyone downstream.
    Equality is identity.
    """
    type: EventType
    origin: Optional[object] = None
    bubbles: bool = False
    cancelable: bool = False

    timestamp: int = field(init=False, default_factory=now_millis)
    current_target: Optional[object] = field(init=False, default=None, repr=False)
    _flags: EventFlags = field(init=False, default=EventFlags.NONE, repr=False)

    @property
    def flags(self) -> EventFlags:
        return self._flags

    def _set_flag(self, flag: EventFlags) -> None:
        object.__setattr__(self, "_flags", self._flags | flag)

    def _has_flag(self, flag: EventFlags) -> bool:
        return (self._flags & flag) == flag

    # --- Dispatcher hook --------------------------------------------------

    def set_current_target(self, target: Optional[object]) -> None:
        object.__setattr__(self, "current_target", target)

    # --- Suppression ------------------------------------------------------

    def prevent_default(self) -> None:
        """
        Cancel the default behavior tied to this event.
        No effect unless the event was created with cancelable=True.
        """
        if self.cancelable:
            self._set_flag(EventFlags.PREVENT_DEFAULT)

    def is_default_prevented(self) -> bool:
        return self._has_flag(EventFlags.PREVENT_DEFAULT)

    def stop_propagation(self) -> None:
        """
        Stop the event from reaching further listeners and parent dispatchers.
        Not gated by cancelable. Does not prevent the default behavior.
        """
        self._set_flag(EventFlags.STOP_PROPAGATION)

    def can_propagate(self) -> bool:
        return not self._has_flag(EventFlags.STOP_PROPAGATION)

    def is_propagation_stopped(self) -> bool:
        return not self.can_propagate()
