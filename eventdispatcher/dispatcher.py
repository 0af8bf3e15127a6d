# eventdispatcher/dispatcher.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Set

from .config import DEFAULT_CONFIG, DispatchConfig
from .errors import InvalidListenerError
from .models import Event, EventType
from .systems.scheduling import AsyncioScheduler, Scheduler, TimerHandle

logger = logging.getLogger(__name__)

Listener = Callable[[Event], None]


@dataclass(frozen=True, eq=False)
class EventDispatcher:
    """
    Synchronous fan-out of Events to per-type listeners.

    One dispatcher is created per owning object and lives as long as it does.
    current_target, parent, scheduler and config are fixed at construction;
    listener, timer and queue state only change through the methods below.

    dispatch_event() order:
      1) stamp current_target onto the event
      2) run listeners of event.type in registration order
      3) release events queued on event.type
      4) bubble the same instance to parent (if bubbles and not stopped)

    Listener errors are not caught: they abort the rest of the pass, including
    queue release and bubbling, and surface to whoever called dispatch_event().

    Deferred dispatch goes through `scheduler`. The default AsyncioScheduler
    raises SchedulerUnavailableError when no asyncio loop is running, so
    synchronous hosts should pass a ManualScheduler (or their own Scheduler).
    """

    current_target: Optional[object] = None
    parent: Optional["EventDispatcher"] = None
    scheduler: Scheduler = field(default_factory=AsyncioScheduler, repr=False)
    config: DispatchConfig = field(default=DEFAULT_CONFIG, repr=False)

    _listeners: Dict[EventType, List[Listener]] = field(init=False, default_factory=dict, repr=False)
    _pending_timers: Set[TimerHandle] = field(init=False, default_factory=set, repr=False)
    _queued_events: Dict[EventType, List[Event]] = field(init=False, default_factory=dict, repr=False)

    # --- Listener registry ------------------------------------------------

    def add_event_listener(self, type: EventType, listener: Listener) -> None:
        """
        Register `listener` for events of `type`. Registering the same callable
        twice means it runs twice per dispatch.
        """
        if not callable(listener):
            raise InvalidListenerError(f"Listener for {type!r} is not callable: {listener!r}")
        self._listeners.setdefault(type, []).append(listener)
        logger.debug("listener added type=%s count=%d", type, len(self._listeners[type]))

    def remove_event_listener(self, type: EventType, listener: Listener) -> None:
        """
        Remove the first registration of `listener` for `type`. Unknown pairs are ignored.

        Matching uses == rather than identity, so a re-fetched bound method
        (obj.method) finds its registration. Callables with a custom __eq__ match
        by that __eq__.
        """
        listeners = self._listeners.get(type)
        if not listeners:
            return

        for i, registered in enumerate(listeners):
            if registered == listener:
                del listeners[i]
                logger.debug("listener removed type=%s count=%d", type, len(listeners))
                break

        if not listeners:
            del self._listeners[type]

    def remove_all_event_listeners(self, type: Optional[EventType] = None) -> None:
        if type is None:
            self._listeners.clear()
        else:
            self._listeners.pop(type, None)

    def has_event_listener(self, type: EventType) -> bool:
        return bool(self._listeners.get(type))

    def get_event_listeners(self, type: EventType) -> List[Listener]:
        """
        Listeners for `type` in call order. Always a copy: changing it does not
        touch the registry.
        """
        return list(self._listeners.get(type, ()))

    # --- Dispatch ---------------------------------------------------------

    def dispatch_event(self, event: Event) -> None:
        event.set_current_target(self.current_target)
        logger.debug("dispatch type=%s target=%r", event.type, self.current_target)

        # Iterate a snapshot so listeners can (un)register or re-dispatch safely.
        for listener in self.get_event_listeners(event.type):
            if self.config.stop_interrupts_listeners and not event.can_propagate():
                logger.debug("propagation stopped type=%s", event.type)
                break
            listener(event)

        self._release_queued(event.type)

        if event.bubbles and event.can_propagate() and self.parent is not None:
            logger.debug("bubble type=%s", event.type)
            self.parent.dispatch_event(event)

    # --- Deferred dispatch ------------------------------------------------

    def defer_event_dispatch(self, event: Event, delay_ms: Optional[int] = None) -> None:
        """
        Dispatch `event` after `delay_ms` (config.default_delay_ms if None).

        The event goes out from the scheduler's callback, never from this call,
        even with a delay of 0.
        """
        if delay_ms is None:
            delay_ms = self.config.default_delay_ms
        if delay_ms < 0:
            raise ValueError("delay_ms must be >= 0")

        handle: Optional[TimerHandle] = None

        def fire() -> None:
            self._pending_timers.discard(handle)
            self.dispatch_event(event)

        handle = self.scheduler.call_later(delay_ms, fire)
        self._pending_timers.add(handle)
        logger.debug("deferred type=%s delay=%dms pending=%d", event.type, delay_ms, len(self._pending_timers))

    def cancel_deferred_events(self) -> None:
        """Cancel every deferred dispatch that has not fired yet."""
        if self._pending_timers:
            logger.debug("cancelling %d deferred dispatch(es)", len(self._pending_timers))
        for handle in self._pending_timers:
            self.scheduler.cancel(handle)
        self._pending_timers.clear()

    def has_deferred_events(self) -> bool:
        return bool(self._pending_timers)

    # --- Queued dispatch --------------------------------------------------

    def queue_event_dispatch(self, trigger_type: EventType, event: Event) -> None:
        """
        Hold `event` until an event of `trigger_type` is dispatched here.
        All events held on one trigger are released together, once.
        """
        self._queued_events.setdefault(trigger_type, []).append(event)
        logger.debug("queued type=%s on trigger=%s", event.type, trigger_type)

    def cancel_queued_events(self) -> None:
        """Drop every queued event without dispatching it."""
        self._queued_events.clear()

    def has_queued_events(self, trigger_type: Optional[EventType] = None) -> bool:
        if trigger_type is None:
            return bool(self._queued_events)
        return bool(self._queued_events.get(trigger_type))

    def _release_queued(self, trigger_type: EventType) -> None:
        # Pop first: a released event of the same type must not release itself again.
        bucket = self._queued_events.pop(trigger_type, None)
        if not bucket:
            return

        if self.config.queue_release == "lifo":
            bucket.reverse()

        logger.debug("releasing %d queued event(s) on trigger=%s", len(bucket), trigger_type)
        started = 0
        try:
            for queued in bucket:
                started += 1
                self.dispatch_event(queued)
        finally:
            # A raising listener leaves the events not yet started queued, ahead of
            # anything queued during release. The failing event counts as released.
            remainder = bucket[started:]
            if remainder:
                if self.config.queue_release == "lifo":
                    remainder.reverse()
                self._queued_events[trigger_type] = remainder + self._queued_events.get(trigger_type, [])
