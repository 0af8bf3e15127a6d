# eventdispatcher/errors.py
from __future__ import annotations


class EventDispatcherError(Exception):
    """Base class for every error raised by the dispatch core."""


class InvalidListenerError(EventDispatcherError, TypeError):
    """A listener passed to add_event_listener() is not callable."""


class SchedulerUnavailableError(EventDispatcherError, RuntimeError):
    """
    A deferred dispatch was requested but the scheduler has nothing to run on
    (ex: AsyncioScheduler with no running loop).
    """
