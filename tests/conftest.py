"""
Shared fixtures for the dispatcher tests.
"""

from typing import Callable, List, Tuple

import pytest

from eventdispatcher import Event, EventDispatcher, ManualScheduler


class Recorder:
    """Collects (label, event type, current target) for every listener call."""

    def __init__(self):
        self.calls: List[Tuple[str, str, object]] = []

    def listener(self, label: str) -> Callable[[Event], None]:
        def _listener(event: Event) -> None:
            self.calls.append((label, event.type, event.current_target))

        return _listener

    @property
    def labels(self) -> List[str]:
        return [label for label, _, _ in self.calls]


@pytest.fixture
def clock():
    """Virtual-clock scheduler; nothing fires until advanced."""
    return ManualScheduler()


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def dispatcher(clock):
    return EventDispatcher(current_target="owner", scheduler=clock)
