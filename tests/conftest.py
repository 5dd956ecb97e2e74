import asyncio
from typing import Any, Callable, Dict, Optional

import pytest
from voxlife.messaging.bus import bus as messaging_bus
from voxlife.runtime.bus import MessageBus
from voxlife.runtime.events import Event


class SpySubscriber:
    """A test utility to collect events from a MessageBus."""

    def __init__(self, bus: MessageBus):
        self.events = []
        bus.subscribe(Event, self.collect)

    def collect(self, event: Event):
        self.events.append(event)

    def events_of_type(self, event_type):
        """Returns a list of all events of a specific type."""
        return [e for e in self.events if isinstance(e, event_type)]

    def event_names(self):
        return [type(e).__name__ for e in self.events]


class GatedExecutor:
    """
    Runs submitted callables inline, but only once the test opens the gate
    of that call. Calls are numbered from 0 in the order they start, which
    for the correlator is the order of `submit`.
    """

    def __init__(self):
        self.calls = 0
        self.shut_down = False
        self._gates: Dict[int, asyncio.Event] = {}
        self._errors: Dict[int, BaseException] = {}

    def _gate(self, n: int) -> asyncio.Event:
        if n not in self._gates:
            self._gates[n] = asyncio.Event()
        return self._gates[n]

    def release(self, n: int, error: Optional[BaseException] = None):
        if error is not None:
            self._errors[n] = error
        self._gate(n).set()

    async def execute(self, func: Callable[..., Any], *args: Any) -> Any:
        n = self.calls
        self.calls += 1
        await self._gate(n).wait()
        if n in self._errors:
            raise self._errors[n]
        return func(*args)

    def shutdown(self) -> None:
        self.shut_down = True


class InlineExecutor:
    """Runs submitted callables immediately on the event loop."""

    def __init__(self):
        self.calls = 0

    async def execute(self, func: Callable[..., Any], *args: Any) -> Any:
        self.calls += 1
        return func(*args)

    def shutdown(self) -> None:
        pass


@pytest.fixture
def bus_and_spy():
    """Provides a MessageBus instance and an attached SpySubscriber."""
    bus = MessageBus()
    spy = SpySubscriber(bus)
    return bus, spy


@pytest.fixture
def gated_executor():
    return GatedExecutor()


@pytest.fixture
def inline_executor():
    return InlineExecutor()


@pytest.fixture(autouse=True)
def restore_messaging_renderer():
    """Keeps a renderer installed by one test from leaking into the next."""
    previous = messaging_bus._renderer
    yield
    messaging_bus._renderer = previous
