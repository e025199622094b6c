"""
Pytest configuration and fixtures for xair_osc tests.

The fakes stand in for the UDP socket, the client and the clock so the
protocol logic can be exercised without a network or real waiting.
"""

import asyncio
from typing import Any, Dict, List, Optional, Tuple

import pytest

from xair_osc.codec import tag_value
from xair_osc.errors import SendError
from xair_osc.registry import ListenerRegistry
from xair_osc.schemas import OscMessage, RemoteInfo


class FakeOscSocket:
    """
    In-memory OscSocket.

    Scripted replies for an address are delivered on the next loop
    iteration after a message is sent to that address.
    """

    def __init__(self):
        self.registry = ListenerRegistry()
        self.sent: List[Tuple[OscMessage, int, str]] = []
        self.broadcast: List[bool] = []
        self.replies: Dict[str, List[Tuple[OscMessage, RemoteInfo]]] = {}
        self.send_error: Optional[Exception] = None
        self.closed = False

    def script(self, message: OscMessage, sender: RemoteInfo) -> None:
        self.replies.setdefault(message.address, []).append((message, sender))

    def on(self, address, handler):
        self.registry.add(address, handler)

    def off(self, address, handler=None):
        self.registry.remove(address, handler)

    async def send(self, message: OscMessage, port: int, address: str) -> None:
        if self.send_error is not None:
            raise SendError(message.address, address, port, self.send_error)
        self.sent.append((message, port, address))
        loop = asyncio.get_running_loop()
        for reply, sender in self.replies.get(message.address, []):
            loop.call_soon(self.deliver, reply, sender)

    def deliver(self, message: OscMessage, sender: RemoteInfo) -> None:
        for handler in self.registry.handlers_for(message.address):
            handler(message, sender)

    def set_broadcast(self, flag: bool) -> None:
        self.broadcast.append(flag)

    async def close(self) -> None:
        self.closed = True


class RecordingClient:
    """OscClient double: answers queries from a value table and records sets."""

    def __init__(self):
        self.values: Dict[str, List[Any]] = {}
        self.queries: List[str] = []
        self.sets: List[Tuple[str, List[Any]]] = []

    def reply(self, address: str, *values: Any) -> None:
        self.values[address] = [tag_value(value) for value in values]

    async def query(self, address: str, timeout: Optional[float] = None) -> OscMessage:
        self.queries.append(address)
        return OscMessage(address, list(self.values[address]))

    async def set(self, address: str, args: List[Any]) -> None:
        self.sets.append((address, list(args)))

    async def close(self) -> None:
        pass


class InstantClock:
    """Clock that lets pending callbacks run and then returns immediately."""

    def __init__(self):
        self.slept: List[float] = []

    async def sleep(self, seconds: float) -> None:
        self.slept.append(seconds)
        for _ in range(5):
            await asyncio.sleep(0)


@pytest.fixture
def fake_socket():
    return FakeOscSocket()


@pytest.fixture
def recording_client():
    return RecordingClient()


@pytest.fixture
def instant_clock():
    return InstantClock()
