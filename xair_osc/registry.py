"""
Address-keyed listener registry owned by the OSC transport.

All mutation and dispatch happen on the event loop thread, so the
registry needs no locking.
"""

from typing import Callable, Dict, List, Optional, Tuple

from .schemas import OscMessage, RemoteInfo

Handler = Callable[[OscMessage, RemoteInfo], None]


class ListenerRegistry:
    """Map from exact OSC address to the handlers subscribed to it."""

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Handler]] = {}

    def add(self, address: str, handler: Handler) -> None:
        handlers = self._listeners.setdefault(address, [])
        if not any(existing is handler for existing in handlers):
            handlers.append(handler)

    def remove(self, address: str, handler: Optional[Handler] = None) -> None:
        """
        Remove one handler, or every handler when none is given.

        Unknown addresses and handlers are ignored.
        """
        handlers = self._listeners.get(address)
        if handlers is None:
            return
        if handler is None:
            del self._listeners[address]
            return
        remaining = [existing for existing in handlers if existing is not handler]
        if remaining:
            self._listeners[address] = remaining
        else:
            del self._listeners[address]

    def handlers_for(self, address: str) -> Tuple[Handler, ...]:
        """Snapshot of the handlers for an address at this instant."""
        return tuple(self._listeners.get(address, ()))

    @property
    def listener_count(self) -> int:
        return sum(len(handlers) for handlers in self._listeners.values())

    def __contains__(self, address: object) -> bool:
        return address in self._listeners

    def __len__(self) -> int:
        return len(self._listeners)
