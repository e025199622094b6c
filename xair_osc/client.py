"""
Request/response OSC client for X Air consoles.

Every readable parameter address doubles as its own readback address:
sending an argument-less message to it makes the console reply on the
same address. query() builds on that; set() is fire-and-forget.
"""

import asyncio
import logging
from typing import Any, List, Optional

from .errors import QueryTimeoutError
from .schemas import OscMessage, RemoteInfo
from .transport import OscSocket

logger = logging.getLogger(__name__)

DEFAULT_MIXER_PORT = 10024


class OscClient:
    """
    OSC client bound to one console.

    Attributes:
        host: Console IP address
        port: Console OSC port (10024 on X Air)
    """

    def __init__(self, socket: OscSocket, host: str, port: int = DEFAULT_MIXER_PORT):
        self._socket = socket
        self.host = host
        self.port = port

    async def query(self, address: str, timeout: Optional[float] = None) -> OscMessage:
        """
        Ask the console for the current value at an address.

        Resolves with the first message received on that address; later
        replies are not observed by this call.

        Args:
            address: OSC address to read
            timeout: Seconds to wait; None waits indefinitely

        Raises:
            SendError: If the request cannot be sent
            QueryTimeoutError: If timeout elapses without a reply
        """
        loop = asyncio.get_running_loop()
        reply: asyncio.Future = loop.create_future()

        def on_reply(message: OscMessage, sender: RemoteInfo) -> None:
            self._socket.off(address, on_reply)
            if not reply.done():
                reply.set_result(message)

        self._socket.on(address, on_reply)
        try:
            await self._socket.send(OscMessage(address), self.port, self.host)
            if timeout is None:
                return await reply
            return await asyncio.wait_for(reply, timeout)
        except asyncio.TimeoutError:
            raise QueryTimeoutError(f"No reply on {address} from {self.host}:{self.port} within {timeout}s")
        finally:
            self._socket.off(address, on_reply)

    async def set(self, address: str, args: List[Any]) -> None:
        """Send a value to the console without waiting for a reply."""
        await self._socket.send(OscMessage(address, list(args)), self.port, self.host)

    async def close(self) -> None:
        await self._socket.close()
