"""
OSC over UDP transport.

One OscSocket owns one UDP socket. Inbound datagrams are decoded and
fanned out to every handler registered for the exact address; outbound
messages are encoded and handed to the OS in a single attempt.
"""

import asyncio
import logging
import socket
from typing import Optional, Tuple

from pythonosc import osc_bundle

from .codec import OscCodec
from .errors import BindError, SendError, UnsupportedPacketError
from .registry import Handler, ListenerRegistry
from .schemas import OscMessage, RemoteInfo

logger = logging.getLogger(__name__)


class _OscDatagramProtocol(asyncio.DatagramProtocol):
    """Bridges asyncio datagram callbacks into the owning OscSocket."""

    def __init__(self, owner: "OscSocket"):
        self._owner = owner
        # Set synchronously by the transport when sendto() fails
        self.last_error: Optional[Exception] = None

    def datagram_received(self, data: bytes, addr: Tuple[str, int]) -> None:
        self._owner._handle_datagram(data, addr)

    def error_received(self, exc: Exception) -> None:
        self.last_error = exc
        logger.warning(f"OSC socket error: {exc}")


class OscSocket:
    """
    Address-multiplexed OSC endpoint.

    Example:
        osc_socket = await create_osc_socket()
        osc_socket.on("/ch/01/mix/fader", handler)
        await osc_socket.send(OscMessage("/ch/01/mix/fader"), 10024, "192.168.1.20")
        await osc_socket.close()
    """

    def __init__(
        self,
        sock: Optional[socket.socket] = None,
        codec: Optional[OscCodec] = None,
        local_address: str = "0.0.0.0",
        local_port: int = 0,
    ):
        self._sock = sock or socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self._codec = codec or OscCodec()
        self._local_address = local_address
        self._local_port = local_port
        self._registry = ListenerRegistry()
        self._transport: Optional[asyncio.DatagramTransport] = None
        self._protocol: Optional[_OscDatagramProtocol] = None

    @property
    def registry(self) -> ListenerRegistry:
        return self._registry

    @property
    def local_address(self) -> Tuple[str, int]:
        return self._sock.getsockname()[:2]

    @property
    def is_bound(self) -> bool:
        return self._transport is not None

    async def bind(self) -> "OscSocket":
        """
        Acquire the UDP endpoint and start receiving.

        Raises:
            BindError: If the socket cannot be bound or attached to the loop
        """
        loop = asyncio.get_running_loop()
        try:
            if self._sock.getsockname()[1] == 0:
                self._sock.bind((self._local_address, self._local_port))
            self._transport, self._protocol = await loop.create_datagram_endpoint(
                lambda: _OscDatagramProtocol(self),
                sock=self._sock,
            )
        except OSError as exc:
            self._sock.close()
            raise BindError(
                f"Cannot bind OSC socket to {self._local_address}:{self._local_port}: {exc}"
            ) from exc
        host, port = self.local_address
        logger.info(f"OSC socket bound on {host}:{port}")
        return self

    async def send(self, message: OscMessage, port: int, address: str) -> None:
        """
        Encode and transmit a message.

        Only errors the OS reports immediately are raised. If the socket
        would block, the datagram is buffered by the transport and a later
        failure is only logged by error_received().

        Raises:
            SendError: If the OS rejects the datagram
        """
        if self._transport is None or self._protocol is None:
            raise SendError(message.address, address, port, RuntimeError("socket is not bound"))
        dgram = self._codec.encode(message)
        self._protocol.last_error = None
        self._transport.sendto(dgram, (address, port))
        error, self._protocol.last_error = self._protocol.last_error, None
        if error is not None:
            raise SendError(message.address, address, port, error) from error
        logger.debug(f"OSC sent {message.address} {message.args} -> {address}:{port}")

    def set_broadcast(self, flag: bool) -> None:
        self._sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1 if flag else 0)

    def on(self, address: str, handler: Handler) -> None:
        self._registry.add(address, handler)

    def off(self, address: str, handler: Optional[Handler] = None) -> None:
        self._registry.remove(address, handler)

    async def close(self) -> None:
        """Release the OS socket."""
        if self._transport is not None:
            self._transport.close()
            self._transport = None
        else:
            self._sock.close()
        logger.info("OSC socket closed")

    def _handle_datagram(self, data: bytes, addr: Tuple[str, int]) -> None:
        """Decode one datagram and dispatch it to the handlers of its address."""
        packet = self._codec.decode(data)
        if isinstance(packet, osc_bundle.OscBundle):
            raise UnsupportedPacketError(
                f"Non-message OSC packet is not supported. Received a bundle from {addr[0]}:{addr[1]}"
            )
        handlers = self._registry.handlers_for(packet.address)
        if not handlers:
            logger.debug(f"No listener for {packet.address}, dropping")
            return
        sender = RemoteInfo(address=addr[0], port=addr[1])
        for handler in handlers:
            handler(packet, sender)


async def create_osc_socket(
    local_address: str = "0.0.0.0",
    local_port: int = 0,
    codec: Optional[OscCodec] = None,
) -> OscSocket:
    """Create a reusable-address UDP socket and bind an OscSocket on it."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    osc_socket = OscSocket(sock=sock, codec=codec, local_address=local_address, local_port=local_port)
    return await osc_socket.bind()
