"""
Broadcast discovery of X Air consoles.

A single /xinfo probe is broadcast to port 10024; every console on the
segment answers on /xinfo with (ip, name, model, firmware). Replies are
collected for a fixed window and deduplicated by sender address.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import List, Optional

from .clock import Clock
from .errors import SchemaError, SendError
from .models import MixerModel, is_mixer_model
from .schemas import OscMessage, RemoteInfo, argument_values
from .transport import OscSocket, create_osc_socket

logger = logging.getLogger(__name__)

DISCOVERY_ADDRESS = "/xinfo"
DISCOVERY_PORT = 10024
DEFAULT_BROADCAST_ADDRESS = "255.255.255.255"
DEFAULT_DISCOVERY_TIMEOUT = 5.0
MODEL_ARGUMENT_INDEX = 2


@dataclass(frozen=True)
class DiscoveredMixer:
    """Connection information for a console that answered discovery."""
    address: str
    model: MixerModel
    port: int = DISCOVERY_PORT


class MixerDiscoverer:
    """
    Finds consoles on the local network.

    The socket is consumed: it is closed when discover() finishes,
    successfully or not.
    """

    def __init__(self, socket: OscSocket, clock: Optional[Clock] = None):
        self._socket = socket
        self._clock = clock or Clock()

    async def discover(
        self,
        timeout: float = DEFAULT_DISCOVERY_TIMEOUT,
        broadcast_address: str = DEFAULT_BROADCAST_ADDRESS,
    ) -> List[DiscoveredMixer]:
        """
        Broadcast a probe and collect replies for `timeout` seconds.

        Returns:
            Consoles in the order they first answered

        Raises:
            SendError: If the probe cannot be sent
            SchemaError: If any reply has a malformed argument list
        """
        loop = asyncio.get_running_loop()
        discovered: List[DiscoveredMixer] = []
        failure: asyncio.Future = loop.create_future()

        def on_reply(message: OscMessage, sender: RemoteInfo) -> None:
            if failure.done():
                return
            if any(mixer.address == sender.address for mixer in discovered):
                return
            try:
                values = argument_values(message.args)
                if len(values) <= MODEL_ARGUMENT_INDEX:
                    raise SchemaError(
                        f"Discovery reply from {sender.address} has {len(values)} arguments, "
                        f"expected at least {MODEL_ARGUMENT_INDEX + 1}"
                    )
            except SchemaError as exc:
                failure.set_exception(exc)
                raise
            model = str(values[MODEL_ARGUMENT_INDEX])
            if not is_mixer_model(model):
                logger.debug(f"Ignoring {sender.address}: unknown model {model!r}")
                return
            discovered.append(DiscoveredMixer(address=sender.address, model=MixerModel(model), port=sender.port))
            logger.info(f"Discovered {model} at {sender.address}:{sender.port}")

        self._socket.on(DISCOVERY_ADDRESS, on_reply)
        self._socket.set_broadcast(True)
        try:
            await self._socket.send(OscMessage(DISCOVERY_ADDRESS), DISCOVERY_PORT, broadcast_address)
        except SendError:
            self._socket.off(DISCOVERY_ADDRESS, on_reply)
            await self._socket.close()
            raise
        self._socket.set_broadcast(False)

        window = asyncio.ensure_future(self._clock.sleep(timeout))
        try:
            await asyncio.wait({window, failure}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            window.cancel()
            self._socket.off(DISCOVERY_ADDRESS, on_reply)
            await self._socket.close()

        if failure.done():
            raise failure.exception()
        logger.info(f"Discovery finished: {len(discovered)} mixer(s)")
        return discovered


async def discover_mixers(
    timeout: float = DEFAULT_DISCOVERY_TIMEOUT,
    broadcast_address: str = DEFAULT_BROADCAST_ADDRESS,
    clock: Optional[Clock] = None,
) -> List[DiscoveredMixer]:
    """Discover consoles using a fresh socket."""
    osc_socket = await create_osc_socket()
    return await MixerDiscoverer(osc_socket, clock).discover(timeout, broadcast_address)
