"""
X Air OSC

Async OSC-over-UDP control library for Behringer X Air consoles
(XR12, XR16, XR18).

Features:
- UDP transport with per-address listener dispatch
- Query/set client on the console's readback convention
- Broadcast discovery via /xinfo
- Validated conversion between raw wire values and units (dB, Hz, ms, ...)
- Channel, bus and main LR object model, DCA and mute group bitmasks

Usage:
    import asyncio
    from xair_osc import discover_mixers, connect_to_mixer

    async def main():
        mixers = await discover_mixers(timeout=2.0)
        mixer = await connect_to_mixer(mixers[0])
        fader = mixer.channel(1).mix.fader
        print(await fader.fetch_unit("decibels"))
        await fader.update_unit(-10, "decibels")
        await mixer.close()

    asyncio.run(main())
"""

from .client import DEFAULT_MIXER_PORT, OscClient
from .codec import OscCodec
from .config import MixerSettings, load_settings, save_settings
from .discovery import DiscoveredMixer, MixerDiscoverer, discover_mixers
from .errors import (
    BindError,
    ConfigError,
    ParameterValidationError,
    ProtocolError,
    QueryTimeoutError,
    SchemaError,
    SendError,
    UnsupportedPacketError,
    XAirOscError,
)
from .groups import DCAGroup, MuteGroup
from .mixer import Bus, Channel, MainLR, Mixer, connect_to_mixer
from .models import MixerModel
from .parameter import OscParameter, OscParameterFactory
from .schemas import FloatArgument, IntegerArgument, OscMessage, RemoteInfo, StringArgument
from .transport import OscSocket, create_osc_socket

__version__ = "0.1.0"

__all__ = [
    # Transport and client
    "OscCodec",
    "OscSocket",
    "create_osc_socket",
    "OscClient",
    "DEFAULT_MIXER_PORT",
    # Messages
    "OscMessage",
    "RemoteInfo",
    "IntegerArgument",
    "FloatArgument",
    "StringArgument",
    # Discovery
    "DiscoveredMixer",
    "MixerDiscoverer",
    "discover_mixers",
    "MixerModel",
    # Parameters
    "OscParameter",
    "OscParameterFactory",
    "DCAGroup",
    "MuteGroup",
    # Console model
    "Mixer",
    "Channel",
    "Bus",
    "MainLR",
    "connect_to_mixer",
    # Settings
    "MixerSettings",
    "load_settings",
    "save_settings",
    # Errors
    "XAirOscError",
    "BindError",
    "SendError",
    "ProtocolError",
    "UnsupportedPacketError",
    "SchemaError",
    "ParameterValidationError",
    "QueryTimeoutError",
    "ConfigError",
]
