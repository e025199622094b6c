"""
Console object model: channels, buses and the main LR strip.

Channel indices are zero-padded to two digits on the wire (/ch/01);
bus indices are not (/bus/1).
"""

import logging
from typing import Optional, Union

from .client import DEFAULT_MIXER_PORT, OscClient
from .discovery import DiscoveredMixer
from .dynamics import Compressor, Gate
from .equalizer import Equalizer
from .errors import ParameterValidationError
from .groups import DCAGroup, MuteGroup
from .mapper import STRING_PARAMETER_CONFIG, create_literal_parameter_config
from .mix import Mix
from .models import MixerModel
from .parameter import OscParameterFactory
from .preamp import ChannelPreamp
from .transport import create_osc_socket

logger = logging.getLogger(__name__)

STRIP_COLORS = (
    "Black", "Red", "Green", "Yellow", "Blue", "Magenta", "Cyan", "White",
    "Black Inv", "Red Inv", "Green Inv", "Yellow Inv", "Blue Inv", "Magenta Inv", "Cyan Inv", "White Inv",
)

COLOR_PARAMETER_CONFIG = create_literal_parameter_config(STRIP_COLORS, "color")


class StripConfig:
    """Scribble strip name and color at {base}/config."""

    def __init__(self, client: OscClient, base_path: str):
        factory = OscParameterFactory(client)
        self.name = factory.create(f"{base_path}/config/name", STRING_PARAMETER_CONFIG)
        self.color = factory.create(f"{base_path}/config/color", COLOR_PARAMETER_CONFIG)


class Channel:
    """Input channel strip at /ch/NN."""

    def __init__(self, client: OscClient, number: int):
        self.number = number
        self.base_path = f"/ch/{number:02d}"
        self.config = StripConfig(client, self.base_path)
        self.preamp = ChannelPreamp(client, number)
        self.gate = Gate(client, self.base_path)
        self.compressor = Compressor(client, self.base_path)
        self.equalizer = Equalizer(client, self.base_path, band_count=4)
        self.mix = Mix(client, self.base_path)
        self.dca_group = DCAGroup(client, self.base_path)
        self.mute_group = MuteGroup(client, self.base_path)


class Bus:
    """Mix bus strip at /bus/N."""

    def __init__(self, client: OscClient, number: int):
        self.number = number
        self.base_path = f"/bus/{number}"
        self.config = StripConfig(client, self.base_path)
        self.compressor = Compressor(client, self.base_path)
        self.equalizer = Equalizer(client, self.base_path, band_count=6)
        self.mix = Mix(client, self.base_path)
        self.dca_group = DCAGroup(client, self.base_path)
        self.mute_group = MuteGroup(client, self.base_path)


class MainLR:
    """Main stereo strip at /lr."""

    def __init__(self, client: OscClient):
        self.base_path = "/lr"
        self.config = StripConfig(client, self.base_path)
        self.compressor = Compressor(client, self.base_path)
        self.equalizer = Equalizer(client, self.base_path, band_count=6)
        self.mix = Mix(client, self.base_path, has_lr_assignment=False)


class Mixer:
    """
    Entry point to one console.

    Example:
        mixer = await connect_to_mixer("192.168.1.20", model="XR18")
        await mixer.channel(1).mix.fader.update_unit(-10, "decibels")
        await mixer.close()
    """

    def __init__(self, client: OscClient, model: MixerModel):
        self.client = client
        self.model = MixerModel(model)

    def channel(self, number: int) -> Channel:
        _check_index("channel", number, self.model.channel_count, self.model)
        return Channel(self.client, number)

    def bus(self, number: int) -> Bus:
        _check_index("bus", number, self.model.bus_count, self.model)
        return Bus(self.client, number)

    def main_lr(self) -> MainLR:
        return MainLR(self.client)

    async def close(self) -> None:
        await self.client.close()


def _check_index(kind: str, number: int, count: int, model: MixerModel) -> None:
    if isinstance(number, bool) or not isinstance(number, int) or not 1 <= number <= count:
        raise ParameterValidationError(f"{model.value} has {kind}s 1..{count}, got {number!r}")


async def connect_to_mixer(
    target: Union[str, DiscoveredMixer],
    model: Optional[Union[str, MixerModel]] = None,
    port: int = DEFAULT_MIXER_PORT,
    local_address: str = "0.0.0.0",
    local_port: int = 0,
) -> Mixer:
    """
    Open a socket and return a Mixer for a console.

    Args:
        target: Console IP address, or a DiscoveredMixer from discovery
        model: Required when target is an address
        port: Console OSC port, ignored for a DiscoveredMixer
    """
    if isinstance(target, DiscoveredMixer):
        host, port, model = target.address, target.port, target.model
    else:
        host = target
    if model is None:
        raise ParameterValidationError(f"A mixer model is required to connect to {host}")
    osc_socket = await create_osc_socket(local_address, local_port)
    logger.info(f"Connected to {MixerModel(model).value} at {host}:{port}")
    return Mixer(OscClient(osc_socket, host, port), MixerModel(model))
