"""Input channel preamp and head amp."""

from .client import OscClient
from .mapper import (
    ON_OFF_PARAMETER_CONFIG,
    create_linear_parameter_config,
    create_logarithmic_parameter_config,
)
from .parameter import OscParameterFactory


class ChannelPreamp:
    """
    Preamp of input channel NN.

    Low cut, polarity and USB return live under /ch/NN/preamp; gain and
    phantom power belong to the head amp at /headamp/NN.
    """

    def __init__(self, client: OscClient, channel: int):
        number = f"{channel:02d}"
        address = f"/ch/{number}/preamp"
        headamp = f"/headamp/{number}"
        factory = OscParameterFactory(client)
        self.low_cut_enabled = factory.create(f"{address}/hpon", ON_OFF_PARAMETER_CONFIG)
        self.low_cut_frequency = factory.create(
            f"{address}/hpf", create_logarithmic_parameter_config(20, 400, "hertz")
        )
        self.polarity_inverted = factory.create(f"{address}/invert", ON_OFF_PARAMETER_CONFIG)
        self.usb_return_enabled = factory.create(f"{address}/rtnsw", ON_OFF_PARAMETER_CONFIG)
        self.usb_trim = factory.create(f"{address}/rtntrim", create_linear_parameter_config(-18, 18, "decibels"))
        self.gain = factory.create(f"{headamp}/gain", create_linear_parameter_config(-12, 60, "decibels"))
        self.phantom_power = factory.create(f"{headamp}/phantom", ON_OFF_PARAMETER_CONFIG)
