"""Parametric equalizer sections."""

from typing import Dict

from .client import OscClient
from .errors import ParameterValidationError
from .mapper import (
    ON_OFF_PARAMETER_CONFIG,
    create_linear_parameter_config,
    create_literal_parameter_config,
    create_logarithmic_parameter_config,
)
from .parameter import OscParameterFactory

EQ_BAND_TYPES = ("LCut", "LShv", "PEQ", "VEQ", "HShv", "HCut")

FREQUENCY_PARAMETER_CONFIG = create_logarithmic_parameter_config(20, 20000, "hertz")
GAIN_PARAMETER_CONFIG = create_linear_parameter_config(-15, 15, "decibels")
Q_PARAMETER_CONFIG = create_logarithmic_parameter_config(10, 0.3, "number")
BAND_TYPE_PARAMETER_CONFIG = create_literal_parameter_config(EQ_BAND_TYPES, "type")


class EqualizerBand:
    """One band at {base}/eq/{n}."""

    def __init__(self, client: OscClient, base_path: str, band: int):
        address = f"{base_path}/eq/{band}"
        factory = OscParameterFactory(client)
        self.number = band
        self.enabled = factory.create(f"{address}/on", ON_OFF_PARAMETER_CONFIG)
        self.frequency = factory.create(f"{address}/f", FREQUENCY_PARAMETER_CONFIG)
        self.gain = factory.create(f"{address}/g", GAIN_PARAMETER_CONFIG)
        self.q = factory.create(f"{address}/q", Q_PARAMETER_CONFIG)
        self.type = factory.create(f"{address}/type", BAND_TYPE_PARAMETER_CONFIG)


class Equalizer:
    """Equalizer of a strip: 4 bands on input channels, 6 on buses and main LR."""

    def __init__(self, client: OscClient, base_path: str, band_count: int):
        self._client = client
        self._base_path = base_path
        self.band_count = band_count
        self.enabled = OscParameterFactory(client).create(f"{base_path}/eq/on", ON_OFF_PARAMETER_CONFIG)
        self._bands: Dict[int, EqualizerBand] = {}

    def band(self, number: int) -> EqualizerBand:
        if not 1 <= number <= self.band_count:
            raise ParameterValidationError(
                f"{self._base_path}/eq: band must be 1..{self.band_count}, got {number}"
            )
        if number not in self._bands:
            self._bands[number] = EqualizerBand(self._client, self._base_path, number)
        return self._bands[number]
