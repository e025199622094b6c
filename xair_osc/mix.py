"""Fader, pan, mute and main-bus assignment of a strip."""

from .client import OscClient
from .mapper import (
    LEVEL_PARAMETER_CONFIG,
    ON_OFF_INVERTED_PARAMETER_CONFIG,
    ON_OFF_PARAMETER_CONFIG,
    create_linear_parameter_config,
)
from .parameter import OscParameterFactory

PAN_PARAMETER_CONFIG = create_linear_parameter_config(-100, 100, "percent")


class Mix:
    """
    Mix section at {base}/mix.

    Attributes:
        muted: flag (True = muted); the console's "on" switch, inverted
        fader: decibels (-inf..+10) or raw 0..1
        pan: percent (-100..100) or raw 0..1
        lr_assignment: flag, strip routed to main LR (absent on main LR itself)
    """

    def __init__(self, client: OscClient, base_path: str, has_lr_assignment: bool = True):
        address = f"{base_path}/mix"
        factory = OscParameterFactory(client)
        self.muted = factory.create(f"{address}/on", ON_OFF_INVERTED_PARAMETER_CONFIG)
        self.fader = factory.create(f"{address}/fader", LEVEL_PARAMETER_CONFIG)
        self.pan = factory.create(f"{address}/pan", PAN_PARAMETER_CONFIG)
        self.lr_assignment = (
            factory.create(f"{address}/lr", ON_OFF_PARAMETER_CONFIG) if has_lr_assignment else None
        )
