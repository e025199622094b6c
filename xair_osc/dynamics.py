"""Compressor and gate sections."""

from .client import OscClient
from .mapper import (
    ON_OFF_PARAMETER_CONFIG,
    create_linear_parameter_config,
    create_literal_parameter_config,
    create_logarithmic_parameter_config,
)
from .parameter import OscParameterFactory

COMPRESSOR_RATIOS = ("1.1", "1.3", "1.5", "2.0", "2.5", "3.0", "4.0", "5.0", "7.0", "10", "20", "100")
COMPRESSOR_MODES = ("COMP", "EXP")
DETECTION_MODES = ("PEAK", "RMS")
ENVELOPES = ("LIN", "LOG")
GATE_MODES = ("EXP2", "EXP3", "EXP4", "GATE", "DUCK")

ATTACK_PARAMETER_CONFIG = create_linear_parameter_config(0, 120, "milliseconds")
HOLD_PARAMETER_CONFIG = create_logarithmic_parameter_config(0.02, 2000, "milliseconds")
RELEASE_PARAMETER_CONFIG = create_logarithmic_parameter_config(5, 4000, "milliseconds")


class Compressor:
    """Compressor at {base}/dyn."""

    def __init__(self, client: OscClient, base_path: str):
        address = f"{base_path}/dyn"
        factory = OscParameterFactory(client)
        self.enabled = factory.create(f"{address}/on", ON_OFF_PARAMETER_CONFIG)
        self.auto_time = factory.create(f"{address}/auto", ON_OFF_PARAMETER_CONFIG)
        self.attack = factory.create(f"{address}/attack", ATTACK_PARAMETER_CONFIG)
        self.hold = factory.create(f"{address}/hold", HOLD_PARAMETER_CONFIG)
        self.release = factory.create(f"{address}/release", RELEASE_PARAMETER_CONFIG)
        self.knee = factory.create(f"{address}/knee", create_linear_parameter_config(0, 5, "number"))
        self.gain = factory.create(f"{address}/mgain", create_linear_parameter_config(0, 24, "decibels"))
        self.mix = factory.create(f"{address}/mix", create_linear_parameter_config(0, 100, "percent"))
        self.threshold = factory.create(f"{address}/thr", create_linear_parameter_config(-60, 0, "decibels"))
        self.ratio = factory.create(f"{address}/ratio", create_literal_parameter_config(COMPRESSOR_RATIOS, "ratio"))
        self.mode = factory.create(f"{address}/mode", create_literal_parameter_config(COMPRESSOR_MODES, "mode"))
        self.detection_mode = factory.create(
            f"{address}/det", create_literal_parameter_config(DETECTION_MODES, "detectionMode")
        )
        self.envelope = factory.create(f"{address}/env", create_literal_parameter_config(ENVELOPES, "envelope"))


class Gate:
    """Gate at {base}/gate, input channels only."""

    def __init__(self, client: OscClient, base_path: str):
        address = f"{base_path}/gate"
        factory = OscParameterFactory(client)
        self.enabled = factory.create(f"{address}/on", ON_OFF_PARAMETER_CONFIG)
        self.mode = factory.create(f"{address}/mode", create_literal_parameter_config(GATE_MODES, "mode"))
        self.attack = factory.create(f"{address}/attack", ATTACK_PARAMETER_CONFIG)
        self.hold = factory.create(f"{address}/hold", HOLD_PARAMETER_CONFIG)
        self.release = factory.create(f"{address}/release", RELEASE_PARAMETER_CONFIG)
        self.range = factory.create(f"{address}/range", create_linear_parameter_config(3, 60, "decibels"))
        self.threshold = factory.create(f"{address}/thr", create_linear_parameter_config(-80, 0, "decibels"))
