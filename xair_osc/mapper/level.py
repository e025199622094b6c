"""
Fader law of the X Air consoles.

The raw fader position maps to decibels through four linear segments,
which gives finer resolution near unity gain:

    (0.00625, 0.0625] -> [-87, -60]
    (0.0625,  0.25]   -> [-60, -30]
    (0.25,    0.5]    -> [-30, -10]
    (0.5,     1.0]    -> [-10, +10]

Positions at or below 0.00625 are -inf dB. Conversions clamp at both
ends; validation does not.
"""

import math

from ..errors import ParameterValidationError
from .base import OSC_FLOAT, ParameterConfig, require_number, require_unit, validate_normalized

DECIBELS_UNIT = "decibels"
MAX_DB = 10.0
MIN_DB = -87.0
SILENCE_LEVEL = 0.00625

# (level upper bound, level lower bound, dB at lower bound, dB at upper bound)
_SEGMENTS = (
    (0.0625, 0.00625, -87.0, -60.0),
    (0.25, 0.0625, -60.0, -30.0),
    (0.5, 0.25, -30.0, -10.0),
    (1.0, 0.5, -10.0, 10.0),
)


def _linear_map(x: float, x1: float, x2: float, y1: float, y2: float) -> float:
    t = (x - x1) / (x2 - x1)
    return y1 + t * (y2 - y1)


def level_to_db(level: float) -> float:
    if level <= SILENCE_LEVEL:
        return -math.inf
    for upper, lower, db_low, db_high in _SEGMENTS:
        if level <= upper:
            return _linear_map(level, lower, upper, db_low, db_high)
    return MAX_DB


def db_to_level(db: float) -> float:
    if db < MIN_DB:
        return 0.0
    for upper, lower, db_low, db_high in _SEGMENTS:
        if db <= db_high:
            return _linear_map(db, db_low, db_high, lower, upper)
    return 1.0


def _convert_to_unit(raw: float, unit_name: str) -> float:
    require_unit(unit_name, (DECIBELS_UNIT,))
    return level_to_db(raw)


def _convert_to_raw(value: float, unit_name: str) -> float:
    require_unit(unit_name, (DECIBELS_UNIT,))
    return db_to_level(value)


def _validate_db(value: float) -> float:
    value = require_number(value)
    if value > MAX_DB:
        raise ParameterValidationError(f"Level {value} dB is above {MAX_DB} dB")
    return float(value)


LEVEL_PARAMETER_CONFIG = ParameterConfig(
    osc_type=OSC_FLOAT,
    convert_to_unit=_convert_to_unit,
    convert_to_raw=_convert_to_raw,
    validate_raw=validate_normalized,
    validate_unit=_validate_db,
    units=(DECIBELS_UNIT,),
)
