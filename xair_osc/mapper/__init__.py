"""
Parameter conversion engine.

Bidirectional, validated mappers between raw OSC values and human units:
linear, logarithmic, literal (enumeration), on/off flag and the fader
level curve.
"""

from .base import OSC_FLOAT, OSC_INTEGER, OSC_STRING, ParameterConfig
from .level import DECIBELS_UNIT, LEVEL_PARAMETER_CONFIG, db_to_level, level_to_db
from .linear import create_linear_parameter_config
from .literal import create_literal_parameter_config
from .log import create_logarithmic_parameter_config
from .on_off import (
    FLAG_UNIT,
    ON_OFF_INVERTED_PARAMETER_CONFIG,
    ON_OFF_PARAMETER_CONFIG,
    create_on_off_parameter_config,
)
from .plain import INTEGER_PARAMETER_CONFIG, STRING_PARAMETER_CONFIG

__all__ = [
    "OSC_FLOAT",
    "OSC_INTEGER",
    "OSC_STRING",
    "ParameterConfig",
    "DECIBELS_UNIT",
    "LEVEL_PARAMETER_CONFIG",
    "db_to_level",
    "level_to_db",
    "create_linear_parameter_config",
    "create_literal_parameter_config",
    "create_logarithmic_parameter_config",
    "FLAG_UNIT",
    "ON_OFF_PARAMETER_CONFIG",
    "ON_OFF_INVERTED_PARAMETER_CONFIG",
    "create_on_off_parameter_config",
    "INTEGER_PARAMETER_CONFIG",
    "STRING_PARAMETER_CONFIG",
]
