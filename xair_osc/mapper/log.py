"""
Logarithmic mapping between [0, 1] and [minimum, maximum].

minimum may exceed maximum; the Q of an equalizer band, for instance,
decreases as the raw value increases.
"""

import math

from ..errors import ParameterValidationError
from .base import OSC_FLOAT, ParameterConfig, require_range, require_unit, validate_normalized


def map_zero_to_one_to_range(value: float, minimum: float, maximum: float) -> float:
    """min * (max / min) ** value"""
    return minimum * math.pow(maximum / minimum, value)


def map_range_to_zero_to_one(value: float, minimum: float, maximum: float) -> float:
    """log(value / min) / log(max / min)"""
    return math.log10(value / minimum) / math.log10(maximum / minimum)


def create_logarithmic_parameter_config(minimum: float, maximum: float, unit: str) -> ParameterConfig:
    if minimum == maximum:
        raise ParameterValidationError("min and max must be different")
    if minimum <= 0 or maximum <= 0:
        raise ParameterValidationError(f"Logarithmic range [{minimum}, {maximum}] must be positive")
    low, high = min(minimum, maximum), max(minimum, maximum)

    def convert_to_unit(raw: float, unit_name: str) -> float:
        require_unit(unit_name, (unit,))
        return map_zero_to_one_to_range(raw, minimum, maximum)

    def convert_to_raw(value: float, unit_name: str) -> float:
        require_unit(unit_name, (unit,))
        return map_range_to_zero_to_one(value, minimum, maximum)

    def validate_unit(value: float) -> float:
        return float(require_range(value, low, high))

    return ParameterConfig(
        osc_type=OSC_FLOAT,
        convert_to_unit=convert_to_unit,
        convert_to_raw=convert_to_raw,
        validate_raw=validate_normalized,
        validate_unit=validate_unit,
        units=(unit,),
    )
