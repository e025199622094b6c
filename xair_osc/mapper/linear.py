"""Linear mapping between [0, 1] and [minimum, maximum]."""

from ..errors import ParameterValidationError
from .base import OSC_FLOAT, ParameterConfig, require_range, require_unit, validate_normalized


def map_zero_to_one_to_range(value: float, minimum: float, maximum: float) -> float:
    return minimum + value * (maximum - minimum)


def map_range_to_zero_to_one(value: float, minimum: float, maximum: float) -> float:
    if maximum == minimum:
        raise ParameterValidationError("min and max must be different")
    return (value - minimum) / (maximum - minimum)


def create_linear_parameter_config(minimum: float, maximum: float, unit: str) -> ParameterConfig:
    """
    Float parameter whose unit value grows linearly with the raw value.

    Example:
        pan = create_linear_parameter_config(-100, 100, "percent")
        pan.convert_to_unit(0.25, "percent")  # -50.0
    """
    if minimum == maximum:
        raise ParameterValidationError("min and max must be different")
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
