"""Parameters used as raw wire values only."""

from ..errors import ParameterValidationError
from .base import OSC_INTEGER, OSC_STRING, ParameterConfig, no_conversion, require_integer


def _validate_string(value: str) -> str:
    if not isinstance(value, str):
        raise ParameterValidationError(f"Expected a string, got {type(value).__name__} {value!r}")
    return value


INTEGER_PARAMETER_CONFIG = ParameterConfig(
    osc_type=OSC_INTEGER,
    convert_to_unit=no_conversion,
    convert_to_raw=no_conversion,
    validate_raw=require_integer,
    validate_unit=require_integer,
)

STRING_PARAMETER_CONFIG = ParameterConfig(
    osc_type=OSC_STRING,
    convert_to_unit=no_conversion,
    convert_to_raw=no_conversion,
    validate_raw=_validate_string,
    validate_unit=_validate_string,
)
