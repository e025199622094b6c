"""On/off switches transmitted as integer 0 or 1."""

from ..errors import ParameterValidationError
from .base import OSC_INTEGER, ParameterConfig, require_integer, require_unit

FLAG_UNIT = "flag"


def _validate_flag(value: bool) -> bool:
    if not isinstance(value, bool):
        raise ParameterValidationError(f"Expected a boolean, got {type(value).__name__} {value!r}")
    return value


def create_on_off_parameter_config(inverted: bool = False) -> ParameterConfig:
    """
    Boolean parameter on an integer wire value.

    With inverted=True, wire 0 means True. The mute switch is the
    typical case: the console's "on" means the strip is not muted.
    """

    def convert_to_unit(raw: int, unit_name: str) -> bool:
        require_unit(unit_name, (FLAG_UNIT,))
        if raw not in (0, 1):
            raise ParameterValidationError(f"Invalid value for on/off parameter: {raw}. Expected 0 or 1.")
        return (raw == 1) != inverted

    def convert_to_raw(value: bool, unit_name: str) -> int:
        require_unit(unit_name, (FLAG_UNIT,))
        return 1 if value != inverted else 0

    def validate_raw(value: int) -> int:
        return require_integer(value, 0, 1)

    return ParameterConfig(
        osc_type=OSC_INTEGER,
        convert_to_unit=convert_to_unit,
        convert_to_raw=convert_to_raw,
        validate_raw=validate_raw,
        validate_unit=_validate_flag,
        units=(FLAG_UNIT,),
    )


ON_OFF_PARAMETER_CONFIG = create_on_off_parameter_config()
ON_OFF_INVERTED_PARAMETER_CONFIG = create_on_off_parameter_config(inverted=True)
