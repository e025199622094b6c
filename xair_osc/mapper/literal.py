"""Enumerations transmitted as the integer index of a label."""

from typing import Sequence

from ..errors import ParameterValidationError
from .base import OSC_INTEGER, ParameterConfig, require_integer, require_unit


def create_literal_parameter_config(labels: Sequence[str], unit: str) -> ParameterConfig:
    """
    Integer parameter whose raw value indexes into a fixed list of labels.

    Example:
        mode = create_literal_parameter_config(["COMP", "EXP"], "mode")
        mode.convert_to_raw("EXP", "mode")  # 1
    """
    labels = tuple(labels)
    if not labels:
        raise ParameterValidationError("A literal parameter needs at least one label")

    def convert_to_unit(raw: int, unit_name: str) -> str:
        require_unit(unit_name, (unit,))
        return labels[require_integer(raw, 0, len(labels) - 1)]

    def convert_to_raw(value: str, unit_name: str) -> int:
        require_unit(unit_name, (unit,))
        try:
            return labels.index(value)
        except ValueError:
            raise ParameterValidationError(f"{value!r} is not one of {list(labels)}") from None

    def validate_raw(value: int) -> int:
        return require_integer(value, 0, len(labels) - 1)

    def validate_unit(value: str) -> str:
        if value not in labels:
            raise ParameterValidationError(f"{value!r} is not one of {list(labels)}")
        return value

    return ParameterConfig(
        osc_type=OSC_INTEGER,
        convert_to_unit=convert_to_unit,
        convert_to_raw=convert_to_raw,
        validate_raw=validate_raw,
        validate_unit=validate_unit,
        units=(unit,),
    )
