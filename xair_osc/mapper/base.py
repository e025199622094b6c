"""
ParameterConfig and the validation helpers shared by all mappers.

A config converts between the raw wire value of a parameter and zero or
more named units, and validates both sides. Validators never clamp.
"""

import math
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Tuple

from ..errors import ParameterValidationError
from ..schemas import INT32_MAX, INT32_MIN

OSC_INTEGER = "integer"
OSC_FLOAT = "float"
OSC_STRING = "string"


@dataclass(frozen=True)
class ParameterConfig:
    """
    Conversion and validation rules for one kind of parameter.

    Attributes:
        osc_type: Wire type of the raw value ("integer", "float" or "string")
        convert_to_unit: (raw, unit) -> unit value
        convert_to_raw: (unit value, unit) -> raw
        validate_raw: raw -> raw, raises on bad input
        validate_unit: unit value -> unit value, raises on bad input
        units: Unit names accepted by the converters
    """
    osc_type: str
    convert_to_unit: Callable[[Any, str], Any]
    convert_to_raw: Callable[[Any, str], Any]
    validate_raw: Callable[[Any], Any]
    validate_unit: Callable[[Any], Any]
    units: Tuple[str, ...] = ()


def require_unit(unit: str, units: Iterable[str]) -> None:
    units = tuple(units)
    if unit not in units:
        expected = ", ".join(repr(name) for name in units) or "none (raw values only)"
        raise ParameterValidationError(f"Unknown unit {unit!r}; expected {expected}")


def require_number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ParameterValidationError(f"Expected a number, got {type(value).__name__} {value!r}")
    if math.isnan(value):
        raise ParameterValidationError("Expected a number, got NaN")
    return value


def require_range(value: Any, low: float, high: float) -> float:
    value = require_number(value)
    if value < low or value > high:
        raise ParameterValidationError(f"Value {value} is outside [{low}, {high}]")
    return value


def require_integer(value: Any, low: int = INT32_MIN, high: int = INT32_MAX) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ParameterValidationError(f"Expected an integer, got {type(value).__name__} {value!r}")
    if value < low or value > high:
        raise ParameterValidationError(f"Value {value} is outside [{low}, {high}]")
    return value


def validate_normalized(value: Any) -> float:
    """Raw float parameters live in [0, 1]."""
    return float(require_range(value, 0.0, 1.0))


def no_conversion(value: Any, unit: str) -> Any:
    require_unit(unit, ())
    return value
