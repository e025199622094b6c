"""
OSC message and argument schemas.

Outgoing arguments are pydantic models tagged by wire type. Incoming
arguments stay wire-shaped ({"type": ..., "value": ...}) until a consumer
validates them with parse_arguments().
"""

import math
from dataclasses import dataclass, field
from typing import Annotated, Any, List, Literal, NamedTuple, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, TypeAdapter
from pydantic import ValidationError, field_validator

from .errors import SchemaError

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
FLOAT32_MAX = 3.4028234663852886e38


class IntegerArgument(BaseModel):
    """32-bit signed integer argument (OSC tag 'i')."""
    model_config = ConfigDict(frozen=True)

    type: Literal["integer"] = "integer"
    value: StrictInt = Field(ge=INT32_MIN, le=INT32_MAX)


class FloatArgument(BaseModel):
    """32-bit float argument (OSC tag 'f')."""
    model_config = ConfigDict(frozen=True)

    type: Literal["float"] = "float"
    value: float

    @field_validator("value", mode="before")
    @classmethod
    def _check_float32(cls, value: Any) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"expected a number, got {type(value).__name__}")
        value = float(value)
        if not math.isfinite(value) or abs(value) > FLOAT32_MAX:
            raise ValueError(f"{value} is not representable as a 32-bit float")
        return value


class StringArgument(BaseModel):
    """UTF-8 string argument (OSC tag 's')."""
    model_config = ConfigDict(frozen=True)

    type: Literal["string"] = "string"
    value: StrictStr


OscArgument = Annotated[
    Union[IntegerArgument, FloatArgument, StringArgument],
    Field(discriminator="type"),
]

_ARGUMENT_LIST = TypeAdapter(List[OscArgument])


@dataclass(frozen=True)
class OscMessage:
    """
    A single OSC message.

    Attributes:
        address: OSC address path, opaque to the transport
        args: Argument models (outgoing) or wire-shaped dicts (incoming)
    """
    address: str
    args: List[Any] = field(default_factory=list)


class RemoteInfo(NamedTuple):
    """Sender of an inbound datagram."""
    address: str
    port: int


def parse_arguments(args: Sequence[Any]) -> List[Union[IntegerArgument, FloatArgument, StringArgument]]:
    """
    Validate an argument list against the three supported wire types.

    Raises:
        SchemaError: If any argument is malformed or of an unsupported type
    """
    normalized = [
        argument.model_dump() if isinstance(argument, BaseModel) else argument
        for argument in (args or [])
    ]
    try:
        return _ARGUMENT_LIST.validate_python(normalized)
    except ValidationError as exc:
        raise SchemaError(f"Malformed OSC argument list {normalized!r}: {exc}") from exc


def argument_values(args: Sequence[Any]) -> List[Union[int, float, str]]:
    """Validate an argument list and return the bare values."""
    return [argument.value for argument in parse_arguments(args)]
