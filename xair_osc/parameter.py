"""
Typed access to one console parameter.

An OscParameter binds a ParameterConfig to an OSC address and a client.
Reads and writes come in two explicit flavours: raw wire values, or
values in one of the config's named units.
"""

import logging
from typing import Any, Callable, Optional, Union

from .client import OscClient
from .errors import ParameterValidationError, SchemaError
from .mapper.base import OSC_FLOAT, OSC_INTEGER, OSC_STRING, ParameterConfig
from .schemas import FloatArgument, IntegerArgument, StringArgument, parse_arguments

logger = logging.getLogger(__name__)

RawValue = Union[int, float, str]


class OscParameter:
    """
    One readable/writable parameter of the console.

    Example:
        fader = OscParameter(client, "/ch/01/mix/fader", LEVEL_PARAMETER_CONFIG)
        await fader.fetch_raw()                  # 0.75
        await fader.fetch_unit("decibels")       # 0.0
        await fader.update_unit(-10, "decibels")
    """

    def __init__(self, client: OscClient, address: str, config: ParameterConfig):
        self._client = client
        self.address = address
        self.config = config

    async def fetch_raw(self) -> RawValue:
        """Query the parameter and return the validated wire value."""
        reply = await self._client.query(self.address)
        arguments = parse_arguments(reply.args)
        if not arguments:
            raise SchemaError(f"No OSC argument in reply from {self.address}")
        return self._checked(self.config.validate_raw, arguments[0].value)

    async def fetch_unit(self, unit: str) -> Any:
        """Query the parameter and convert it to `unit`."""
        raw = await self.fetch_raw()
        return self._checked(self.config.convert_to_unit, raw, unit)

    async def fetch(self, unit: Optional[str] = None) -> Any:
        if unit is None:
            return await self.fetch_raw()
        return await self.fetch_unit(unit)

    async def update_raw(self, value: RawValue) -> None:
        """Validate a wire value and send it."""
        raw = self._checked(self.config.validate_raw, value)
        await self._client.set(self.address, [self._argument(raw)])

    async def update_unit(self, value: Any, unit: str) -> None:
        """Validate a unit value, convert it to the wire value and send it."""
        validated = self._checked(self.config.validate_unit, value)
        raw = self._checked(self.config.convert_to_raw, validated, unit)
        await self._client.set(self.address, [self._argument(raw)])

    async def update(self, value: Any, unit: Optional[str] = None) -> None:
        if unit is None:
            await self.update_raw(value)
        else:
            await self.update_unit(value, unit)

    def _checked(self, function: Callable[..., Any], *args: Any) -> Any:
        try:
            return function(*args)
        except ParameterValidationError as exc:
            raise ParameterValidationError(f"{self.address}: {exc}") from exc

    def _argument(self, raw: RawValue):
        osc_type = self.config.osc_type
        if osc_type == OSC_STRING and isinstance(raw, str):
            return StringArgument(value=raw)
        if osc_type == OSC_INTEGER and isinstance(raw, int) and not isinstance(raw, bool):
            return IntegerArgument(value=raw)
        if osc_type == OSC_FLOAT and isinstance(raw, (int, float)) and not isinstance(raw, bool):
            return FloatArgument(value=float(raw))
        raise ParameterValidationError(
            f"Unsupported OSC type {type(raw).__name__!r} for address {self.address!r} (expected {osc_type})"
        )

    def __repr__(self) -> str:
        return f"OscParameter({self.address!r}, osc_type={self.config.osc_type!r})"


class OscParameterFactory:
    """Creates parameters that share one client."""

    def __init__(self, client: OscClient):
        self._client = client

    def create(self, address: str, config: ParameterConfig) -> OscParameter:
        return OscParameter(self._client, address, config)
