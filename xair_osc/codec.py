"""
Wire codec backed by python-osc.

Encodes OscMessage objects with explicit type tags and decodes datagrams
into either an OscMessage (arguments kept wire-shaped) or a python-osc
OscBundle, which the transport rejects.
"""

import logging
from typing import Any, Dict, Union

from pythonosc import osc_bundle, osc_message
from pythonosc.osc_message_builder import BuildError, OscMessageBuilder

from .errors import ProtocolError, SchemaError
from .schemas import OscMessage, parse_arguments

logger = logging.getLogger(__name__)

OscPacket = Union[OscMessage, osc_bundle.OscBundle]

_BUILDER_TYPES = {
    "integer": OscMessageBuilder.ARG_TYPE_INT,
    "float": OscMessageBuilder.ARG_TYPE_FLOAT,
    "string": OscMessageBuilder.ARG_TYPE_STRING,
}


def tag_value(value: Any) -> Dict[str, Any]:
    """Describe a decoded python-osc value as {"type": ..., "value": ...}."""
    if isinstance(value, bool):
        kind = "true" if value else "false"
    elif isinstance(value, int):
        kind = "integer"
    elif isinstance(value, float):
        kind = "float"
    elif isinstance(value, str):
        kind = "string"
    elif isinstance(value, bytes):
        kind = "blob"
    elif value is None:
        kind = "nil"
    elif isinstance(value, tuple):
        kind = "midi"
    else:
        kind = type(value).__name__
    return {"type": kind, "value": value}


class OscCodec:
    """Encode/decode OSC 1.0 messages."""

    def encode(self, message: OscMessage) -> bytes:
        builder = OscMessageBuilder(address=message.address)
        for argument in parse_arguments(message.args):
            builder.add_arg(argument.value, _BUILDER_TYPES[argument.type])
        try:
            return builder.build().dgram
        except BuildError as exc:
            raise SchemaError(f"Cannot encode {message.address}: {exc}") from exc

    def decode(self, dgram: bytes) -> OscPacket:
        try:
            if osc_bundle.OscBundle.dgram_is_bundle(dgram):
                return osc_bundle.OscBundle(dgram)
            wire = osc_message.OscMessage(dgram)
        except (osc_bundle.ParseError, osc_message.ParseError) as exc:
            raise ProtocolError(f"Undecodable OSC datagram ({len(dgram)} bytes): {exc}") from exc
        return OscMessage(
            address=wire.address,
            args=[tag_value(value) for value in wire.params],
        )
