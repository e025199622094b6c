"""
Exception hierarchy for xair_osc.

Every failure in the transport, client, discoverer and conversion engine
is raised as a subclass of XAirOscError. Nothing is retried or recovered
locally; callers decide what to do.
"""

from typing import Optional


class XAirOscError(Exception):
    """Base class for all xair_osc errors."""


class BindError(XAirOscError):
    """The UDP endpoint could not be acquired."""


class SendError(XAirOscError):
    """The OS refused to transmit a datagram."""

    def __init__(self, osc_address: str, host: str, port: int, cause: Optional[BaseException] = None):
        self.osc_address = osc_address
        self.host = host
        self.port = port
        self.cause = cause
        super().__init__(f"Failed to send {osc_address} to {host}:{port}: {cause}")


class ProtocolError(XAirOscError):
    """An inbound datagram could not be handled as OSC."""


class UnsupportedPacketError(ProtocolError):
    """A packet other than a single OSC message (e.g. a bundle) was received."""


class SchemaError(XAirOscError, ValueError):
    """An OSC argument list does not match the expected shape."""


class ParameterValidationError(XAirOscError, ValueError):
    """A raw or unit value is out of range or of the wrong type."""


class QueryTimeoutError(XAirOscError, TimeoutError):
    """No reply arrived for a query within the requested timeout."""


class ConfigError(XAirOscError):
    """Settings file could not be read or written."""
