"""Console models of the X Air family."""

from enum import Enum


class MixerModel(str, Enum):
    """Model names as advertised in /xinfo replies."""
    XR12 = "XR12"
    XR16 = "XR16"
    XR18 = "XR18"

    @property
    def channel_count(self) -> int:
        return _CHANNEL_COUNTS[self]

    @property
    def bus_count(self) -> int:
        return _BUS_COUNTS[self]


_CHANNEL_COUNTS = {MixerModel.XR12: 10, MixerModel.XR16: 14, MixerModel.XR18: 16}
_BUS_COUNTS = {MixerModel.XR12: 2, MixerModel.XR16: 4, MixerModel.XR18: 6}


def is_mixer_model(name: str) -> bool:
    return name in MixerModel._value2member_map_
