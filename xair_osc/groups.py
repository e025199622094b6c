"""
DCA and mute group membership.

A strip's memberships live in one integer parameter; bit n-1 is set when
the strip belongs to group n.
"""

import logging

from .client import OscClient
from .errors import ParameterValidationError
from .mapper import INTEGER_PARAMETER_CONFIG
from .parameter import OscParameter

logger = logging.getLogger(__name__)

GROUP_COUNT = 4


class BitmaskGroup:
    """Read-modify-write access to a group bitmask."""

    def __init__(self, client: OscClient, address: str):
        self.bitmask = OscParameter(client, address, INTEGER_PARAMETER_CONFIG)

    async def is_enabled(self, group: int) -> bool:
        bit = self._bit(group)
        return ((await self.bitmask.fetch_raw()) & bit) != 0

    async def update_enabled(self, group: int) -> None:
        bit = self._bit(group)
        current = await self.bitmask.fetch_raw()
        await self._write_if_changed(current, current | bit)

    async def update_disabled(self, group: int) -> None:
        bit = self._bit(group)
        current = await self.bitmask.fetch_raw()
        await self._write_if_changed(current, current & ~bit)

    async def _write_if_changed(self, current: int, updated: int) -> None:
        if updated == current:
            logger.debug(f"{self.bitmask.address} already {current:#06b}, not writing")
            return
        await self.bitmask.update_raw(updated)

    def _bit(self, group: int) -> int:
        if isinstance(group, bool) or not isinstance(group, int) or not 1 <= group <= GROUP_COUNT:
            raise ParameterValidationError(
                f"{self.bitmask.address}: group must be 1..{GROUP_COUNT}, got {group!r}"
            )
        return 1 << (group - 1)


class DCAGroup(BitmaskGroup):
    def __init__(self, client: OscClient, base_path: str):
        super().__init__(client, f"{base_path}/grp/dca")


class MuteGroup(BitmaskGroup):
    def __init__(self, client: OscClient, base_path: str):
        super().__init__(client, f"{base_path}/grp/mute")
