"""
Tests for DCA and mute group bitmasks.
"""

import pytest

from xair_osc.errors import ParameterValidationError
from xair_osc.groups import DCAGroup, MuteGroup
from xair_osc.schemas import IntegerArgument


class TestIsEnabled:
    """Test group membership reads."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("group,expected", [(1, True), (2, False), (3, False), (4, True)])
    async def test_bits(self, recording_client, group, expected):
        recording_client.reply("/ch/01/grp/dca", 0b1001)
        dca = DCAGroup(recording_client, "/ch/01")

        assert await dca.is_enabled(group) is expected

    @pytest.mark.asyncio
    @pytest.mark.parametrize("group", [0, 5, -1, True, 1.0])
    async def test_group_out_of_range(self, recording_client, group):
        dca = DCAGroup(recording_client, "/ch/01")

        with pytest.raises(ParameterValidationError):
            await dca.is_enabled(group)

        assert recording_client.queries == []


class TestUpdate:
    """Test read-modify-write of group membership."""

    @pytest.mark.asyncio
    async def test_enable_sets_one_bit(self, recording_client):
        recording_client.reply("/ch/01/grp/dca", 0b1001)
        dca = DCAGroup(recording_client, "/ch/01")

        await dca.update_enabled(2)

        assert recording_client.queries == ["/ch/01/grp/dca"]
        assert recording_client.sets == [("/ch/01/grp/dca", [IntegerArgument(value=0b1011)])]

    @pytest.mark.asyncio
    async def test_enable_already_enabled_writes_nothing(self, recording_client):
        recording_client.reply("/ch/01/grp/dca", 0b1001)
        dca = DCAGroup(recording_client, "/ch/01")

        await dca.update_enabled(1)

        assert recording_client.sets == []

    @pytest.mark.asyncio
    async def test_disable_clears_one_bit(self, recording_client):
        recording_client.reply("/bus/2/grp/mute", 0b1001)
        mute = MuteGroup(recording_client, "/bus/2")

        await mute.update_disabled(4)

        assert recording_client.sets == [("/bus/2/grp/mute", [IntegerArgument(value=0b0001)])]

    @pytest.mark.asyncio
    async def test_disable_already_disabled_writes_nothing(self, recording_client):
        recording_client.reply("/bus/2/grp/mute", 0b0001)
        mute = MuteGroup(recording_client, "/bus/2")

        await mute.update_disabled(3)

        assert recording_client.sets == []


def test_addresses(recording_client):
    assert DCAGroup(recording_client, "/ch/07").bitmask.address == "/ch/07/grp/dca"
    assert MuteGroup(recording_client, "/ch/07").bitmask.address == "/ch/07/grp/mute"
