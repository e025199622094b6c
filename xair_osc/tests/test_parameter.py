"""
Tests for OscParameter raw and unit access.
"""

import math

import pytest

from xair_osc.dynamics import HOLD_PARAMETER_CONFIG
from xair_osc.errors import ParameterValidationError, SchemaError
from xair_osc.mapper import (
    INTEGER_PARAMETER_CONFIG,
    LEVEL_PARAMETER_CONFIG,
    ON_OFF_INVERTED_PARAMETER_CONFIG,
    STRING_PARAMETER_CONFIG,
    create_linear_parameter_config,
)
from xair_osc.parameter import OscParameter, OscParameterFactory
from xair_osc.schemas import FloatArgument, IntegerArgument, StringArgument

THRESHOLD = create_linear_parameter_config(-60, 0, "decibels")


class TestFetch:
    """Test reading parameters."""

    @pytest.mark.asyncio
    async def test_fetch_unit(self, recording_client):
        recording_client.reply("/ch/01/dyn/thr", 0.5)
        threshold = OscParameter(recording_client, "/ch/01/dyn/thr", THRESHOLD)

        assert await threshold.fetch_unit("decibels") == pytest.approx(-30.0)
        assert recording_client.queries == ["/ch/01/dyn/thr"]

    @pytest.mark.asyncio
    async def test_fetch_raw(self, recording_client):
        recording_client.reply("/ch/01/dyn/thr", 0.5)
        threshold = OscParameter(recording_client, "/ch/01/dyn/thr", THRESHOLD)

        assert await threshold.fetch_raw() == 0.5
        assert await threshold.fetch() == 0.5
        assert await threshold.fetch("decibels") == pytest.approx(-30.0)

    @pytest.mark.asyncio
    async def test_fetch_inverted_flag(self, recording_client):
        recording_client.reply("/ch/01/mix/on", 0)
        muted = OscParameter(recording_client, "/ch/01/mix/on", ON_OFF_INVERTED_PARAMETER_CONFIG)

        assert await muted.fetch_unit("flag") is True

    @pytest.mark.asyncio
    async def test_fetch_silent_fader(self, recording_client):
        recording_client.reply("/lr/mix/fader", 0.0)
        fader = OscParameter(recording_client, "/lr/mix/fader", LEVEL_PARAMETER_CONFIG)

        assert await fader.fetch_unit("decibels") == -math.inf

    @pytest.mark.asyncio
    async def test_out_of_range_reply_names_address(self, recording_client):
        recording_client.reply("/ch/01/dyn/thr", 1.5)
        threshold = OscParameter(recording_client, "/ch/01/dyn/thr", THRESHOLD)

        with pytest.raises(ParameterValidationError, match="/ch/01/dyn/thr"):
            await threshold.fetch_raw()

    @pytest.mark.asyncio
    async def test_reply_without_arguments(self, recording_client):
        recording_client.reply("/ch/01/dyn/thr")
        threshold = OscParameter(recording_client, "/ch/01/dyn/thr", THRESHOLD)

        with pytest.raises(SchemaError):
            await threshold.fetch_raw()

    @pytest.mark.asyncio
    async def test_reply_with_unsupported_argument(self, recording_client):
        recording_client.reply("/ch/01/dyn/thr", b"\x00\x01")
        threshold = OscParameter(recording_client, "/ch/01/dyn/thr", THRESHOLD)

        with pytest.raises(SchemaError):
            await threshold.fetch_raw()

    @pytest.mark.asyncio
    async def test_wrong_wire_type(self, recording_client):
        recording_client.reply("/ch/01/dyn/thr", "loud")
        threshold = OscParameter(recording_client, "/ch/01/dyn/thr", THRESHOLD)

        with pytest.raises(ParameterValidationError):
            await threshold.fetch_raw()


class TestUpdate:
    """Test writing parameters."""

    @pytest.mark.asyncio
    async def test_update_unit_log(self, recording_client):
        hold = OscParameter(recording_client, "/ch/01/gate/hold", HOLD_PARAMETER_CONFIG)

        await hold.update_unit(1500, "milliseconds")

        [(address, args)] = recording_client.sets
        assert address == "/ch/01/gate/hold"
        assert isinstance(args[0], FloatArgument)
        assert args[0].value == pytest.approx(0.975, abs=1e-3)

    @pytest.mark.asyncio
    async def test_update_raw(self, recording_client):
        threshold = OscParameter(recording_client, "/ch/01/dyn/thr", THRESHOLD)

        await threshold.update_raw(0.25)
        await threshold.update(1)

        assert recording_client.sets == [
            ("/ch/01/dyn/thr", [FloatArgument(value=0.25)]),
            ("/ch/01/dyn/thr", [FloatArgument(value=1.0)]),
        ]

    @pytest.mark.asyncio
    async def test_update_with_unit(self, recording_client):
        threshold = OscParameter(recording_client, "/ch/01/dyn/thr", THRESHOLD)

        await threshold.update(-30, "decibels")

        assert recording_client.sets == [("/ch/01/dyn/thr", [FloatArgument(value=0.5)])]

    @pytest.mark.asyncio
    async def test_update_typed_arguments(self, recording_client):
        factory = OscParameterFactory(recording_client)

        await factory.create("/ch/01/grp/dca", INTEGER_PARAMETER_CONFIG).update_raw(5)
        await factory.create("/ch/01/config/name", STRING_PARAMETER_CONFIG).update_raw("Vox")

        assert recording_client.sets == [
            ("/ch/01/grp/dca", [IntegerArgument(value=5)]),
            ("/ch/01/config/name", [StringArgument(value="Vox")]),
        ]

    @pytest.mark.asyncio
    async def test_mute_writes_inverted_flag(self, recording_client):
        muted = OscParameter(recording_client, "/ch/01/mix/on", ON_OFF_INVERTED_PARAMETER_CONFIG)

        await muted.update_unit(True, "flag")

        assert recording_client.sets == [("/ch/01/mix/on", [IntegerArgument(value=0)])]

    @pytest.mark.asyncio
    async def test_fader_to_silence(self, recording_client):
        fader = OscParameter(recording_client, "/lr/mix/fader", LEVEL_PARAMETER_CONFIG)

        await fader.update_unit(-math.inf, "decibels")

        assert recording_client.sets == [("/lr/mix/fader", [FloatArgument(value=0.0)])]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value,unit", [
        (1.5, None),
        (-0.5, None),
        (-70, "decibels"),
        (-30, "hertz"),
    ])
    async def test_invalid_update_sends_nothing(self, recording_client, value, unit):
        threshold = OscParameter(recording_client, "/ch/01/dyn/thr", THRESHOLD)

        with pytest.raises(ParameterValidationError, match="/ch/01/dyn/thr"):
            await threshold.update(value, unit)

        assert recording_client.sets == []


def test_repr(recording_client):
    parameter = OscParameter(recording_client, "/lr/mix/fader", LEVEL_PARAMETER_CONFIG)
    assert repr(parameter) == "OscParameter('/lr/mix/fader', osc_type='float')"
