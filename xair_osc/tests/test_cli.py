"""
Tests for the command line entry point.
"""

import pytest

from xair_osc.cli import build_parser, main


class TestParser:
    """Test argument parsing."""

    def test_get(self):
        args = build_parser().parse_args(["--host", "10.0.0.7", "get", "/lr/mix/fader", "--timeout", "2"])
        assert (args.command, args.address, args.timeout, args.host) == ("get", "/lr/mix/fader", 2.0, "10.0.0.7")

    def test_set_needs_exactly_one_value(self):
        parser = build_parser()
        assert parser.parse_args(["set", "/ch/01/mix/on", "--int", "0"]).int == 0
        with pytest.raises(SystemExit):
            parser.parse_args(["set", "/ch/01/mix/on"])
        with pytest.raises(SystemExit):
            parser.parse_args(["set", "/ch/01/mix/on", "--int", "0", "--float", "0.5"])

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


def test_get_without_host_fails(tmp_path):
    assert main(["--config", str(tmp_path / "missing.yaml"), "get", "/lr/mix/fader"]) == 1


def test_malformed_config_fails(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- nope\n")
    assert main(["--config", str(path), "discover", "--timeout", "0"]) == 1


def test_wrongly_typed_setting_fails(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("host: 127.0.0.1\nquery_timeout: soon\n")
    assert main(["--config", str(path), "get", "/lr/mix/fader"]) == 1


@pytest.mark.parametrize("value", [["--int", str(2 ** 40)], ["--float", "inf"], ["--float", "1e39"]])
def test_unencodable_value_fails(tmp_path, value):
    argv = ["--config", str(tmp_path / "missing.yaml"), "--host", "127.0.0.1", "set", "/ch/01/mix/on"]
    assert main(argv + value) == 1
