"""
xair-osc command line

Usage:
    python -m xair_osc discover
    python -m xair_osc get /ch/01/mix/fader --host 192.168.1.20
    python -m xair_osc set /ch/01/mix/fader --float 0.75 --host 192.168.1.20
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .client import OscClient
from .config import MixerSettings, load_settings
from .discovery import MixerDiscoverer
from .errors import XAirOscError
from .schemas import argument_values, parse_arguments
from .transport import create_osc_socket

logger = logging.getLogger(__name__)


async def run_discover(settings: MixerSettings, timeout: Optional[float]) -> int:
    osc_socket = await create_osc_socket(settings.local_address, settings.local_port)
    discoverer = MixerDiscoverer(osc_socket)
    mixers = await discoverer.discover(
        timeout if timeout is not None else settings.discovery_timeout,
        settings.broadcast_address,
    )
    for mixer in mixers:
        print(f"{mixer.model.value}\t{mixer.address}:{mixer.port}")
    if not mixers:
        logger.info("No mixers found")
    return 0


async def run_get(settings: MixerSettings, address: str, timeout: Optional[float]) -> int:
    client = await _open_client(settings)
    try:
        reply = await client.query(address, timeout if timeout is not None else settings.query_timeout)
    finally:
        await client.close()
    print(" ".join(str(value) for value in argument_values(reply.args)))
    return 0


async def run_set(settings: MixerSettings, address: str, args: argparse.Namespace) -> int:
    if args.int is not None:
        wire = {"type": "integer", "value": args.int}
    elif args.float is not None:
        wire = {"type": "float", "value": args.float}
    else:
        wire = {"type": "string", "value": args.string}
    arguments = parse_arguments([wire])
    client = await _open_client(settings)
    try:
        await client.set(address, arguments)
    finally:
        await client.close()
    return 0


async def _open_client(settings: MixerSettings) -> OscClient:
    if not settings.host:
        raise XAirOscError("No mixer host configured; pass --host or run discover first")
    osc_socket = await create_osc_socket(settings.local_address, settings.local_port)
    return OscClient(osc_socket, settings.host, settings.port)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xair-osc",
        description="Query and control X Air mixers over OSC",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--config", type=Path, help="Settings file (YAML)")
    parser.add_argument("--host", help="Mixer IP address")
    parser.add_argument("--port", type=int, help="Mixer OSC port")

    commands = parser.add_subparsers(dest="command", required=True)

    discover = commands.add_parser("discover", help="Find mixers on the local network")
    discover.add_argument("--timeout", type=float, help="Seconds to collect replies")
    discover.add_argument("--broadcast", help="Broadcast address for the probe")

    get = commands.add_parser("get", help="Read a parameter")
    get.add_argument("address", help="OSC address, e.g. /ch/01/mix/fader")
    get.add_argument("--timeout", type=float, help="Seconds to wait for the reply")

    set_ = commands.add_parser("set", help="Write a parameter")
    set_.add_argument("address", help="OSC address, e.g. /ch/01/mix/fader")
    value = set_.add_mutually_exclusive_group(required=True)
    value.add_argument("--int", type=int, help="Integer argument")
    value.add_argument("--float", type=float, help="Float argument")
    value.add_argument("--string", help="String argument")

    return parser


async def run(args: argparse.Namespace) -> int:
    settings = load_settings(args.config)
    if args.host:
        settings.host = args.host
    if args.port:
        settings.port = args.port

    if args.command == "discover":
        if args.broadcast:
            settings.broadcast_address = args.broadcast
        return await run_discover(settings, args.timeout)
    if args.command == "get":
        return await run_get(settings, args.address, args.timeout)
    return await run_set(settings, args.address, args)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s"
    )

    try:
        return asyncio.run(run(args))
    except XAirOscError as exc:
        logger.error(str(exc))
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
