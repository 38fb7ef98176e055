"""
Command line entry point: scan once and print the networks found.

Usage:
    python -m wifiscanner [--tool iw|iwlist] [--timeout SECONDS] [--json] [-v]
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional

from . import config
from .constants import LINUX_SCAN_TOOLS
from .errors import WiFiScanError
from .models import WiFiAccessPoint
from .scanner import WiFiScanner


def format_network(network: WiFiAccessPoint) -> str:
    """One aligned line per network."""
    return (
        f"{network.mac} {network.ssid:15} {network.channel:10} "
        f"{network.signal_level:4} {network.security}"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='wifiscanner',
        description="List the WiFi access points in range",
    )
    parser.add_argument("--tool", choices=LINUX_SCAN_TOOLS, help="Linux scan tool")
    parser.add_argument("--timeout", type=float, help="Seconds to wait for the scan tool")
    parser.add_argument("--json", action="store_true", help="Print networks as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config.configure_logging()
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        networks = WiFiScanner(linux_tool=args.tool, timeout=args.timeout).scan()
    except WiFiScanError as e:
        print(f"Cannot scan network: {e.kind}: {e.message}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps([n.to_dict() for n in networks], indent=2))
    else:
        for network in networks:
            print(format_network(network))

    return 0


if __name__ == "__main__":
    sys.exit(main())
