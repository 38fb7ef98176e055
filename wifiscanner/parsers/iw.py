"""
Parsers for Linux iw output.

Example output from 'iw dev':
phy#0
	Interface wlan0
		ifindex 3
		wdev 0x1
		addr 00:11:22:33:44:55
		type managed

Example output from 'iw dev wlan0 scan':
BSS 00:11:22:33:44:55(on wlan0)
	TSF: 12345678901234 usec (0d, 03:25:45)
	freq: 2437
	beacon interval: 100 TUs
	capability: ESS Privacy ShortSlotTime (0x0411)
	signal: -65.00 dBm
	last seen: 100 ms ago
	SSID: MyWiFi
	Supported rates: 1.0* 2.0* 5.5* 11.0* 6.0 9.0 12.0 18.0
	DS Parameter set: channel 6
	RSN:	 * Version: 1
		 * Group cipher: CCMP
"""

from __future__ import annotations

import logging

from ..constants import (
    IW_BSS_TERMINATOR,
    IW_INTERFACE_MARKER,
    IW_SIGNAL_TERMINATOR,
    IW_TAG_BSS,
    IW_TAG_CHANNEL,
    IW_TAG_SIGNAL,
    IW_TAG_SSID,
)
from ..errors import NoValue
from ..models import WiFiAccessPoint
from ..splitter import split_lines, split_on_marker

logger = logging.getLogger(__name__)


def extract_first_interface(output: str) -> str:
    """
    Get the name of the first wireless interface listed by 'iw dev'.

    Raises:
        NoValue: If no interface is listed.
    """
    segments = split_on_marker(output, IW_INTERFACE_MARKER)
    if len(segments) < 2:
        raise NoValue("No wireless interface found in iw dev output")

    interface = segments[1].split('\n', 1)[0].strip()
    if not interface:
        raise NoValue("Empty interface name in iw dev output")

    return interface


def _value_between(line: str, prefix: str, terminator: str = '') -> str:
    """Text after prefix, cut at terminator when given."""
    value = line[len(prefix):]
    if terminator:
        value = value.split(terminator, 1)[0]
    return value


def parse_iw_scan(output: str) -> list[WiFiAccessPoint]:
    """
    Parse iw scan output.

    Fields accumulate across lines until mac, signal, channel and SSID are
    all known, at which point a network is emitted and accumulation starts
    over. iw does not report a security label here, so it stays empty.

    Args:
        output: Raw output from 'iw dev <interface> scan'.

    Returns:
        List of WiFiAccessPoint objects.
    """
    access_points = []
    mac = signal_level = channel = ssid = ''

    for line in split_lines(output):
        if line.startswith(IW_TAG_BSS):
            mac = _value_between(line, IW_TAG_BSS, IW_BSS_TERMINATOR)
        elif line.startswith(IW_TAG_SIGNAL):
            signal_level = _value_between(line, IW_TAG_SIGNAL, IW_SIGNAL_TERMINATOR)
        elif line.startswith(IW_TAG_CHANNEL):
            channel = _value_between(line, IW_TAG_CHANNEL)
        elif line.startswith(IW_TAG_SSID):
            ssid = _value_between(line, IW_TAG_SSID)

        if mac and signal_level and channel and ssid:
            access_points.append(WiFiAccessPoint(
                mac=mac,
                ssid=ssid,
                channel=channel,
                signal_level=signal_level,
            ))
            mac = signal_level = channel = ssid = ''

    logger.debug(f"Parsed {len(access_points)} networks from iw output")
    return access_points
