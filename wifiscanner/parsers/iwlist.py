"""
Parser for Linux iwlist scan output.

Example output from 'iwlist scan':
wlan0     Scan completed :
          Cell 01 - Address: 00:11:22:33:44:55
                    Channel:6
                    Frequency:2.437 GHz (Channel 6)
                    Quality=70/70  Signal level=-40 dBm
                    Encryption key:on
                    ESSID:"MyWiFi"
                    Bit Rates:54 Mb/s
                    Mode:Master

Some drivers (e.g. brcmfmac on the Raspberry Pi) report signal as a
percentage and omit the Quality token:
                    Signal level=48/100
"""

from __future__ import annotations

import logging

from ..constants import (
    IWLIST_CELL_PATTERN,
    IWLIST_MAC_PATTERN,
    IWLIST_PERCENT_SIGNAL_PATTERN,
    IWLIST_TAG_ESSID,
    IWLIST_TAG_FREQUENCY,
    IWLIST_TAG_SIGNAL,
    IWLIST_TOKEN_CHANNEL,
    IWLIST_TOKEN_QUALITY,
    IWLIST_TOKEN_SIGNAL_VALUE,
)
from ..errors import FailedToParse
from ..models import WiFiAccessPoint
from ..rssi import percent_to_dbm_quality
from ..splitter import compile_pattern, split_blocks, split_lines

logger = logging.getLogger(__name__)


def parse_iwlist_scan(output: str) -> list[WiFiAccessPoint]:
    """
    Parse iwlist scan output.

    Args:
        output: Raw output from 'iwlist scan'.

    Returns:
        List of WiFiAccessPoint objects.

    Raises:
        FailedToParse: If a percentage signal line cannot be read.
    """
    access_points = []

    for block in split_blocks(output, IWLIST_CELL_PATTERN):
        access_points.extend(_parse_iwlist_block(block))

    logger.debug(f"Parsed {len(access_points)} networks from iwlist output")
    return access_points


def _parse_iwlist_block(block: str) -> list[WiFiAccessPoint]:
    """
    Parse a single Cell block.

    A network is emitted as soon as SSID, mac and signal are known, after
    which all fields reset. A block therefore yields at most one network
    unless its fields repeat.
    """
    lines = split_lines(block)
    if not lines:
        return []

    access_points = []
    ssid = signal_level = channel = ''

    # Address is the remainder of the "Cell NN - Address:" line
    mac_match = compile_pattern(IWLIST_MAC_PATTERN).search(lines[0])
    mac = mac_match.group(0) if mac_match else ''

    for line in lines[1:]:
        if IWLIST_TAG_ESSID in line:
            ssid = line.partition(':')[2].strip().strip('"')
        elif IWLIST_TAG_FREQUENCY in line:
            channel = line.partition(IWLIST_TOKEN_CHANNEL)[2].replace(')', '').strip()
        elif IWLIST_TAG_SIGNAL in line:
            signal_level = _parse_signal_level(line)

        if ssid and mac and signal_level:
            access_points.append(WiFiAccessPoint(
                mac=mac,
                ssid=ssid,
                channel=channel,
                signal_level=signal_level,
            ))
            ssid = mac = signal_level = channel = ''

    return access_points


def _parse_signal_level(line: str) -> str:
    """
    Read the signal level from a 'Signal level' line as dBm text.

    'Quality=38/70  Signal level=-72 dBm' -> '-72'
    'Signal level=48/100' -> '-76'
    """
    if IWLIST_TOKEN_QUALITY in line:
        return line.partition(IWLIST_TOKEN_SIGNAL_VALUE)[2].replace('dBm', '').strip()

    match = compile_pattern(IWLIST_PERCENT_SIGNAL_PATTERN).search(line)
    if not match:
        raise FailedToParse(f"Unrecognised iwlist signal level: {line.strip()!r}")

    return str(percent_to_dbm_quality(int(match.group(1))))
