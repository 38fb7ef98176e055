"""
Parser for Windows netsh output.

Example output from 'netsh wlan show networks mode=Bssid':
Interface name : Wi-Fi
There are 2 networks currently visible.

SSID 1 : MyWiFi
    Network type            : Infrastructure
    Authentication          : WPA2-Personal
    Encryption              : CCMP
    BSSID 1                 : 00:11:22:33:44:55
         Signal             : 84%
         Radio type         : 802.11n
         Channel            : 6
         Basic rates (Mbps) : 1 2 5.5 11
    BSSID 2                 : 00:11:22:33:44:66
         Signal             : 40%
         Radio type         : 802.11ac
         Channel            : 36

One SSID block may list several BSSIDs. Each BSSID line starts a new
sighting; the Signal and Channel lines that follow it belong to that
sighting. SSID and authentication are shared by the whole block.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..constants import (
    NETSH_BLOCK_DELIMITER,
    NETSH_MAC_PATTERN,
    NETSH_SSID_PATTERN,
    NETSH_TAG_AUTHENTICATION,
    NETSH_TAG_BSSID,
    NETSH_TAG_CHANNEL,
    NETSH_TAG_SIGNAL,
)
from ..errors import FailedToParse, NoMatch
from ..models import WiFiAccessPoint
from ..rssi import percent_to_dbm_netsh
from ..splitter import compile_pattern, split_lines, split_on_marker

logger = logging.getLogger(__name__)


@dataclass
class _Sighting:
    """One BSSID of an SSID block, filled in line by line."""

    mac: str
    channel: str = ''
    signal_level: str = ''

    @property
    def is_complete(self) -> bool:
        return bool(self.mac and self.channel and self.signal_level)


def parse_netsh_scan(output: str) -> list[WiFiAccessPoint]:
    """
    Parse netsh wlan output.

    Args:
        output: Raw output from 'netsh wlan show networks mode=Bssid'.

    Returns:
        List of WiFiAccessPoint objects, one per complete BSSID sighting.

    Raises:
        NoMatch: If a BSSID line carries no MAC address.
        FailedToParse: If a signal percentage is not an integer.
    """
    access_points = []

    for block in split_on_marker(output, NETSH_BLOCK_DELIMITER):
        access_points.extend(_parse_netsh_block(block))

    logger.debug(f"Parsed {len(access_points)} networks from netsh output")
    return access_points


def _parse_netsh_block(block: str) -> list[WiFiAccessPoint]:
    """Parse one SSID block into its BSSID sightings."""
    ssid_regex = compile_pattern(NETSH_SSID_PATTERN)

    ssid = ''
    security = ''
    sightings: list[_Sighting] = []

    for line in split_lines(block):
        current = sightings[-1] if sightings else None

        if ssid_regex.match(line):
            ssid = _value_after_colon(line)
        elif NETSH_TAG_AUTHENTICATION in line:
            security = _value_after_colon(line)
        elif NETSH_TAG_BSSID in line:
            sightings.append(_Sighting(mac=_parse_mac(line)))
        elif NETSH_TAG_SIGNAL in line:
            if current and not current.signal_level:
                current.signal_level = str(percent_to_dbm_netsh(_parse_percent(line)))
        elif NETSH_TAG_CHANNEL in line:
            # First Channel line wins; later ones are e.g. 'Channel Utilization'
            if current and not current.channel:
                current.channel = _value_after_colon(line)

    access_points = []
    for sighting in sightings:
        if not sighting.is_complete:
            logger.debug(f"Dropping incomplete netsh sighting for {ssid!r}: {sighting}")
            continue
        access_points.append(WiFiAccessPoint(
            mac=sighting.mac,
            ssid=ssid,
            channel=sighting.channel,
            signal_level=sighting.signal_level,
            security=security,
        ))

    return access_points


def _value_after_colon(line: str) -> str:
    return line.partition(':')[2].strip()


def _parse_mac(line: str) -> str:
    match = compile_pattern(NETSH_MAC_PATTERN).search(line)
    if not match:
        raise NoMatch(f"No MAC address on netsh BSSID line: {line.strip()!r}")
    return match.group(0)


def _parse_percent(line: str) -> int:
    value = _value_after_colon(line).replace('%', '').strip()
    try:
        return int(value)
    except ValueError as e:
        raise FailedToParse(f"Invalid netsh signal percentage: {value!r}") from e
