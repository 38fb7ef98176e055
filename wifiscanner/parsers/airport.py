"""
Parser for macOS airport utility output.

Example output from 'airport -s':
                            SSID BSSID             RSSI CHANNEL HT CC SECURITY (auth/unicast/group)
                          MyWiFi 00:11:22:33:44:55 -65  6       Y  US WPA2(PSK/AES/AES)
                     Guest House 00:11:22:33:44:66 -70  36,+1   Y  US NONE

The columns are fixed-width and right-aligned under the header, so each
row is sliced at the header's column offsets rather than split on
whitespace (SSIDs may contain spaces).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..constants import (
    AIRPORT_HEADER_BSSID,
    AIRPORT_HEADER_CHANNEL,
    AIRPORT_HEADER_HT,
    AIRPORT_HEADER_RSSI,
    AIRPORT_HEADER_SECURITY,
)
from ..errors import FailedToParse
from ..models import WiFiAccessPoint
from ..splitter import split_lines

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColumnLayout:
    """Start offsets of the airport columns, taken from the header line."""

    bssid: int
    rssi: int
    channel: int
    ht: int
    security: int

    @classmethod
    def from_header(cls, header: str) -> ColumnLayout:
        """
        Locate each column header in the header line.

        Raises:
            FailedToParse: If any expected column header is missing.
        """
        offsets = {}
        for name, token in (
            ('bssid', AIRPORT_HEADER_BSSID),
            ('rssi', AIRPORT_HEADER_RSSI),
            ('channel', AIRPORT_HEADER_CHANNEL),
            ('ht', AIRPORT_HEADER_HT),
            ('security', AIRPORT_HEADER_SECURITY),
        ):
            offset = header.find(token)
            if offset < 0:
                raise FailedToParse(f"airport header is missing column {token!r}")
            offsets[name] = offset
        return cls(**offsets)

    def slice(self, line: str) -> WiFiAccessPoint:
        """Cut one data row into an access point."""
        return WiFiAccessPoint(
            ssid=line[:self.bssid].strip(),
            mac=line[self.bssid:self.rssi].strip(),
            signal_level=line[self.rssi:self.channel].strip(),
            channel=line[self.channel:self.ht].strip(),
            security=line[self.security:].strip(),
        )


def parse_airport_scan(output: str) -> list[WiFiAccessPoint]:
    """
    Parse macOS airport scan output.

    Args:
        output: Raw output from 'airport -s' command.

    Returns:
        List of WiFiAccessPoint objects, in output order.

    Raises:
        FailedToParse: If the header line lacks an expected column.
    """
    lines = split_lines(output)
    if not lines:
        return []

    layout = ColumnLayout.from_header(lines[0])

    access_points = []
    for line in lines[1:]:
        if not line.strip():
            continue
        access_points.append(layout.slice(line))

    logger.debug(f"Parsed {len(access_points)} networks from airport output")
    return access_points
