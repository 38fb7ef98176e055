"""
WiFi scan output parsers.

Each parser converts tool-specific output into WiFiAccessPoint objects.
"""

from .airport import ColumnLayout, parse_airport_scan
from .iw import extract_first_interface, parse_iw_scan
from .iwlist import parse_iwlist_scan
from .netsh import parse_netsh_scan

__all__ = [
    'ColumnLayout',
    'parse_airport_scan',
    'extract_first_interface',
    'parse_iw_scan',
    'parse_iwlist_scan',
    'parse_netsh_scan',
]
