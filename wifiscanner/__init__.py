"""
List the WiFi access points in range.

Runs the platform's own scanning tool (airport on macOS, iw or iwlist on
Linux, netsh on Windows) and parses its output into WiFiAccessPoint
records:

    import wifiscanner
    for ap in wifiscanner.scan():
        print(ap.mac, ap.ssid, ap.channel, ap.signal_level, ap.security)
"""

from .models import WiFiAccessPoint

from .errors import (
    WiFiScanError,
    CommandNotFound,
    CommandFailed,
    CommandTimeout,
    SyntaxRegexError,
    NoValue,
    FailedToParse,
    NoMatch,
)

from .rssi import (
    percent_to_dbm_quality,
    percent_to_dbm_netsh,
)

from .parsers import (
    ColumnLayout,
    parse_airport_scan,
    extract_first_interface,
    parse_iw_scan,
    parse_iwlist_scan,
    parse_netsh_scan,
)

from .scanner import (
    WiFiScanner,
    scan,
)

__version__ = '0.6.0'

__all__ = [
    # Scanner
    'WiFiScanner',
    'scan',

    # Models
    'WiFiAccessPoint',

    # Errors
    'WiFiScanError',
    'CommandNotFound',
    'CommandFailed',
    'CommandTimeout',
    'SyntaxRegexError',
    'NoValue',
    'FailedToParse',
    'NoMatch',

    # Signal conversion
    'percent_to_dbm_quality',
    'percent_to_dbm_netsh',

    # Parsers
    'ColumnLayout',
    'parse_airport_scan',
    'extract_first_interface',
    'parse_iw_scan',
    'parse_iwlist_scan',
    'parse_netsh_scan',
]
