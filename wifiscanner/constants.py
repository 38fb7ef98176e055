"""
WiFi scanning constants.

Tool locations, command lines, and the literal tokens and patterns each
parser keys on.
"""

from __future__ import annotations

# =============================================================================
# PLATFORMS
# =============================================================================

PLATFORM_DARWIN = 'darwin'
PLATFORM_LINUX = 'linux'
PLATFORM_WINDOWS = 'windows'

# =============================================================================
# TOOLS
# =============================================================================

TOOL_AIRPORT = 'airport'
TOOL_IW = 'iw'
TOOL_IWLIST = 'iwlist'
TOOL_NETSH = 'netsh'

LINUX_SCAN_TOOLS = (TOOL_IW, TOOL_IWLIST)

DEFAULT_AIRPORT_PATH = (
    '/System/Library/PrivateFrameworks/Apple80211.framework'
    '/Versions/Current/Resources/airport'
)

# Wireless tools usually live in sbin, which is not on a regular user's PATH
DEFAULT_SYSTEM_PATH = '/usr/sbin:/sbin'

DEFAULT_SCAN_TIMEOUT = 30.0

IW_DEV_COMMAND = ['iw', 'dev']
IWLIST_SCAN_COMMAND = ['iwlist', 'scan']
NETSH_SCAN_COMMAND = ['netsh.exe', 'wlan', 'show', 'networks', 'mode=Bssid']


def iw_scan_command(interface: str) -> list[str]:
    """Command line for an iw scan on one interface."""
    return ['iw', 'dev', interface, 'scan']


# =============================================================================
# AIRPORT (macOS)
# =============================================================================

AIRPORT_HEADER_BSSID = 'BSSID'
AIRPORT_HEADER_RSSI = 'RSSI'
AIRPORT_HEADER_CHANNEL = 'CHANNEL'
AIRPORT_HEADER_HT = 'HT'
AIRPORT_HEADER_SECURITY = 'SECURITY'

# =============================================================================
# IW (Linux)
# =============================================================================

IW_INTERFACE_MARKER = '\tInterface '

IW_TAG_BSS = 'BSS '
IW_TAG_SIGNAL = '\tsignal: '
IW_TAG_CHANNEL = '\tDS Parameter set: channel '
IW_TAG_SSID = '\tSSID: '

IW_BSS_TERMINATOR = '('
IW_SIGNAL_TERMINATOR = ' dBm'

# =============================================================================
# IWLIST (Linux)
# =============================================================================

IWLIST_CELL_PATTERN = r'Cell [0-9]{2,} - Address:'
IWLIST_MAC_PATTERN = r'([0-9A-Fa-f]{2}:){5}[0-9A-Fa-f]{2}'
IWLIST_PERCENT_SIGNAL_PATTERN = r'Signal level=(\d+)/100'

IWLIST_TAG_ESSID = 'ESSID:'
IWLIST_TAG_FREQUENCY = 'Frequency:'
IWLIST_TAG_SIGNAL = 'Signal level'
IWLIST_TOKEN_QUALITY = 'Quality'
IWLIST_TOKEN_CHANNEL = 'Channel'
IWLIST_TOKEN_SIGNAL_VALUE = 'Signal level='

# =============================================================================
# NETSH (Windows)
# =============================================================================

NETSH_BLOCK_DELIMITER = '\nSSID'
NETSH_SSID_PATTERN = r'^ [0-9]* : '
NETSH_MAC_PATTERN = r'[a-fA-F0-9:]{17}'

NETSH_TAG_AUTHENTICATION = 'Authentication'
NETSH_TAG_BSSID = 'BSSID'
NETSH_TAG_SIGNAL = 'Signal'
NETSH_TAG_CHANNEL = 'Channel'
