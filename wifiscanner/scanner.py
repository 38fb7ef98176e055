"""
WiFi scanner coordinator.

Picks the scanning tool for the running platform, runs it through a
command runner, and hands the output to the matching parser:

- macOS: airport -s
- Linux: iw dev, then iw dev <interface> scan (or iwlist scan)
- Windows: netsh wlan show networks mode=Bssid
"""

from __future__ import annotations

import logging
import platform
from typing import Callable, Optional

from .config import AIRPORT_PATH, LINUX_SCAN_TOOL, SCAN_TIMEOUT, SYSTEM_PATH
from .constants import (
    IW_DEV_COMMAND,
    IWLIST_SCAN_COMMAND,
    LINUX_SCAN_TOOLS,
    NETSH_SCAN_COMMAND,
    PLATFORM_DARWIN,
    PLATFORM_LINUX,
    PLATFORM_WINDOWS,
    TOOL_AIRPORT,
    TOOL_IW,
    TOOL_IWLIST,
    TOOL_NETSH,
    iw_scan_command,
)
from .errors import CommandNotFound, WiFiScanError
from .models import WiFiAccessPoint
from .parsers import (
    extract_first_interface,
    parse_airport_scan,
    parse_iw_scan,
    parse_iwlist_scan,
    parse_netsh_scan,
)
from .runner import run_command

logger = logging.getLogger(__name__)

# (cmd, timeout, extra_path) -> decoded stdout
CommandRunner = Callable[[list[str], float, Optional[str]], str]


class WiFiScanner:
    """
    One-shot WiFi scanner.

    Holds only settings; every scan() call runs the tool afresh and keeps
    nothing afterwards.
    """

    def __init__(
        self,
        runner: Optional[CommandRunner] = None,
        platform_name: Optional[str] = None,
        linux_tool: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize WiFi scanner.

        Args:
            runner: Runs a command and returns its stdout (default: subprocess).
            platform_name: 'darwin', 'linux' or 'windows' (default: detected).
            linux_tool: 'iw' or 'iwlist' (default: LINUX_SCAN_TOOL).
            timeout: Seconds allowed per tool invocation (default: SCAN_TIMEOUT).
        """
        self._runner = runner or run_command
        self.platform = (platform_name or platform.system()).lower()
        self.linux_tool = (linux_tool or LINUX_SCAN_TOOL).lower()
        self.timeout = timeout if timeout is not None else SCAN_TIMEOUT

    @property
    def tool(self) -> str:
        """
        Name of the tool this scanner will run.

        Raises:
            CommandNotFound: If the platform, or the configured Linux tool,
                has no supported scanner.
        """
        if self.platform == PLATFORM_DARWIN:
            return TOOL_AIRPORT
        if self.platform == PLATFORM_LINUX:
            if self.linux_tool not in LINUX_SCAN_TOOLS:
                raise CommandNotFound(
                    f"Unknown Linux scan tool {self.linux_tool!r} "
                    f"(expected one of {', '.join(LINUX_SCAN_TOOLS)})"
                )
            return self.linux_tool
        if self.platform == PLATFORM_WINDOWS:
            return TOOL_NETSH
        raise CommandNotFound(f"No WiFi scanning tool for platform {self.platform!r}")

    def scan(self) -> list[WiFiAccessPoint]:
        """
        Scan for nearby access points.

        Returns:
            Access points in the order the tool reported them.

        Raises:
            WiFiScanError: If the tool cannot be run or its output parsed.
        """
        tool = self.tool
        logger.info(f"Scanning for WiFi networks with {tool}")

        try:
            if tool == TOOL_AIRPORT:
                access_points = self._scan_with_airport()
            elif tool == TOOL_IW:
                access_points = self._scan_with_iw()
            elif tool == TOOL_IWLIST:
                access_points = self._scan_with_iwlist()
            else:
                access_points = self._scan_with_netsh()
        except WiFiScanError as e:
            logger.warning(f"WiFi scan with {tool} failed: {e.kind}: {e.message}")
            raise

        logger.info(f"WiFi scan complete: {len(access_points)} networks found using {tool}")
        return access_points

    def find_interface(self) -> str:
        """
        Name of the first wireless interface reported by 'iw dev'.

        Raises:
            NoValue: If iw lists no interface.
        """
        output = self._run(IW_DEV_COMMAND, SYSTEM_PATH)
        interface = extract_first_interface(output)
        logger.debug(f"Using wireless interface {interface}")
        return interface

    def _run(self, cmd: list[str], extra_path: Optional[str] = None) -> str:
        return self._runner(cmd, self.timeout, extra_path)

    def _scan_with_airport(self) -> list[WiFiAccessPoint]:
        """Scan using macOS airport utility."""
        return parse_airport_scan(self._run([AIRPORT_PATH, '-s']))

    def _scan_with_iw(self) -> list[WiFiAccessPoint]:
        """Scan using iw on the first wireless interface."""
        interface = self.find_interface()
        return parse_iw_scan(self._run(iw_scan_command(interface), SYSTEM_PATH))

    def _scan_with_iwlist(self) -> list[WiFiAccessPoint]:
        """Scan using iwlist on all interfaces."""
        return parse_iwlist_scan(self._run(IWLIST_SCAN_COMMAND, SYSTEM_PATH))

    def _scan_with_netsh(self) -> list[WiFiAccessPoint]:
        """Scan using Windows netsh."""
        return parse_netsh_scan(self._run(NETSH_SCAN_COMMAND))


def scan(linux_tool: Optional[str] = None, timeout: Optional[float] = None) -> list[WiFiAccessPoint]:
    """
    Scan for nearby access points on this machine.

    Args:
        linux_tool: 'iw' or 'iwlist' on Linux (default: LINUX_SCAN_TOOL).
        timeout: Seconds allowed per tool invocation (default: SCAN_TIMEOUT).

    Returns:
        Access points in the order the tool reported them.
    """
    return WiFiScanner(linux_tool=linux_tool, timeout=timeout).scan()
