"""
Data models for WiFi scan results.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class WiFiAccessPoint:
    """
    One sighting of a wireless network as reported by a scanning tool.

    Every field is text exactly as the tool emitted it (after trimming).
    Fields the tool does not expose are empty strings, never None.
    """

    mac: str = ''
    ssid: str = ''
    channel: str = ''
    signal_level: str = ''  # dBm
    security: str = ''

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)
