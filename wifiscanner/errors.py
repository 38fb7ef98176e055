"""
Exceptions raised while scanning for and parsing WiFi networks.
"""

from __future__ import annotations

from typing import Optional


class WiFiScanError(Exception):
    """Base class for all scan and parse failures."""

    kind = 'WiFiScanError'

    def __init__(self, message: str = ''):
        super().__init__(message or self.kind)
        self.message = message or self.kind


class CommandNotFound(WiFiScanError):
    """The scanning tool is missing or cannot be executed."""

    kind = 'CommandNotFound'


class CommandFailed(WiFiScanError):
    """The scanning tool exited with a non-zero status."""

    kind = 'CommandFailed'

    def __init__(self, message: str = '', returncode: Optional[int] = None, stderr: str = ''):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class CommandTimeout(WiFiScanError):
    """The scanning tool did not finish within the configured timeout."""

    kind = 'CommandTimeout'


class SyntaxRegexError(WiFiScanError):
    """An internal pattern failed to compile."""

    kind = 'SyntaxRegexError'


class NoValue(WiFiScanError):
    """An expected token or segment is absent from the output."""

    kind = 'NoValue'


class FailedToParse(WiFiScanError):
    """A numeric or structural parse of tool output failed."""

    kind = 'FailedToParse'


class NoMatch(WiFiScanError):
    """A required pattern did not match where a value was mandatory."""

    kind = 'NoMatch'
