"""
Configuration for the WiFi scanner.

Every setting can be overridden with a WIFISCANNER_<NAME> environment
variable. Values are read once, at import.
"""

from __future__ import annotations

import logging
import os

from .constants import (
    DEFAULT_AIRPORT_PATH,
    DEFAULT_SCAN_TIMEOUT,
    DEFAULT_SYSTEM_PATH,
    LINUX_SCAN_TOOLS,
    TOOL_IW,
)

logger = logging.getLogger(__name__)

ENV_PREFIX = 'WIFISCANNER_'


def _get_env(key: str, default: str) -> str:
    """Get environment variable with default."""
    return os.environ.get(f'{ENV_PREFIX}{key}', default)


def _get_env_choice(key: str, default: str, choices: tuple[str, ...]) -> str:
    """Get environment variable restricted to choices, falling back to default."""
    val = _get_env(key, default).lower()
    if val not in choices:
        logger.warning(
            f"Ignoring {ENV_PREFIX}{key}={val!r} (expected one of {', '.join(choices)}); "
            f"using {default!r}"
        )
        return default
    return val


def _get_env_float(key: str, default: float) -> float:
    """Get environment variable as float with default."""
    try:
        return float(_get_env(key, str(default)))
    except ValueError:
        return default


def _get_env_bool(key: str, default: bool) -> bool:
    """Get environment variable as boolean with default."""
    val = _get_env(key, '').lower()
    if not val:
        return default
    return val in ('true', '1', 'yes', 'on')


# Which tool drives a Linux scan: 'iw' (two-step) or 'iwlist'
LINUX_SCAN_TOOL = _get_env_choice('LINUX_TOOL', TOOL_IW, LINUX_SCAN_TOOLS)

# Seconds to wait for a scanning tool before giving up
SCAN_TIMEOUT = _get_env_float('SCAN_TIMEOUT', DEFAULT_SCAN_TIMEOUT)

# Appended to PATH when running Linux tools
SYSTEM_PATH = _get_env('SYSTEM_PATH', DEFAULT_SYSTEM_PATH)

AIRPORT_PATH = _get_env('AIRPORT_PATH', DEFAULT_AIRPORT_PATH)

DEBUG = _get_env_bool('DEBUG', False)
LOG_LEVEL = _get_env('LOG_LEVEL', 'WARNING').upper()


def configure_logging() -> None:
    """Configure root logging from LOG_LEVEL / DEBUG."""
    level = logging.DEBUG if DEBUG else getattr(logging, LOG_LEVEL, logging.WARNING)
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
