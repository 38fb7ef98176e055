"""
Runs the platform scanning tools and captures their output.
"""

from __future__ import annotations

import logging
import os
import subprocess
from typing import Optional

from .errors import CommandFailed, CommandNotFound, CommandTimeout

logger = logging.getLogger(__name__)


def build_env(extra_path: Optional[str] = None) -> Optional[dict]:
    """
    Environment for a tool invocation.

    Appends extra_path to PATH (or uses it as PATH when none is set).
    Returns None, meaning "inherit", when there is nothing to add.
    """
    if not extra_path:
        return None

    env = dict(os.environ)
    current = env.get('PATH')
    env['PATH'] = f"{current}:{extra_path}" if current else extra_path
    return env


def run_command(
    cmd: list[str],
    timeout: float,
    extra_path: Optional[str] = None,
) -> str:
    """
    Run a tool to completion and return its stdout.

    Output is decoded as UTF-8 with undecodable bytes replaced, since
    SSIDs are arbitrary bytes.

    Raises:
        CommandNotFound: The tool is missing or could not be executed.
        CommandTimeout: The tool ran longer than timeout seconds.
        CommandFailed: The tool exited non-zero.
    """
    logger.debug(f"Running: {' '.join(cmd)}")

    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            timeout=timeout,
            env=build_env(extra_path),
        )
    except FileNotFoundError as e:
        raise CommandNotFound(f"{cmd[0]} not found") from e
    except PermissionError as e:
        raise CommandNotFound(f"{cmd[0]} is not executable") from e
    except OSError as e:
        raise CommandNotFound(f"{cmd[0]} could not be executed: {e}") from e
    except subprocess.TimeoutExpired as e:
        raise CommandTimeout(f"{cmd[0]} timed out after {timeout}s") from e

    stdout = result.stdout.decode('utf-8', errors='replace')

    if result.returncode != 0:
        stderr = result.stderr.decode('utf-8', errors='replace').strip()
        error_msg = stderr or f"{cmd[0]} returned code {result.returncode}"
        if 'Operation not permitted' in error_msg or 'Permission denied' in error_msg:
            error_msg = f"{cmd[0]} requires root privileges: {error_msg}"
        raise CommandFailed(error_msg, returncode=result.returncode, stderr=stderr)

    return stdout
