"""
Helpers for cutting raw tool output into lines and blocks.
"""

from __future__ import annotations

import re
from functools import lru_cache

from .errors import SyntaxRegexError


@lru_cache(maxsize=None)
def compile_pattern(pattern: str) -> re.Pattern:
    """Compile an internal pattern, reporting failures as SyntaxRegexError."""
    try:
        return re.compile(pattern)
    except re.error as e:
        raise SyntaxRegexError(f"Invalid pattern {pattern!r}: {e}") from e


def split_lines(text: str) -> list[str]:
    """
    Split text into lines without their terminators.

    Handles both '\\n' and '\\r\\n' endings. A trailing newline does not
    produce a final empty line, and empty text has no lines.
    """
    lines = text.split('\n')
    if lines and lines[-1] == '':
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]


def split_blocks(text: str, pattern: str) -> list[str]:
    """
    Split text before every match of a regex, dropping the matches.

    The segment ahead of the first match is kept as the first block.
    """
    return compile_pattern(pattern).split(text)


def split_on_marker(text: str, marker: str) -> list[str]:
    """Split text on a literal marker, dropping the marker."""
    return text.split(marker)
