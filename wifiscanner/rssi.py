"""
Signal strength conversions.

Some tools report signal as a percentage instead of dBm. These helpers map
those encodings onto dBm using integer arithmetic that truncates toward
zero, so results match the values the tools' own documentation derives.
"""

from __future__ import annotations


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero (Python's // floors)."""
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def percent_to_dbm_quality(value: int) -> int:
    """
    Convert an iwlist 'Signal level=N/100' reading to dBm.

    Example: 48 -> -76
    """
    return _trunc_div(_trunc_div(100 * value, 100), 2) - 100


def percent_to_dbm_netsh(percent: int) -> int:
    """
    Convert a netsh 'Signal : N%' reading to dBm.

    Example: 16 -> -92
    """
    return _trunc_div(percent, 2) - 100
