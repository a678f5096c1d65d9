"""
Unit convention helpers.

Token tables store bare numbers as quantities in root-em units; strings pass
through unchanged. Numbers are stringified the way a browser-side config would
print them, so ``1.0`` becomes ``"1"`` and ``0.125`` stays ``"0.125"``.
"""

from __future__ import annotations

import re
from typing import Any

_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def format_number(value: int | float) -> str:
    """Stringify a number without a trailing ``.0`` for integral floats."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def stringify(value: Any) -> str:
    """Stringify a token leaf value."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float):
        return format_number(value)
    return str(value)


def to_rem(value: Any) -> str:
    """Apply the unit convention: bare numbers are rem, strings pass through."""
    if isinstance(value, bool):
        return stringify(value)
    if isinstance(value, int | float):
        return f"{format_number(value)}rem"
    return str(value)


def negate(value: Any) -> str:
    """Negative form of a spacing value (``1`` -> ``-1rem``, ``1px`` -> ``-1px``)."""
    if isinstance(value, int | float) and not isinstance(value, bool):
        return f"-{format_number(value)}rem"
    return f"-{value}"


def parse_float(value: Any) -> float | None:
    """Parse the leading number of a CSS length (``"1.5rem"`` -> ``1.5``).

    Returns:
        The number, or None if the string does not start with one.
    """
    if isinstance(value, int | float) and not isinstance(value, bool):
        return float(value)
    match = _LEADING_NUMBER.match(str(value))
    if match is None:
        return None
    return float(match.group(1))


def unit_of(value: str) -> str:
    """Return the unit suffix of a CSS length (``"1.5rem"`` -> ``"rem"``)."""
    match = _LEADING_NUMBER.match(value)
    if match is None:
        return ""
    return value[match.end() :].strip()
