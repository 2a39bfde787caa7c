"""Color tokens for bookmark entries."""

from __future__ import annotations

import re
from typing import Callable

ColorParser = Callable[[str], tuple[int, bool]]

_COLOR_PREFIX = "color:"
_HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def parse_color(token: str) -> tuple[int, bool]:
    """Parse a ``color:#rrggbb`` (or ``color:#rgb``) token.

    Args:
        token: A single metadata token.

    Returns:
        Tuple of (value, ok) where value is 0xRRGGBB. value is 0 when ok is
        False.
    """
    if not token.startswith(_COLOR_PREFIX):
        return 0, False
    hex_value = token[len(_COLOR_PREFIX) :]
    if not _HEX_COLOR_RE.match(hex_value):
        return 0, False
    digits = hex_value[1:]
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return int(digits, 16), True


def format_color(value: int) -> str:
    """Format 0xRRGGBB as the token parse_color reads back."""
    return f"{_COLOR_PREFIX}#{value:06x}"
