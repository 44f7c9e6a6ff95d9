"""Hex colour tag parsing for team colours."""
from __future__ import annotations

import string
from typing import Optional, Tuple

Rgba = Tuple[int, int, int, int]

_HEX_DIGITS = set(string.hexdigits)


def parse_hex_color(value: str) -> Optional[Rgba]:
    """
    Parse a team colour tag into an (r, g, b, a) tuple, 0-255 per channel.

    Non-alphanumeric characters (the leading '#', whitespace) are stripped
    first. Accepted lengths:
    - 3 digits: RGB, each nibble expanded (0xF -> 0xFF)
    - 6 digits: RGB
    - 8 digits: ARGB

    Args:
        value: colour tag such as "#AA0000", "0f0" or "#80FF0000"

    Returns:
        the colour, or None when the tag is not a valid hex colour
    """
    digits = "".join(ch for ch in value if ch.isalnum())
    if not digits or not set(digits) <= _HEX_DIGITS:
        return None

    n = int(digits, 16)
    if len(digits) == 3:
        return ((n >> 8) * 17, (n >> 4 & 0xF) * 17, (n & 0xF) * 17, 255)
    if len(digits) == 6:
        return (n >> 16, n >> 8 & 0xFF, n & 0xFF, 255)
    if len(digits) == 8:
        return (n >> 16 & 0xFF, n >> 8 & 0xFF, n & 0xFF, n >> 24)
    return None
