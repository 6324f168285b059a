"""Color token utilities."""
from __future__ import annotations

import re
from typing import Optional, Tuple

from .config import C2CChartError

HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")


def normalize_hex(value: str) -> Optional[str]:
    """Normalize a color string to uppercase ``#RRGGBB``.

    Args:
        value: Color with or without the leading ``#``.

    Returns:
        The normalized token, or None if the value is not a 6-digit hex color.
    """
    if not isinstance(value, str):
        return None
    match = HEX_RE.match(value.strip())
    if match is None:
        return None
    return "#" + match.group(1).upper()


def require_hex(value: str) -> str:
    """Normalize a color string, raising if it is not valid."""
    normalized = normalize_hex(value)
    if normalized is None:
        raise C2CChartError(f"Invalid color value: {value!r}")
    return normalized


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Compose 8-bit RGB channels into a ``#RRGGBB`` token."""
    return f"#{int(r):02X}{int(g):02X}{int(b):02X}"


def hex_to_rgb(value: str) -> Tuple[int, int, int]:
    """Split a hex color token into 8-bit RGB channels."""
    token = require_hex(value)
    return int(token[1:3], 16), int(token[3:5], 16), int(token[5:7], 16)
