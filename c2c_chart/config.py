"""Configuration and validation for the C2C chart tool."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

BACKGROUND = "#FFFFFF"

MIN_GRID_SIZE = 1
MAX_GRID_SIZE = 40
DEFAULT_GRID_SIZE = 20

DEFAULT_YARN_TYPE = "medium"

# Yarn weight id -> display name, in selection order
YARN_TYPES: Dict[str, str] = {
    "thread": "Thread/Lace (Size 10, 20, 30)",
    "fine": "Fine/Sport (Size 2)",
    "light": "Light/DK (Size 3)",
    "medium": "Medium/Worsted (Size 4)",
    "bulky": "Bulky (Size 5)",
    "super-bulky": "Super Bulky (Size 6)",
}

OUTPUT_FORMATS = ("png", "json", "txt", "html")


class C2CChartError(Exception):
    """Base exception for C2C chart errors."""

    pass


class OutOfBounds(C2CChartError, IndexError):
    """A cell coordinate lies outside the current grid dimensions."""

    pass


class DecodeError(C2CChartError):
    """An uploaded image could not be decoded."""

    pass


@dataclass
class Config:
    """Configuration for chart import and export."""

    input_path: str = ""
    output_path: str = ""
    width: int = DEFAULT_GRID_SIZE
    height: int = DEFAULT_GRID_SIZE
    yarn_type: str = DEFAULT_YARN_TYPE
    output_format: Optional[str] = None
    palette: Optional[str] = None
    cell_size: int = 20
    show_numbers: bool = True
    show_diagonals: bool = True
    timing: bool = False


def clamp_dimension(value: object, default: int = MIN_GRID_SIZE) -> int:
    """Coerce a grid dimension into the editable range.

    Non-numeric input falls back to ``default``; numbers are clamped to
    ``[MIN_GRID_SIZE, MAX_GRID_SIZE]``. Never raises.

    Args:
        value: Raw dimension (int, numeric string, or anything else).
        default: Value used when ``value`` cannot be read as an integer.

    Returns:
        A dimension within bounds.
    """
    try:
        number = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        number = default
    if number < MIN_GRID_SIZE:
        return MIN_GRID_SIZE
    if number > MAX_GRID_SIZE:
        return MAX_GRID_SIZE
    return number


def yarn_display_name(yarn_type: str) -> str:
    """Return the display name for a yarn weight id.

    Raises:
        C2CChartError: If the id is not one of the known yarn weights.
    """
    try:
        return YARN_TYPES[yarn_type]
    except (KeyError, TypeError):
        raise C2CChartError(
            f"Unknown yarn type: '{yarn_type}'. "
            f"Expected one of: {', '.join(YARN_TYPES)}"
        ) from None
