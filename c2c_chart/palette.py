"""Palette loading and color naming utilities."""
from __future__ import annotations

import csv
import os
from dataclasses import dataclass
from typing import Dict, List, Optional

from .color import normalize_hex
from .config import C2CChartError


@dataclass(frozen=True)
class PaletteEntry:
    """A named palette color."""

    name: str
    color: str


@dataclass
class Palette:
    """An ordered set of named colors used for painting and yarn labels."""

    entries: List[PaletteEntry]

    def __post_init__(self) -> None:
        self._names: Dict[str, str] = {}
        for entry in self.entries:
            self._names.setdefault(entry.color, entry.name)

    @property
    def colors(self) -> List[str]:
        return [entry.color for entry in self.entries]

    def name_for(self, color: str) -> Optional[str]:
        """Return the palette name of an exact color match, if any."""
        return self._names.get(color)


DEFAULT_PALETTE = Palette(
    entries=[
        PaletteEntry("Red", "#FF0000"),
        PaletteEntry("Orange", "#FF9900"),
        PaletteEntry("Yellow", "#FFFF00"),
        PaletteEntry("Green", "#00FF00"),
        PaletteEntry("Blue", "#0000FF"),
        PaletteEntry("Purple", "#9900FF"),
        PaletteEntry("Pink", "#FF00FF"),
        PaletteEntry("White", "#FFFFFF"),
        PaletteEntry("Black", "#000000"),
        PaletteEntry("Gray", "#CCCCCC"),
        PaletteEntry("Brown", "#663300"),
        PaletteEntry("Dark Green", "#006600"),
    ]
)


def resolve_palette_path(palette_name: str) -> str:
    """Resolve a palette name to its file path.

    Args:
        palette_name: Path to a palette CSV, with or without the extension.

    Returns:
        Path to the palette CSV file.

    Raises:
        C2CChartError: If the palette file is not found.
    """
    if os.path.exists(palette_name):
        return palette_name

    candidate = palette_name
    if not candidate.lower().endswith(".csv"):
        candidate = f"{candidate}.csv"
    if os.path.exists(candidate):
        return candidate

    raise C2CChartError(f"Palette not found: {palette_name}")


def load_palette(palette_name: str) -> Palette:
    """Load a named palette from a CSV file.

    Each non-empty row holds ``name,hex``. Rows whose first column starts
    with ``#`` are comments.

    Args:
        palette_name: Palette path.

    Returns:
        Palette with the named colors in file order.

    Raises:
        C2CChartError: If the palette cannot be loaded.
    """
    palette_path = resolve_palette_path(palette_name)
    entries: List[PaletteEntry] = []

    with open(palette_path, newline="", encoding="utf-8") as f:
        reader = csv.reader(f)
        for row in reader:
            if not row or not "".join(row).strip():
                continue
            if row[0].lstrip().startswith("#"):
                continue
            if len(row) < 2:
                raise C2CChartError(
                    f"Invalid palette row in {palette_path}: {row}"
                )
            name = row[0].strip()
            color = normalize_hex(row[1])
            if not name or color is None:
                raise C2CChartError(
                    f"Invalid palette row in {palette_path}: {row}"
                )
            entries.append(PaletteEntry(name=name, color=color))

    if not entries:
        raise C2CChartError(f"No colors found in palette: {palette_path}")
    return Palette(entries=entries)
