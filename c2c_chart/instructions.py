"""C2C row-by-row instruction generation.

Walks the diagonals of a grid from the bottom-right (start) corner to the
top-left (finish) corner, tags every working row as increasing or
decreasing, and run-length encodes the colors along it into stitch groups.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple, Union

from .config import BACKGROUND
from .diagonal import diagonal_cells, diagonal_count, diagonal_length
from .grid import GridStore
from .palette import DEFAULT_PALETTE, Palette

logger = logging.getLogger("c2c_chart")

INCREASE = "increase"
DECREASE = "decrease"

BACKGROUND_LABEL = "Background"
ALL_BACKGROUND = "All background"


@dataclass(frozen=True)
class LegendEntry:
    """Display label for one yarn color."""

    color: str
    name: str
    ordinal: int

    @property
    def label(self) -> str:
        return f"{self.name} (Color {self.ordinal})"


class ColorLegend:
    """Ordered mapping of non-background colors to yarn labels."""

    def __init__(self, entries: Sequence[LegendEntry]) -> None:
        self.entries: List[LegendEntry] = list(entries)
        self._by_color: Dict[str, LegendEntry] = {e.color: e for e in self.entries}

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def __contains__(self, color: object) -> bool:
        return color in self._by_color

    def label(self, color: str) -> str:
        if color == BACKGROUND:
            return BACKGROUND_LABEL
        return self._by_color[color].label


@dataclass(frozen=True)
class ColorRun:
    """A maximal run of same-colored blocks within a working row."""

    color: str
    label: str
    count: int

    def __str__(self) -> str:
        return f"{self.count} {self.label}"


@dataclass(frozen=True)
class InstructionRow:
    """One C2C working row (one diagonal of the grid)."""

    diagonal_index: int
    block_count: int
    phase: str
    runs: Tuple[ColorRun, ...]

    @property
    def row_number(self) -> int:
        return self.diagonal_index + 1

    @property
    def is_decreasing(self) -> bool:
        return self.phase == DECREASE

    @property
    def text(self) -> str:
        if not self.runs:
            return ALL_BACKGROUND
        return ", ".join(str(run) for run in self.runs)

    def __str__(self) -> str:
        return (
            f"Row {self.row_number} ({self.block_count} blocks, {self.phase}): "
            f"{self.text}"
        )


@dataclass(frozen=True)
class InstructionSet:
    """Legend plus the ordered working rows of a chart."""

    width: int
    height: int
    legend: ColorLegend
    rows: Tuple[InstructionRow, ...]

    @property
    def transition_index(self) -> Optional[int]:
        """Position in ``rows`` of the first decreasing row, if any."""
        for i, row in enumerate(self.rows):
            if row.is_decreasing:
                return i
        return None


def build_legend(
    store: GridStore, palette: Optional[Palette] = None
) -> ColorLegend:
    """Label every non-background color present in the grid.

    Colors are numbered in row-major scan order of first appearance. A color
    that exactly matches a palette entry takes that entry's name, any other
    color is called ``Color N`` after its ordinal.
    """
    palette = palette or DEFAULT_PALETTE
    entries: List[LegendEntry] = []
    for ordinal, color in enumerate(store.colors_used(), start=1):
        name = palette.name_for(color) or f"Color {ordinal}"
        entries.append(LegendEntry(color=color, name=name, ordinal=ordinal))
    return ColorLegend(entries)


def row_phase(diagonal: int, width: int, height: int) -> str:
    """Classify a diagonal as part of the increase or the decrease section.

    Rows increase until the diagonal reaches the shorter grid edge. On a
    square grid the single diagonal as long as both edges opens the
    decrease section.
    """
    shorter = min(width, height)
    if diagonal >= shorter:
        return DECREASE
    if width == height and diagonal_length(diagonal, width, height) == shorter:
        return DECREASE
    return INCREASE


def encode_runs(
    colors: Sequence[str], legend: ColorLegend
) -> Tuple[ColorRun, ...]:
    """Run-length encode a row's block colors into stitch groups.

    Background blocks close the open run and are never emitted themselves.
    """
    runs: List[ColorRun] = []
    current: Optional[str] = None
    count = 0

    for color in colors:
        if color == BACKGROUND:
            if current is not None:
                runs.append(ColorRun(current, legend.label(current), count))
                current = None
                count = 0
        elif color == current:
            count += 1
        else:
            if current is not None:
                runs.append(ColorRun(current, legend.label(current), count))
            current = color
            count = 1

    if current is not None:
        runs.append(ColorRun(current, legend.label(current), count))

    return tuple(runs)


def generate_instructions(
    grid: Union[GridStore, Sequence[Sequence[str]]],
    palette: Optional[Palette] = None,
) -> InstructionSet:
    """Generate the legend and every working row for a grid.

    Args:
        grid: A GridStore or a row-major list of color rows.
        palette: Palette used for color names. Defaults to the built-in one.

    Returns:
        InstructionSet with rows ordered from the start corner (row 1) to
        the finish corner.
    """
    store = grid if isinstance(grid, GridStore) else GridStore.from_rows(grid)
    width, height = store.dimensions
    legend = build_legend(store, palette)
    cells = store.to_list()

    rows: List[InstructionRow] = []
    for diagonal in range(diagonal_count(width, height)):
        blocks = diagonal_cells(diagonal, width, height)
        if not blocks:
            continue
        colors = [cells[row][col] for row, col in blocks]
        rows.append(
            InstructionRow(
                diagonal_index=diagonal,
                block_count=len(blocks),
                phase=row_phase(diagonal, width, height),
                runs=encode_runs(colors, legend),
            )
        )

    logger.debug(
        f"Generated {len(rows)} rows for {width}x{height} grid "
        f"with {len(legend)} colors"
    )
    return InstructionSet(width=width, height=height, legend=legend, rows=tuple(rows))
