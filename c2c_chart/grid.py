"""Grid state: the single owned color grid of a chart."""
from __future__ import annotations

import logging
from typing import Iterator, List, Sequence, Tuple

from .color import require_hex
from .config import (
    BACKGROUND,
    DEFAULT_GRID_SIZE,
    C2CChartError,
    OutOfBounds,
    clamp_dimension,
)

logger = logging.getLogger("c2c_chart")

Grid = List[List[str]]


def blank_grid(width: int, height: int) -> Grid:
    """Return a ``height x width`` grid filled with background."""
    return [[BACKGROUND] * width for _ in range(height)]


class GridStore:
    """Owns a rectangular grid of ``#RRGGBB`` colors and its dimensions.

    Resizing always replaces the grid with a fresh background-filled one;
    ``set_cell`` is the only in-place edit.
    """

    def __init__(
        self,
        width: int = DEFAULT_GRID_SIZE,
        height: int = DEFAULT_GRID_SIZE,
    ) -> None:
        self._width = 0
        self._height = 0
        self._grid: Grid = []
        self.resize(width, height)

    @classmethod
    def from_rows(
        cls, rows: Sequence[Sequence[str]]
    ) -> "GridStore":
        """Build a store holding a copy of ``rows``.

        Raises:
            C2CChartError: If the rows are empty, ragged, out of range,
                or hold invalid colors.
        """
        height = len(rows)
        width = len(rows[0]) if height else 0
        store = cls(max(width, 1), max(height, 1))
        store.replace(rows)
        return store

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def dimensions(self) -> Tuple[int, int]:
        return self._width, self._height

    def resize(self, width: object, height: object) -> None:
        """Replace the grid with a blank one of the given (clamped) size."""
        new_width = clamp_dimension(width)
        new_height = clamp_dimension(height)
        if (new_width, new_height) != (width, height):
            logger.debug(
                f"Clamped grid size {width!r}x{height!r} to {new_width}x{new_height}"
            )
        self._width = new_width
        self._height = new_height
        self._grid = blank_grid(new_width, new_height)
        logger.debug(f"New {new_width}x{new_height} grid")

    def clear(self) -> None:
        """Reset every cell to background without changing the shape."""
        self.resize(self._width, self._height)

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self._height and 0 <= col < self._width

    def _check_bounds(self, row: int, col: int) -> None:
        if not self.contains(row, col):
            raise OutOfBounds(
                f"Cell ({row}, {col}) outside {self._width}x{self._height} grid"
            )

    def get_cell(self, row: int, col: int) -> str:
        self._check_bounds(row, col)
        return self._grid[row][col]

    def set_cell(self, row: int, col: int, color: str) -> None:
        """Overwrite one cell in place.

        Raises:
            OutOfBounds: If the coordinate is outside the grid.
            C2CChartError: If ``color`` is not a hex color.
        """
        self._check_bounds(row, col)
        self._grid[row][col] = require_hex(color)

    def replace(self, rows: Sequence[Sequence[str]]) -> None:
        """Install a complete grid; its shape becomes the new dimensions.

        Everything is validated before the store is touched, so a failure
        leaves it unchanged.

        Raises:
            C2CChartError: If the rows do not form a valid grid.
        """
        height = len(rows)
        if height == 0:
            raise C2CChartError("Grid must have at least one row")
        width = len(rows[0])
        if width == 0:
            raise C2CChartError("Grid must have at least one column")
        if clamp_dimension(width) != width or clamp_dimension(height) != height:
            raise C2CChartError(f"Grid size {width}x{height} is out of range")

        new_grid: Grid = []
        for y, row in enumerate(rows):
            if len(row) != width:
                raise C2CChartError(
                    f"Row {y} has {len(row)} cells, expected {width}"
                )
            new_grid.append([require_hex(color) for color in row])

        self._width = width
        self._height = height
        self._grid = new_grid

    def to_list(self) -> Grid:
        """Return a deep copy of the grid rows."""
        return [list(row) for row in self._grid]

    @property
    def rows(self) -> Grid:
        return self.to_list()

    def cells(self) -> Iterator[Tuple[int, int, str]]:
        """Yield ``(row, col, color)`` in row-major order."""
        for y, row in enumerate(self._grid):
            for x, color in enumerate(row):
                yield y, x, color

    def colors_used(self) -> List[str]:
        """Return distinct non-background colors in row-major first-seen order."""
        seen: List[str] = []
        found = set()
        for _, _, color in self.cells():
            if color != BACKGROUND and color not in found:
                found.add(color)
                seen.append(color)
        return seen
