"""Tests for grid module."""
from __future__ import annotations

import pytest

from c2c_chart.config import BACKGROUND, C2CChartError, OutOfBounds
from c2c_chart.grid import GridStore, blank_grid


class TestResize:
    """Tests for GridStore.resize."""

    def test_default_size(self) -> None:
        """A new store should be a blank 20x20 grid."""
        store = GridStore()
        assert store.dimensions == (20, 20)
        assert store.to_list() == blank_grid(20, 20)

    def test_every_valid_size(self) -> None:
        """Should produce height rows of width background cells."""
        store = GridStore(1, 1)
        for width in range(1, 41):
            for height in range(1, 41):
                store.resize(width, height)
                rows = store.to_list()
                assert len(rows) == height
                assert all(len(row) == width for row in rows)
                assert all(c == BACKGROUND for row in rows for c in row)

    def test_resize_discards_cells(self) -> None:
        """Growing after shrinking should not bring old colors back."""
        store = GridStore(4, 4)
        store.set_cell(3, 3, "#FF0000")
        store.resize(2, 2)
        store.resize(4, 4)
        assert store.get_cell(3, 3) == BACKGROUND

    def test_clamps_invalid_input(self) -> None:
        """Should clamp rather than fail."""
        store = GridStore(5, 5)
        store.resize(0, 99)
        assert store.dimensions == (1, 40)
        store.resize("abc", "7")
        assert store.dimensions == (1, 7)

    def test_clear(self) -> None:
        """Should reset cells and keep the shape."""
        store = GridStore(3, 2)
        store.set_cell(0, 0, "#FF0000")
        store.clear()
        assert store.dimensions == (3, 2)
        assert store.colors_used() == []


class TestSetCell:
    """Tests for GridStore.set_cell."""

    def test_sets_color(self) -> None:
        """Should overwrite one cell with a normalized color."""
        store = GridStore(3, 2)
        store.set_cell(1, 2, "#ff9900")
        assert store.get_cell(1, 2) == "#FF9900"
        assert store.dimensions == (3, 2)

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (2, 0), (0, 3), (5, 5)])
    def test_out_of_bounds(self, row: int, col: int) -> None:
        """Should raise OutOfBounds and leave the grid unchanged."""
        store = GridStore(3, 2)
        before = store.to_list()
        with pytest.raises(OutOfBounds):
            store.set_cell(row, col, "#FF0000")
        assert store.to_list() == before

    def test_invalid_color(self) -> None:
        """Should reject non-hex colors."""
        store = GridStore(2, 2)
        with pytest.raises(C2CChartError, match="Invalid color"):
            store.set_cell(0, 0, "red")

    def test_get_cell_out_of_bounds(self) -> None:
        """Reads should be bounds-checked too."""
        with pytest.raises(OutOfBounds):
            GridStore(2, 2).get_cell(2, 0)


class TestReplace:
    """Tests for GridStore.replace and from_rows."""

    def test_from_rows(self) -> None:
        """Should take dimensions from the rows."""
        store = GridStore.from_rows([["#000000", "#FFFFFF", "#ff0000"]])
        assert store.dimensions == (3, 1)
        assert store.get_cell(0, 2) == "#FF0000"

    def test_ragged_rows(self) -> None:
        """Should reject rows of different lengths."""
        with pytest.raises(C2CChartError, match="Row 1"):
            GridStore.from_rows([["#000000", "#000000"], ["#000000"]])

    def test_empty_rows(self) -> None:
        """Should reject an empty grid."""
        with pytest.raises(C2CChartError):
            GridStore.from_rows([])

    def test_too_large(self) -> None:
        """Should reject grids beyond the editing range."""
        with pytest.raises(C2CChartError, match="out of range"):
            GridStore.from_rows(blank_grid(41, 1))

    def test_failed_replace_keeps_grid(self) -> None:
        """A failed replace should not partially write."""
        store = GridStore(2, 2)
        store.set_cell(0, 0, "#FF0000")
        before = store.to_list()
        with pytest.raises(C2CChartError):
            store.replace([["#000000", "#000000"], ["#000000", "oops"]])
        assert store.to_list() == before

    def test_to_list_is_copy(self) -> None:
        """Mutating the returned rows should not touch the store."""
        store = GridStore(2, 2)
        rows = store.to_list()
        rows[0][0] = "#000000"
        assert store.get_cell(0, 0) == BACKGROUND


class TestColorsUsed:
    """Tests for GridStore.colors_used."""

    def test_row_major_order(self) -> None:
        """Should list colors by first appearance in row-major order."""
        store = GridStore.from_rows([
            ["#FFFFFF", "#0000FF"],
            ["#FF0000", "#0000FF"],
        ])
        assert store.colors_used() == ["#0000FF", "#FF0000"]

    def test_ignores_background(self) -> None:
        """Background should never be listed."""
        assert GridStore(3, 3).colors_used() == []
