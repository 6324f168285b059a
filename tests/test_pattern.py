"""Tests for chart rendering."""
from __future__ import annotations

import io

from PIL import Image

from c2c_chart.grid import GridStore
from c2c_chart.pattern import (
    BORDER_COLOR,
    NUMBER_GUTTER,
    column_labels,
    render_chart,
    render_chart_bytes,
    row_labels,
)


def _center(x: int, y: int, offset: int, cell_size: int = 20):
    return (offset + x * cell_size + cell_size // 2, offset + y * cell_size + cell_size // 2)


class TestLabels:
    """Tests for reversed chart numbering."""

    def test_column_labels(self) -> None:
        """Columns should count down left to right."""
        assert column_labels(4) == [4, 3, 2, 1]

    def test_row_labels(self) -> None:
        """Rows should count down top to bottom."""
        assert row_labels(3) == [3, 2, 1]


class TestRenderChart:
    """Tests for render_chart function."""

    def test_size_with_numbers(self) -> None:
        """Numbering should add a gutter on the top and left."""
        chart = render_chart(GridStore(3, 2), cell_size=20)
        assert chart.size == (3 * 20 + NUMBER_GUTTER, 2 * 20 + NUMBER_GUTTER)

    def test_size_without_numbers(self) -> None:
        """Without numbering the chart is just the cells."""
        chart = render_chart(GridStore(3, 2), cell_size=10, show_numbers=False)
        assert chart.size == (30, 20)

    def test_cell_fill(self, top_left_store: GridStore) -> None:
        """Cells should be filled with their color."""
        chart = render_chart(top_left_store, show_numbers=False, show_diagonals=False)
        assert chart.getpixel(_center(0, 0, 0)) == (255, 0, 0)
        assert chart.getpixel(_center(1, 0, 0)) == (255, 255, 255)

    def test_cell_border(self) -> None:
        """Cells should be outlined."""
        chart = render_chart(GridStore(2, 2), show_numbers=False, show_diagonals=False)
        assert chart.getpixel((0, 10)) == BORDER_COLOR
        assert chart.getpixel((20, 10)) == BORDER_COLOR

    def test_diagonal_banding(self) -> None:
        """Even diagonals should be shaded, odd ones left alone."""
        store = GridStore(3, 2)
        chart = render_chart(store, show_numbers=False, show_diagonals=True)
        # (0, 0) is on diagonal 3, (1, 2) on diagonal 0, (0, 2) on diagonal 1
        assert chart.getpixel(_center(0, 0, 0)) == (255, 255, 255)
        assert chart.getpixel(_center(2, 0, 0)) == (255, 255, 255)
        shaded = chart.getpixel(_center(2, 1, 0))
        assert shaded != (255, 255, 255)
        assert shaded[0] == shaded[1] == shaded[2]

    def test_numbers_drawn(self) -> None:
        """The gutter should contain label ink when numbering is on."""
        chart = render_chart(GridStore(3, 2), show_diagonals=False)
        gutter = chart.crop((NUMBER_GUTTER, 0, chart.size[0], NUMBER_GUTTER))
        assert any(px != (255, 255, 255) for px in gutter.getdata())

    def test_deterministic(self, top_left_store: GridStore) -> None:
        """Same grid and options should give identical pixels."""
        first = render_chart(top_left_store)
        second = render_chart(top_left_store)
        assert first.tobytes() == second.tobytes()

    def test_accepts_plain_rows(self) -> None:
        """Should accept nested lists of colors."""
        chart = render_chart([["#0000FF"]], show_numbers=False, show_diagonals=False)
        assert chart.getpixel((10, 10)) == (0, 0, 255)


class TestRenderChartBytes:
    """Tests for render_chart_bytes function."""

    def test_returns_png(self) -> None:
        """Should return PNG bytes of the chart."""
        data = render_chart_bytes(GridStore(2, 2), show_numbers=False)
        assert data[:8] == b"\x89PNG\r\n\x1a\n"
        assert Image.open(io.BytesIO(data)).size == (40, 40)
