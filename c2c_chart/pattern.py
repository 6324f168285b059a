"""C2C chart rendering utilities."""
from __future__ import annotations

import io
import logging
from typing import List, Sequence, Tuple, Union

from PIL import Image, ImageDraw, ImageFont

from .color import hex_to_rgb
from .diagonal import diagonal_index
from .grid import GridStore

logger = logging.getLogger("c2c_chart")

NUMBER_GUTTER = 40
BORDER_COLOR = (204, 204, 204)
NUMBER_COLOR = (102, 102, 102)
DIAGONAL_BAND_COLOR = (100, 100, 100, 77)


def _text_size(draw: ImageDraw.ImageDraw, text: str, font: ImageFont.ImageFont) -> Tuple[float, float]:
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    return right - left, bottom - top


def column_labels(width: int) -> List[int]:
    """Column numbers left to right; column 1 is the right edge."""
    return [width - i for i in range(width)]


def row_labels(height: int) -> List[int]:
    """Row numbers top to bottom; row 1 is the bottom edge."""
    return [height - i for i in range(height)]


def render_chart(
    grid: Union[GridStore, Sequence[Sequence[str]]],
    cell_size: int = 20,
    show_numbers: bool = True,
    show_diagonals: bool = True,
) -> Image.Image:
    """Render a C2C chart image from a color grid.

    Args:
        grid: A GridStore or a row-major list of color rows.
        cell_size: Pixel size of each block in the output.
        show_numbers: Draw column numbers above and row numbers left of
            the grid, counted from the bottom-right start corner.
        show_diagonals: Shade every other diagonal working row.

    Returns:
        RGB PIL Image with the rendered chart.
    """
    store = grid if isinstance(grid, GridStore) else GridStore.from_rows(grid)
    width, height = store.dimensions
    cells = store.to_list()

    offset = NUMBER_GUTTER if show_numbers else 0
    total_w = width * cell_size + offset
    total_h = height * cell_size + offset

    chart = Image.new("RGB", (total_w, total_h), "white")
    draw = ImageDraw.Draw(chart, "RGBA")
    font = ImageFont.load_default()

    if show_numbers:
        for i, label in enumerate(column_labels(width)):
            text = str(label)
            text_w, text_h = _text_size(draw, text, font)
            x = offset + i * cell_size + (cell_size - text_w) / 2
            y = (offset - text_h) / 2
            draw.text((x, y), text, fill=NUMBER_COLOR, font=font)

        for i, label in enumerate(row_labels(height)):
            text = str(label)
            text_w, text_h = _text_size(draw, text, font)
            x = (offset - text_w) / 2
            y = offset + i * cell_size + (cell_size - text_h) / 2
            draw.text((x, y), text, fill=NUMBER_COLOR, font=font)

    # Cells
    for y in range(height):
        for x in range(width):
            x0 = offset + x * cell_size
            y0 = offset + y * cell_size
            draw.rectangle(
                [x0, y0, x0 + cell_size - 1, y0 + cell_size - 1],
                fill=hex_to_rgb(cells[y][x]),
            )

    # Diagonal bands
    if show_diagonals:
        for y in range(height):
            for x in range(width):
                if diagonal_index(y, x, width, height) % 2 != 0:
                    continue
                x0 = offset + x * cell_size
                y0 = offset + y * cell_size
                draw.rectangle(
                    [x0, y0, x0 + cell_size - 1, y0 + cell_size - 1],
                    fill=DIAGONAL_BAND_COLOR,
                )

    # Borders
    for y in range(height):
        for x in range(width):
            x0 = offset + x * cell_size
            y0 = offset + y * cell_size
            draw.rectangle(
                [x0, y0, x0 + cell_size - 1, y0 + cell_size - 1],
                outline=BORDER_COLOR,
            )

    logger.debug(f"Rendered {width}x{height} chart at {total_w}x{total_h}px")
    return chart


def render_chart_bytes(
    grid: Union[GridStore, Sequence[Sequence[str]]],
    cell_size: int = 20,
    show_numbers: bool = True,
    show_diagonals: bool = True,
) -> bytes:
    """Render a chart and encode it as PNG bytes."""
    chart = render_chart(
        grid,
        cell_size=cell_size,
        show_numbers=show_numbers,
        show_diagonals=show_diagonals,
    )
    out_buf = io.BytesIO()
    chart.save(out_buf, format="PNG")
    return out_buf.getvalue()
