"""Pytest fixtures for c2c_chart tests."""
from __future__ import annotations

import io

import numpy as np
import pytest
from PIL import Image

from c2c_chart import Config, GridStore

RED = "#FF0000"
GREEN = "#00FF00"
BLUE = "#0000FF"
WHITE = "#FFFFFF"


@pytest.fixture
def default_config() -> Config:
    """Return a default Config instance."""
    return Config()


@pytest.fixture
def top_left_store() -> GridStore:
    """3 wide, 2 tall, red in the top-left (finish) corner."""
    store = GridStore(width=3, height=2)
    store.set_cell(0, 0, RED)
    return store


@pytest.fixture
def bottom_right_store() -> GridStore:
    """2x2 with green in the bottom-right (start) corner."""
    store = GridStore(width=2, height=2)
    store.set_cell(1, 1, GREEN)
    return store


@pytest.fixture
def strip_store() -> GridStore:
    """One row of four: red, red, white, blue from left to right."""
    return GridStore.from_rows([[RED, RED, WHITE, BLUE]])


@pytest.fixture
def sample_image() -> Image.Image:
    """Create an 8x4 image of 2x2-pixel blocks, 4 across and 2 down.

    Each block maps onto exactly one cell of a 4x2 grid.
    """
    arr = np.zeros((4, 8, 3), dtype=np.uint8)
    colors = [
        [(255, 0, 0), (0, 255, 0), (0, 0, 255), (255, 255, 255)],
        [(0, 0, 0), (255, 153, 0), (102, 51, 0), (204, 204, 204)],
    ]
    for y in range(2):
        for x in range(4):
            arr[y * 2:(y + 1) * 2, x * 2:(x + 1) * 2] = colors[y][x]
    return Image.fromarray(arr, "RGB")


@pytest.fixture
def sample_image_bytes(sample_image: Image.Image) -> bytes:
    """Return sample image as PNG bytes."""
    buf = io.BytesIO()
    sample_image.save(buf, format="PNG")
    return buf.getvalue()

