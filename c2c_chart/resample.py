"""Image import using direct nearest-pixel sampling."""
from __future__ import annotations

import io
import logging

import numpy as np
from PIL import Image

from .color import rgb_to_hex
from .config import C2CChartError, DecodeError, clamp_dimension
from .grid import Grid, GridStore

logger = logging.getLogger("c2c_chart")


def sample_image(img: Image.Image, width: int, height: int) -> Grid:
    """Map an image onto a ``width x height`` grid.

    The image is scaled (not cropped) to exactly one pixel per cell with
    nearest-neighbour resampling, so every cell takes the color of a single
    source pixel. Non-uniform scaling is accepted. Alpha is ignored.

    Args:
        img: Decoded source image of any size and mode.
        width: Target grid width in cells.
        height: Target grid height in cells.

    Returns:
        Row-major grid of ``#RRGGBB`` colors.

    Raises:
        C2CChartError: If the target dimensions are out of range.
    """
    if clamp_dimension(width) != width or clamp_dimension(height) != height:
        raise C2CChartError(f"Grid size {width}x{height} is out of range")

    rgb = img.convert("RGB")
    if rgb.size != (width, height):
        rgb = rgb.resize((width, height), resample=Image.NEAREST)

    arr = np.array(rgb, dtype=np.uint8)
    grid: Grid = []
    for y in range(height):
        grid.append([rgb_to_hex(*arr[y, x, :3]) for x in range(width)])

    logger.debug(f"Sampled {img.size[0]}x{img.size[1]} image into {width}x{height} grid")
    return grid


def decode_image(input_bytes: bytes) -> Image.Image:
    """Decode image bytes with Pillow.

    Raises:
        DecodeError: If the bytes are not a readable image.
    """
    try:
        img = Image.open(io.BytesIO(input_bytes))
        img.load()
    except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as exc:
        raise DecodeError(f"Could not decode image: {exc}") from exc
    return img


def sample_image_bytes(input_bytes: bytes, width: int, height: int) -> Grid:
    """Decode image bytes and sample them into a grid."""
    return sample_image(decode_image(input_bytes), width, height)


def import_image(store: GridStore, input_bytes: bytes) -> None:
    """Replace the store's grid with a sampling of the given image.

    The store keeps its dimensions. On ``DecodeError`` it is left untouched.
    """
    grid = sample_image_bytes(input_bytes, store.width, store.height)
    store.replace(grid)
