"""Region-id raster maps for hit testing and area statistics.

Regions are painted in id order, so each pixel holds the index of the topmost
region covering it, or -1 for background.
"""

import math
from pathlib import Path
from typing import Sequence

import numpy as np
from PIL import Image, ImageDraw

from .base import Region
from .paths import flatten

BACKGROUND = -1


def rasterize_regions(
    regions: Sequence[Region], size: float, arc_segments: int = 48
) -> np.ndarray:
    """Paint region boundaries into an index map.

    Args:
        regions: Regions in paint order.
        size: Canvas width and height.
        arc_segments: Line segments used to flatten each arc.

    Returns:
        HxW int32 array of region indices (-1 = background).
    """
    side = int(math.ceil(size))
    image = Image.new("I", (side, side), 0)
    draw = ImageDraw.Draw(image)
    for index, region in enumerate(regions):
        points = flatten(region.boundary, arc_segments)
        draw.polygon(points, fill=index + 1)
    return np.array(image, dtype=np.int32) + BACKGROUND


def region_at(region_map: np.ndarray, x: float, y: float) -> int | None:
    """Return the topmost region index at a canvas position.

    Returns:
        Region index, or None for background or out-of-bounds positions.
    """
    height, width = region_map.shape
    col, row = int(math.floor(x)), int(math.floor(y))
    if not (0 <= col < width and 0 <= row < height):
        return None
    value = int(region_map[row, col])
    return None if value == BACKGROUND else value


def region_areas(region_map: np.ndarray, num_regions: int) -> list[int]:
    """Visible pixel count per region index."""
    visible = region_map[region_map != BACKGROUND].ravel()
    return np.bincount(visible, minlength=num_regions)[:num_regions].tolist()


def encode_region_map(region_map: np.ndarray) -> Image.Image:
    """Encode an index map as RGB.

    Encoding: value = index + 1 = r + (g << 8) + (b << 16), so background
    is black.
    """
    values = (region_map.astype(np.int64) - BACKGROUND).astype(np.uint32)
    r = (values & 0xFF).astype(np.uint8)
    g = ((values >> 8) & 0xFF).astype(np.uint8)
    b = ((values >> 16) & 0xFF).astype(np.uint8)
    return Image.fromarray(np.stack([r, g, b], axis=-1))


def decode_region_map(image: Image.Image) -> np.ndarray:
    """Inverse of encode_region_map."""
    arr = np.array(image.convert("RGB"), dtype=np.uint32)
    values = arr[:, :, 0] + (arr[:, :, 1] << 8) + (arr[:, :, 2] << 16)
    return values.astype(np.int32) + BACKGROUND


def save_region_map(region_map: np.ndarray, path: Path) -> None:
    """Write an index map as region_ids-style PNG."""
    encode_region_map(region_map).save(path)


def load_region_map(path: Path) -> np.ndarray:
    """Read an index map written by save_region_map."""
    with Image.open(path) as img:
        return decode_region_map(img)
