"""
Tests for region index maps.
"""

import math

import numpy as np
import pytest

from mandalas import PatternCanvas, rasterize_regions, region_areas, region_at
from mandalas.raster import (
    BACKGROUND,
    decode_region_map,
    encode_region_map,
    load_region_map,
    save_region_map,
)


@pytest.fixture
def nested_regions():
    """A disc with a square painted over its center."""
    canvas = PatternCanvas(["#E53935", "#1E88E5"])
    canvas.add_circle(50, 50, 40)
    canvas.add_polygon([(40, 40), (60, 40), (60, 60), (40, 60)])
    return canvas.regions


class TestRasterize:
    """Painting regions into an index map."""

    def test_shape_and_dtype(self, nested_regions):
        region_map = rasterize_regions(nested_regions, 100)
        assert region_map.shape == (100, 100)
        assert region_map.dtype == np.int32

    def test_topmost_region_wins(self, nested_regions):
        region_map = rasterize_regions(nested_regions, 100)
        assert region_at(region_map, 50, 50) == 1
        assert region_at(region_map, 50, 20) == 0

    def test_background(self, nested_regions):
        region_map = rasterize_regions(nested_regions, 100)
        assert region_map[2, 2] == BACKGROUND
        assert region_at(region_map, 2, 2) is None

    def test_out_of_bounds(self, nested_regions):
        region_map = rasterize_regions(nested_regions, 100)
        assert region_at(region_map, -1, 50) is None
        assert region_at(region_map, 50, 100) is None

    def test_areas(self, nested_regions):
        region_map = rasterize_regions(nested_regions, 100)
        disc, square = region_areas(region_map, 2)
        assert square == pytest.approx(400, rel=0.15)
        assert disc == pytest.approx(math.pi * 40 ** 2 - 400, rel=0.05)

    def test_hidden_region_has_zero_area(self):
        canvas = PatternCanvas(["#000"])
        canvas.add_circle(20, 20, 5)
        canvas.add_circle(20, 20, 15)
        region_map = rasterize_regions(canvas.regions, 40)
        assert region_areas(region_map, 2)[0] == 0

    def test_fractional_size_rounds_up(self, nested_regions):
        assert rasterize_regions(nested_regions, 99.5).shape == (100, 100)


class TestEncoding:
    """RGB region id images."""

    def test_background_is_black(self, nested_regions):
        image = encode_region_map(rasterize_regions(nested_regions, 100))
        assert image.mode == "RGB"
        assert image.getpixel((0, 0)) == (0, 0, 0)
        assert image.getpixel((50, 50)) == (2, 0, 0)

    def test_large_indices_use_all_channels(self):
        region_map = np.array([[BACKGROUND, 0], [255, 70000]], dtype=np.int32)
        image = encode_region_map(region_map)
        assert image.getpixel((1, 1)) == (0x71, 0x11, 0x01)
        assert np.array_equal(decode_region_map(image), region_map)

    def test_png_file(self, nested_regions, tmp_path):
        region_map = rasterize_regions(nested_regions, 100)
        path = tmp_path / "region_ids.png"
        save_region_map(region_map, path)
        assert np.array_equal(load_region_map(path), region_map)
