"""Tests for terrain rendering."""

import matplotlib.pyplot as plt
import numpy as np

from fault_terrain import render
from fault_terrain.core.grid import Grid


class TestShade:
    """Test height to colour conversion."""

    def test_flat_terrain(self):
        """Test that a flat grid renders at the base shade everywhere."""
        image = render.shade(Grid(5, 5))

        assert image.dtype == np.uint8
        assert image.shape == (5, 5, 4)
        np.testing.assert_array_equal(image[..., 0], 50)
        np.testing.assert_array_equal(image[..., 1], 50)
        np.testing.assert_array_equal(image[..., 2], 255)
        np.testing.assert_array_equal(image[..., 3], 255)

    def test_highest_point_is_palest(self):
        grid = Grid(6, 5)
        grid.point(4, 1).raise_by(10)

        image = render.shade(grid)

        assert image.shape == (5, 6, 4)
        assert tuple(image[1, 4]) == (255, 255, 255, 255)
        assert tuple(image[0, 0]) == (50, 50, 255, 255)

    def test_intermediate_shade(self):
        """Test that shades scale linearly with height."""
        grid = Grid(5, 5)
        grid.point(0, 0).raise_by(10)
        grid.point(1, 0).raise_by(5)

        image = render.shade(grid)

        assert image[0, 1, 0] == 50 + int(0.5 * 205)


class TestSavePng:
    """Test image output."""

    def test_writes_png(self, tmp_path):
        grid = Grid(7, 5)
        grid.point(3, 3).raise_by(4)

        output = render.save_png(grid, tmp_path / "images" / "terrain.png")

        assert output.exists()
        assert output.is_absolute()
        assert plt.imread(output).shape[:2] == (5, 7)

    def test_open_image(self, tmp_path, monkeypatch):
        opened = []
        monkeypatch.setattr(render.webbrowser, "open", lambda uri: opened.append(uri) or True)

        assert render.open_image(tmp_path / "terrain.png")
        assert opened and opened[0].startswith("file://")
