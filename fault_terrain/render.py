"""
Render a height grid as a shaded PNG image.

Heights are normalised to the grid's own min/max range and mapped to
shades of blue: low ground is dark blue, high ground is pale.
"""

import webbrowser
from pathlib import Path
from typing import Union

import matplotlib.pyplot as plt
import numpy as np
import structlog

from .core.grid import Grid

logger = structlog.get_logger()

BASE_SHADE = 50
SHADE_RANGE = 205


def shade(grid: Grid) -> np.ndarray:
    """
    Convert grid heights to an RGBA image.

    Args:
        grid: Finished height grid

    Returns:
        uint8 array of shape (grid.height, grid.width, 4)
    """
    heights = grid.heights().astype(np.float64)
    low = heights.min()
    span = heights.max() - low

    if span > 0:
        level = ((heights - low) / span * SHADE_RANGE).astype(np.int64)
    else:
        # Flat terrain
        level = np.zeros(heights.shape, dtype=np.int64)

    image = np.empty(heights.shape + (4,), dtype=np.uint8)
    image[..., 0] = BASE_SHADE + level
    image[..., 1] = BASE_SHADE + level
    image[..., 2] = 255
    image[..., 3] = 255
    return image


def save_png(grid: Grid, path: Union[str, Path]) -> Path:
    """
    Render the grid and write it as a PNG.

    Returns:
        Resolved path of the written image
    """
    output = Path(path).resolve()
    output.parent.mkdir(parents=True, exist_ok=True)
    plt.imsave(output, shade(grid), format="png")
    logger.info("Image saved", path=str(output))
    return output


def open_image(path: Union[str, Path]) -> bool:
    """Open an image with the platform's default viewer."""
    opened = webbrowser.open(Path(path).resolve().as_uri())
    if not opened:
        logger.warning("Could not open image", path=str(path))
    return opened
