"""
Height grid for fault-line terrain generation.

Heights live in a single NumPy array indexed ``[y, x]``. Each Point is a
lightweight view onto one cell of that array. Writes are guarded by one
lock per grid row, so workers raising different rows never contend and a
raise on any single cell is never lost.
"""

import threading
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import numpy as np

from ..utils.random import get_rng


@dataclass
class TerrainStats:
    """Summary statistics of a height grid."""

    min_height: int
    max_height: int
    mean_height: float
    total_mass: int


class Point:
    """A single grid cell with a mutable height counter."""

    __slots__ = ("_x", "_y", "_grid")

    def __init__(self, grid: "Grid", x: int, y: int):
        self._grid = grid
        self._x = x
        self._y = y

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def height(self) -> int:
        """Current height. Raises still in flight on other threads may not be visible."""
        return int(self._grid._heights[self._y, self._x])

    def raise_by(self, amount: int) -> None:
        """
        Raise this point's height.

        Args:
            amount: Positive increment
        """
        if amount <= 0:
            raise ValueError(f"Raise amount must be positive, got {amount}")
        with self._grid._row_locks[self._y]:
            self._grid._heights[self._y, self._x] += amount

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __hash__(self):
        return hash((self._x, self._y))

    def __repr__(self):
        return f"Point(x={self._x}, y={self._y}, height={self.height})"


class Grid:
    """
    Dense W x H lattice of Points.

    The Point population is fully built in the constructor and never
    changes size afterwards.
    """

    def __init__(self, width: int, height: int):
        """
        Build the grid.

        Args:
            width: Number of columns (x range)
            height: Number of rows (y range)
        """
        if width < 1 or height < 1:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

        self.width = width
        self.height = height

        self._heights = np.zeros((height, width), dtype=np.int64)
        self._row_locks = [threading.Lock() for _ in range(height)]

        # x-major population order
        self._points: List[Point] = [
            Point(self, x, y) for x in range(width) for y in range(height)
        ]
        self._coordinates: Optional[Tuple[np.ndarray, np.ndarray]] = None

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def point(self, x: int, y: int) -> Point:
        """Look up the Point at the given coordinates."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) is outside a {self.width}x{self.height} grid")
        return self._points[x * self.height + y]

    def sample(self) -> Point:
        """Return a uniformly random Point using the calling thread's generator."""
        return self._points[int(get_rng().integers(len(self._points)))]

    def coordinates(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        Get the x and y coordinate of every cell.

        Returns:
            Tuple of (xs, ys), each an int64 array of shape (height, width)
        """
        if self._coordinates is None:
            ys, xs = np.indices((self.height, self.width), dtype=np.int64)
            xs.setflags(write=False)
            ys.setflags(write=False)
            self._coordinates = (xs, ys)
        return self._coordinates

    def raise_where(self, mask: np.ndarray, amount: int) -> int:
        """
        Raise every cell selected by a boolean mask.

        Rows are updated one at a time under their own lock, which makes
        this equivalent to calling ``raise_by`` on each selected Point.

        Args:
            mask: Boolean array of shape (height, width)
            amount: Positive increment

        Returns:
            Number of cells raised
        """
        if amount <= 0:
            raise ValueError(f"Raise amount must be positive, got {amount}")
        if mask.shape != self._heights.shape:
            raise ValueError(
                f"Mask shape {mask.shape} does not match grid shape {self._heights.shape}"
            )

        raised = 0
        for y in np.flatnonzero(mask.any(axis=1)):
            row_mask = mask[y]
            with self._row_locks[y]:
                self._heights[y, row_mask] += amount
            raised += int(np.count_nonzero(row_mask))
        return raised

    def heights(self) -> np.ndarray:
        """Copy of the height array, shape (height, width), indexed [y, x]."""
        return self._heights.copy()

    def min_height(self) -> int:
        return int(self._heights.min())

    def max_height(self) -> int:
        return int(self._heights.max())

    def stats(self) -> TerrainStats:
        """Compute summary statistics from a single snapshot of the heights."""
        snapshot = self.heights()
        return TerrainStats(
            min_height=int(snapshot.min()),
            max_height=int(snapshot.max()),
            mean_height=float(snapshot.mean()),
            total_mass=int(snapshot.sum()),
        )

    def __repr__(self):
        return f"Grid(width={self.width}, height={self.height})"
