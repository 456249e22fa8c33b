"""
Fault-line generation worker.

Each pass picks two distinct random points, takes the directed line
between them as a fault, and raises every point to the left of that
line by a single random increment in [1, 10].
"""

import threading
from typing import Optional, Tuple

import numpy as np
import structlog

from ..utils.random import get_rng
from .errors import DegenerateGridError
from .fault_budget import FaultBudget
from .grid import Grid, Point

logger = structlog.get_logger()

# Inclusive range of the per-fault height increment
MIN_ADJUSTMENT = 1
MAX_ADJUSTMENT = 10


def is_left(end1: Point, end2: Point, point: Point) -> bool:
    """
    Check whether a point lies strictly left of the directed line end1 -> end2.

    Uses the sign of the 2-D cross product. Points on the line are not left.
    """
    cross = (end2.x - end1.x) * (point.y - end1.y) - (point.x - end1.x) * (end2.y - end1.y)
    return cross > 0


def left_mask(grid: Grid, end1: Point, end2: Point) -> np.ndarray:
    """
    Classify every cell of the grid against the line end1 -> end2.

    Vectorized form of ``is_left``.

    Returns:
        Boolean array of shape (grid.height, grid.width), True where left
    """
    xs, ys = grid.coordinates()
    cross = (end2.x - end1.x) * (ys - end1.y) - (xs - end1.x) * (end2.y - end1.y)
    return cross > 0


class FaultGenerator:
    """
    Worker that applies fault passes until the shared budget runs out.

    Intended as the ``target`` of a ``threading.Thread``. Any exception
    raised inside the loop is kept on ``error`` for the owner to re-raise
    after joining.
    """

    def __init__(
        self,
        grid: Grid,
        budget: FaultBudget,
        cancel_event: Optional[threading.Event] = None,
        name: str = "generator",
    ):
        self.grid = grid
        self.budget = budget
        self.cancel_event = cancel_event
        self.name = name
        self.faults_applied = 0
        self.finished = False
        self.error: Optional[BaseException] = None

    def pick_endpoints(self) -> Tuple[Point, Point]:
        """Sample two points with distinct coordinates."""
        if len(self.grid) < 2:
            raise DegenerateGridError(
                f"A {self.grid.width}x{self.grid.height} grid has no two distinct points"
            )

        end1 = self.grid.sample()
        end2 = self.grid.sample()
        while end2 == end1:
            end2 = self.grid.sample()
        return end1, end2

    def raise_fault(self, end1: Point, end2: Point) -> int:
        """
        Raise every point left of the fault by one random increment.

        Returns:
            Number of points raised
        """
        adj = int(get_rng().integers(MIN_ADJUSTMENT, MAX_ADJUSTMENT + 1))
        return self.grid.raise_where(left_mask(self.grid, end1, end2), adj)

    def generate_fault(self) -> int:
        end1, end2 = self.pick_endpoints()
        return self.raise_fault(end1, end2)

    def _cancelled(self) -> bool:
        return self.cancel_event is not None and self.cancel_event.is_set()

    def run(self) -> None:
        """Claim and apply faults until the budget is exhausted or cancelled."""
        try:
            while not self._cancelled() and self.budget.claim():
                self.generate_fault()
                self.faults_applied += 1
        except Exception as e:
            self.error = e
            logger.error("Fault generator failed", worker=self.name, error=str(e))
        finally:
            self.finished = True
