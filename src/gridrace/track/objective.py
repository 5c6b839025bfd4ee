"""
Objectives - Objective areas announced by the server and target selection.

Defines:
- ObjectiveArea: rectangle of interest, may overhang the grid
- ObjectivePoint: single target coordinate
- choose_objective_point: best-value cell inside an area
"""

from dataclasses import dataclass
from typing import Optional, Tuple
import numpy as np

from gridrace.track.grid import Grid


@dataclass(frozen=True)
class ObjectivePoint:
    """Single grid coordinate used as a movement target."""
    x: int
    y: int

    @property
    def position(self) -> np.ndarray:
        """Get the point as an [x, y] array."""
        return np.array([self.x, self.y])


@dataclass(frozen=True)
class ObjectiveArea:
    """Rectangular region announced by the server.

    (x, y) is the top-left corner, (w, h) the extents. The rectangle
    covers x <= i < x + w and y <= j < y + h and is clipped against the
    grid only when queried.
    """
    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    def clipped(self, size: int) -> Tuple[range, range]:
        """Get the in-bounds row and column ranges of this area.

        Args:
            size: Grid side length

        Returns:
            (rows, cols) ranges, either may be empty
        """
        rows = range(max(self.x, 0), min(self.x + self.w, size))
        cols = range(max(self.y, 0), min(self.y + self.h, size))
        return rows, cols

    def get_state(self) -> dict:
        """Get area state for serialization."""
        return {"x": self.x, "y": self.y, "w": self.w, "h": self.h}


def choose_objective_point(
    grid: Grid,
    area: ObjectiveArea,
) -> Optional[ObjectivePoint]:
    """Select the highest-value cell of an area.

    Cells outside the grid are skipped. Among equal maxima the first one
    in row-major order (smallest i, then smallest j) wins.

    Args:
        grid: Grid to score cells with
        area: Area to search

    Returns:
        Best point, or None if the area has no cell inside the grid
    """
    rows, cols = area.clipped(grid.size)
    if not rows or not cols:
        return None

    window = grid.values[rows.start:rows.stop, cols.start:cols.stop]
    # argmax picks the first maximum in C order: i outer, j inner
    i, j = np.unravel_index(int(np.argmax(window)), window.shape)
    return ObjectivePoint(rows.start + int(i), cols.start + int(j))
