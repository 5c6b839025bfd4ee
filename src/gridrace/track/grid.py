"""
Grid - Square board of bonus/malus cell values.

Contains:
- Row-major cell storage (index(r, c) = r * size + c)
- Bounded point queries
- Freeze-after-construction semantics
"""

from typing import Iterable, Dict, Any
import numpy as np


class Grid:
    """Square matrix of integer cell values.

    Cells are filled during construction and frozen afterwards; the
    underlying numpy array is marked read-only once ``Grid.create``
    returns.

    Out-of-range access is a contract violation and raises ``IndexError``.
    Nothing in the package catches it.

    Usage:
        grid = Grid.create(3, [0, 0, 0, 0, 0, 0, 0, 0, 5])
        grid.value_at(2, 2)  # 5
    """

    def __init__(self, size: int):
        """Initialize an all-zero grid open for construction.

        Args:
            size: Side length, must be positive
        """
        if size <= 0:
            raise ValueError(f"Grid size must be positive, got {size}")

        self._size = size
        self._values = np.zeros((size, size), dtype=np.int64)
        self._frozen = False

    @classmethod
    def create(cls, size: int, values: Iterable[int]) -> "Grid":
        """Build a frozen grid from row-major values.

        Args:
            size: Side length
            values: size * size cell values in row-major order

        Returns:
            Frozen grid
        """
        grid = cls(size)
        values = list(values)
        if len(values) != size * size:
            raise ValueError(
                f"Expected {size * size} cell values for a grid of size {size}, "
                f"got {len(values)}"
            )

        for index, value in enumerate(values):
            r, c = divmod(index, size)
            grid.set_value(r, c, value)

        grid.freeze()
        return grid

    @property
    def size(self) -> int:
        """Side length of the grid."""
        return self._size

    @property
    def values(self) -> np.ndarray:
        """Read-only view of the cells, shape (size, size)."""
        view = self._values.view()
        view.flags.writeable = False
        return view

    @property
    def is_frozen(self) -> bool:
        """Check if construction has completed."""
        return self._frozen

    def freeze(self) -> None:
        """End the construction phase."""
        self._frozen = True
        self._values.flags.writeable = False

    def contains(self, r: int, c: int) -> bool:
        """Check if (r, c) lies inside [0, size) on both axes."""
        return 0 <= r < self._size and 0 <= c < self._size

    def _check_bounds(self, r: int, c: int) -> None:
        # numpy would silently wrap negative indices
        if not self.contains(r, c):
            raise IndexError(
                f"Grid access ({r}, {c}) outside [0, {self._size})"
            )

    def value_at(self, r: int, c: int) -> int:
        """Get the cell value at (r, c).

        Args:
            r: Row index
            c: Column index

        Returns:
            Cell value
        """
        self._check_bounds(r, c)
        return int(self._values[r, c])

    def set_value(self, r: int, c: int, value: int) -> None:
        """Set a cell value during construction.

        Args:
            r: Row index
            c: Column index
            value: Bonus (positive) or malus (negative) value
        """
        self._check_bounds(r, c)
        if self._frozen:
            raise RuntimeError("Cannot modify a grid after construction")
        self._values[r, c] = value

    def get_state(self) -> Dict[str, Any]:
        """Get grid summary for serialization."""
        return {
            "size": self._size,
            "min": int(self._values.min()),
            "max": int(self._values.max()),
        }
