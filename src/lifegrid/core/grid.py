"""Grid data structure for the Game of Life engine."""

from typing import List, Tuple
import numpy as np

from .errors import InvalidConfiguration


class Grid:
    """A fixed-size 2D matrix of cell states.

    Cells are stored row-major in a numpy boolean array of shape
    (height, width), so ``cells[y, x]`` is the cell in row ``y`` and
    column ``x``. The grid never wraps coordinates itself; edge
    behaviour belongs to the neighborhood strategy.
    """

    def __init__(self, width: int, height: int) -> None:
        """Initialize an all-dead grid.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            InvalidConfiguration: If either dimension is not a positive integer
        """
        if not isinstance(width, int) or not isinstance(height, int) or width <= 0 or height <= 0:
            raise InvalidConfiguration(f"Grid dimensions must be positive integers, got {width}x{height}")

        self.width = width
        self.height = height
        self._cells = np.zeros((height, width), dtype=bool)

    @property
    def cells(self) -> np.ndarray:
        """Get the underlying cell array (live buffer, not a copy)."""
        return self._cells

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self.width, self.height)

    def contains(self, x: int, y: int) -> bool:
        """Check whether (x, y) lies inside the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def get_cell(self, x: int, y: int) -> bool:
        """Get the state of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            True if cell is alive, False if dead

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not self.contains(x, y):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds")

        return bool(self._cells[y, x])

    def set_cell(self, x: int, y: int, alive: bool) -> None:
        """Set the state of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate
            alive: Whether the cell should be alive

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not self.contains(x, y):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds")

        self._cells[y, x] = bool(alive)

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._cells.fill(False)

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def copy(self) -> "Grid":
        """Return an independent grid with the same dimensions and cells."""
        other = Grid(self.width, self.height)
        other._cells[:] = self._cells
        return other

    def to_list(self) -> List[List[bool]]:
        """Convert grid to a row-major nested list.

        Returns:
            List of rows, each a list of booleans
        """
        return self._cells.tolist()

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        return "\n".join("".join("*" if cell else "." for cell in row) for row in self._cells)
