"""Seed patterns and their placement on a grid."""

from typing import Iterable, List, Tuple
import logging

from .errors import InvalidConfiguration
from .grid import Grid

logger = logging.getLogger(__name__)


class Pattern:
    """A set of live cells described as offsets from an anchor point."""

    def __init__(self, name: str, cells: List[Tuple[int, int]], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (dx, dy) offsets for living cells
            description: Optional description
        """
        self.name = name
        self.cells = [(int(dx), int(dy)) for dx, dy in cells]
        self.description = description

    @classmethod
    def from_cells(cls, name: str, coordinates: Iterable[Tuple[int, int]], description: str = "") -> "Pattern":
        """Create a pattern from absolute (x, y) cells, to be applied at anchor (0, 0)."""
        return cls(name, list(coordinates), description)

    @staticmethod
    def centered_anchor(grid: Grid) -> Tuple[int, int]:
        """Get the centre cell of a grid as (x, y)."""
        return (grid.width // 2, grid.height // 2)

    def positions(self, anchor_x: int, anchor_y: int) -> List[Tuple[int, int]]:
        """Absolute (x, y) positions of the pattern's cells for an anchor."""
        return [(anchor_x + dx, anchor_y + dy) for dx, dy in self.cells]

    def apply_to_grid(self, grid: Grid, anchor_x: int = 0, anchor_y: int = 0) -> None:
        """Mark this pattern's cells alive on a grid.

        Cells already alive are left alive. The grid is only modified
        once every cell is known to fit.

        Args:
            grid: Target grid
            anchor_x: Column the offsets are relative to
            anchor_y: Row the offsets are relative to

        Raises:
            InvalidConfiguration: If any cell falls outside the grid
        """
        positions = self.positions(anchor_x, anchor_y)
        outside = [(x, y) for x, y in positions if not grid.contains(x, y)]
        if outside:
            raise InvalidConfiguration(
                f"Pattern '{self.name}' at ({anchor_x}, {anchor_y}) does not fit a "
                f"{grid.width}x{grid.height} grid: cells {outside} are out of bounds"
            )

        for x, y in positions:
            grid.set_cell(x, y, True)
        logger.debug("Applied pattern %s at (%d, %d)", self.name, anchor_x, anchor_y)

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern offsets.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self.cells:
            return (0, 0, 0, 0)

        xs, ys = zip(*self.cells)
        return (min(xs), min(ys), max(xs), max(ys))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size as (width, height)."""
        min_x, min_y, max_x, max_y = self.get_bounding_box()
        return (max_x - min_x + 1, max_y - min_y + 1)

    def __repr__(self) -> str:
        return f"Pattern({self.name!r}, {self.cells!r})"


#  . X .
#  . . X
#  X X X
GLIDER = Pattern(
    "Glider",
    [(0, -1), (1, 0), (-1, 1), (0, 1), (1, 1)],
    "Travels one cell down and one cell right every 4 generations",
)
