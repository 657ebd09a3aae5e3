"""Conway's Game of Life simulation engine."""

from typing import Iterable, Iterator, Optional, Tuple, Union
import logging
import numpy as np

from .boundary import BoundaryPolicy, neighborhood_for
from .errors import InvalidConfiguration
from .grid import Grid
from .patterns import GLIDER, Pattern

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 25
DEFAULT_HEIGHT = 25


class Simulation:
    """Double-buffered Game of Life engine.

    Implements the classic rules:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead

    The engine owns two grids. ``current`` always holds the settled
    generation; the other buffer is scratch space that is fully
    overwritten by each transition before the two are swapped.
    """

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        boundary: Union[str, BoundaryPolicy] = BoundaryPolicy.TOROIDAL,
    ) -> None:
        """Create an empty simulation.

        Args:
            width: Number of columns
            height: Number of rows
            boundary: Edge behaviour used for neighbor counting

        Raises:
            InvalidConfiguration: For non-positive dimensions or an unknown policy
        """
        self._current = Grid(width, height)
        self._next = Grid(width, height)
        self._neighborhood = neighborhood_for(boundary)
        self._generation = 0

    @property
    def width(self) -> int:
        return self._current.width

    @property
    def height(self) -> int:
        return self._current.height

    @property
    def boundary(self) -> BoundaryPolicy:
        """The boundary policy chosen at construction."""
        return self._neighborhood.policy

    @property
    def generation(self) -> int:
        """Number of transitions computed so far."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self._current.population

    def seed(self, pattern: Pattern = GLIDER, anchor: Optional[Tuple[int, int]] = None) -> None:
        """Mark a pattern's cells alive on the current grid.

        Args:
            pattern: Pattern to place, the glider by default
            anchor: (x, y) the pattern offsets are relative to; grid centre if omitted

        Raises:
            InvalidConfiguration: If any pattern cell lies outside the grid
        """
        if anchor is None:
            anchor = Pattern.centered_anchor(self._current)
        pattern.apply_to_grid(self._current, *anchor)
        logger.debug("Seeded %s, population %d", pattern.name, self.population)

    def set_cells(self, coordinates: Iterable[Tuple[int, int]]) -> None:
        """Mark absolute (x, y) cells alive on the current grid."""
        self.seed(Pattern.from_cells("custom", coordinates), anchor=(0, 0))

    def count_neighbors(self, x: int, y: int) -> int:
        """Count living neighbors of (x, y) under the active boundary policy.

        Raises:
            IndexError: If (x, y) is not a cell of the grid
        """
        if not self._current.contains(x, y):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds")
        return self._neighborhood.count_neighbors(self._current.cells, x, y)

    def advance(self) -> None:
        """Advance the simulation by one generation."""
        cells = self._current.cells
        # Counts are taken from the settled grid before the scratch buffer is touched
        neighbor_counts = self._neighborhood.count_all(cells)

        born = (neighbor_counts == 3)
        survives = cells & (neighbor_counts == 2)
        np.logical_or(born, survives, out=self._next.cells)

        self._current, self._next = self._next, self._current
        self._generation += 1
        logger.debug("Generation %d, population %d", self._generation, self.population)

    def run(self, generations: int) -> Iterator[int]:
        """Advance repeatedly, yielding the generation number after each step.

        Args:
            generations: Number of transitions to compute

        Raises:
            InvalidConfiguration: If generations is negative
        """
        if generations < 0:
            raise InvalidConfiguration(f"Generation count must be non-negative, got {generations}")
        for _ in range(generations):
            self.advance()
            yield self._generation

    def snapshot(self) -> np.ndarray:
        """Get a read-only, row-major copy of the current grid.

        Returns:
            Boolean array of shape (height, width)
        """
        view = self._current.cells.copy()
        view.setflags(write=False)
        return view

    def __repr__(self) -> str:
        return (
            f"Simulation(width={self.width}, height={self.height}, "
            f"boundary={self.boundary.value}, generation={self._generation})"
        )
