"""Boundary policies and the neighbor-counting strategies that implement them."""

from enum import Enum
from typing import Union
import numpy as np
import torch
import torch.nn.functional as F

from .errors import InvalidConfiguration


# Moore neighborhood: the 3x3 block minus its centre
NEIGHBOR_OFFSETS = [(dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)]


class BoundaryPolicy(Enum):
    """How neighbor lookups behave at the grid edges."""

    TOROIDAL = "toroidal"
    FINITE = "finite"

    @classmethod
    def parse(cls, value: Union[str, "BoundaryPolicy"]) -> "BoundaryPolicy":
        """Resolve a policy from its name (case-insensitive) or pass one through.

        Raises:
            InvalidConfiguration: If the name is not a known policy
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            available = ", ".join(policy.value for policy in cls)
            raise InvalidConfiguration(f"Unknown boundary policy '{value}'. Available: {available}") from None


class Neighborhood:
    """Base neighbor-counting strategy.

    Subclasses decide how coordinates beyond the edge are resolved.
    ``count_neighbors`` inspects a single cell; ``count_all`` computes
    every cell at once with a 3x3 convolution and must agree with it.
    """

    policy: BoundaryPolicy

    def __init__(self) -> None:
        self._kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    def count_neighbors(self, cells: np.ndarray, x: int, y: int) -> int:
        """Count living neighbors of the cell in column x, row y.

        Args:
            cells: Row-major boolean array of shape (height, width)
            x: Column coordinate
            y: Row coordinate

        Returns:
            Number of living neighbors (0-8)
        """
        raise NotImplementedError

    def _pad(self, tensor: torch.Tensor) -> torch.Tensor:
        raise NotImplementedError

    def count_all(self, cells: np.ndarray) -> np.ndarray:
        """Count neighbors for all cells using a PyTorch convolution.

        Args:
            cells: Row-major boolean array of shape (height, width)

        Returns:
            int8 array of the same shape with each cell's neighbor count
        """
        tensor = torch.from_numpy(cells.astype(np.float32)).unsqueeze(0).unsqueeze(0)
        neighbors = F.conv2d(self._pad(tensor), self._kernel)
        return neighbors[0, 0].round().numpy().astype(np.int8)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class ToroidalNeighborhood(Neighborhood):
    """Edges wrap around: the grid behaves as a torus."""

    policy = BoundaryPolicy.TOROIDAL

    def count_neighbors(self, cells: np.ndarray, x: int, y: int) -> int:
        height, width = cells.shape
        count = 0
        for dx, dy in NEIGHBOR_OFFSETS:
            # Python's % is already non-negative for a positive modulus
            if cells[(y + dy) % height, (x + dx) % width]:
                count += 1
        return count

    def _pad(self, tensor: torch.Tensor) -> torch.Tensor:
        return F.pad(tensor, (1, 1, 1, 1), mode="circular")


class FiniteNeighborhood(Neighborhood):
    """Cells beyond the edge are permanently dead."""

    policy = BoundaryPolicy.FINITE

    def count_neighbors(self, cells: np.ndarray, x: int, y: int) -> int:
        height, width = cells.shape
        count = 0
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < width and 0 <= ny < height and cells[ny, nx]:
                count += 1
        return count

    def _pad(self, tensor: torch.Tensor) -> torch.Tensor:
        return F.pad(tensor, (1, 1, 1, 1), mode="constant", value=0.0)


_NEIGHBORHOODS = {
    BoundaryPolicy.TOROIDAL: ToroidalNeighborhood,
    BoundaryPolicy.FINITE: FiniteNeighborhood,
}


def neighborhood_for(policy: Union[str, BoundaryPolicy]) -> Neighborhood:
    """Create the neighbor-counting strategy for a boundary policy."""
    return _NEIGHBORHOODS[BoundaryPolicy.parse(policy)]()
