"""Core simulation engine."""

from .errors import InvalidConfiguration
from .grid import Grid
from .boundary import BoundaryPolicy, FiniteNeighborhood, ToroidalNeighborhood, neighborhood_for
from .patterns import GLIDER, Pattern
from .simulation import Simulation
from .config import SimulationConfig

__all__ = [
    "InvalidConfiguration",
    "Grid",
    "BoundaryPolicy",
    "FiniteNeighborhood",
    "ToroidalNeighborhood",
    "neighborhood_for",
    "GLIDER",
    "Pattern",
    "Simulation",
    "SimulationConfig",
]
