"""Conway's Game of Life on a fixed-size grid with toroidal or finite edges."""

__version__ = "0.1.0"

from .core.errors import InvalidConfiguration
from .core.boundary import BoundaryPolicy
from .core.patterns import GLIDER, Pattern
from .core.simulation import Simulation
from .core.config import SimulationConfig

__all__ = ["InvalidConfiguration", "BoundaryPolicy", "GLIDER", "Pattern", "Simulation", "SimulationConfig"]
