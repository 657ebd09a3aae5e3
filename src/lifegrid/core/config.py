"""Configuration for a simulation run."""

from dataclasses import dataclass
from typing import List, Union

from .boundary import BoundaryPolicy
from .errors import InvalidConfiguration
from .patterns import GLIDER
from .simulation import DEFAULT_HEIGHT, DEFAULT_WIDTH, Simulation

ALIVE_GLYPH = "■ "
DEAD_GLYPH = ". "


@dataclass
class SimulationConfig:
    """Configuration for a simulation run."""
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    boundary: Union[str, BoundaryPolicy] = BoundaryPolicy.TOROIDAL
    generations: int = 10
    delay: float = 0.1  # seconds between rendered generations
    alive_glyph: str = ALIVE_GLYPH
    dead_glyph: str = DEAD_GLYPH

    def problems(self) -> List[str]:
        """List every reason this configuration cannot be run."""
        errors = []

        if not isinstance(self.width, int) or self.width <= 0:
            errors.append("Width must be positive")

        if not isinstance(self.height, int) or self.height <= 0:
            errors.append("Height must be positive")

        # The glider spans one cell either side of the centre
        if isinstance(self.width, int) and isinstance(self.height, int) and 0 < min(self.width, self.height) < 3:
            errors.append("Grid must be at least 3x3 to hold the glider")

        if self.generations <= 0:
            errors.append("Generations must be positive")

        if self.delay < 0:
            errors.append("Delay must be non-negative")

        for label, glyph in (("Alive", self.alive_glyph), ("Dead", self.dead_glyph)):
            if len(glyph) != 2:
                errors.append(f"{label} glyph must be exactly two characters, got {glyph!r}")

        try:
            BoundaryPolicy.parse(self.boundary)
        except InvalidConfiguration as e:
            errors.append(str(e))

        return errors

    def validate(self) -> None:
        """Raise InvalidConfiguration listing every problem, if there are any."""
        errors = self.problems()
        if errors:
            raise InvalidConfiguration("; ".join(errors))

    def build_simulation(self) -> Simulation:
        """Create a simulation from this configuration, seeded with the glider.

        Raises:
            InvalidConfiguration: If the configuration is invalid
        """
        self.validate()
        simulation = Simulation(self.width, self.height, BoundaryPolicy.parse(self.boundary))
        simulation.seed(GLIDER)
        return simulation
