"""Tests for SimulationConfig."""

import pytest
from lifegrid.core.boundary import BoundaryPolicy
from lifegrid.core.config import SimulationConfig
from lifegrid.core.errors import InvalidConfiguration


class TestSimulationConfig:
    """Test cases for SimulationConfig."""

    def test_defaults(self):
        """Test the reference configuration."""
        config = SimulationConfig()

        assert (config.width, config.height) == (25, 25)
        assert config.boundary is BoundaryPolicy.TOROIDAL
        assert config.generations == 10
        assert config.delay == pytest.approx(0.1)
        assert config.alive_glyph == "■ "
        assert config.dead_glyph == ". "
        assert config.problems() == []

    def test_collects_all_problems(self):
        """Test every problem is reported at once."""
        config = SimulationConfig(width=0, height=-2, generations=0, delay=-1, alive_glyph="#")

        problems = config.problems()

        assert "Width must be positive" in problems
        assert "Height must be positive" in problems
        assert "Generations must be positive" in problems
        assert "Delay must be non-negative" in problems
        assert any("Alive glyph" in problem for problem in problems)

    def test_too_small_for_glider(self):
        """Test grids smaller than 3x3 are rejected."""
        assert "Grid must be at least 3x3 to hold the glider" in SimulationConfig(width=2).problems()

    def test_unknown_boundary(self):
        """Test an unknown boundary name is reported."""
        with pytest.raises(InvalidConfiguration, match="Unknown boundary policy"):
            SimulationConfig(boundary="mobius").validate()

    def test_build_simulation(self):
        """Test the built simulation is seeded with the glider."""
        simulation = SimulationConfig(width=10, height=8, boundary="finite").build_simulation()

        assert simulation.width == 10
        assert simulation.height == 8
        assert simulation.boundary is BoundaryPolicy.FINITE
        assert simulation.population == 5
        assert simulation.generation == 0

    def test_build_invalid(self):
        """Test an invalid configuration cannot build a simulation."""
        with pytest.raises(InvalidConfiguration):
            SimulationConfig(generations=-3).build_simulation()
