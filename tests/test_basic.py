"""Basic tests for the lifegrid package."""

from lifegrid import GLIDER, BoundaryPolicy, InvalidConfiguration, Simulation, SimulationConfig


def test_package_exports():
    """Test the public API is importable from the package root."""
    assert issubclass(InvalidConfiguration, ValueError)
    assert SimulationConfig().boundary is BoundaryPolicy.TOROIDAL


def test_reference_run():
    """Test the reference 25x25 toroidal run for ten generations."""
    sim = Simulation(25, 25, BoundaryPolicy.TOROIDAL)
    sim.seed(GLIDER)

    for _ in range(10):
        sim.advance()

    assert sim.generation == 10
    assert sim.population == 5
