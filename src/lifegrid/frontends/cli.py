"""Command-line driver that renders each generation as text."""

import argparse
import logging
import sys
import time

from ..core.boundary import BoundaryPolicy
from ..core.config import ALIVE_GLYPH, DEAD_GLYPH, SimulationConfig
from ..core.errors import InvalidConfiguration
from ..core.simulation import Simulation
from .text import format_generation


class CLIGameOfLife:
    """Command-line interface for running Game of Life simulations."""

    def __init__(self, sleep=time.sleep):
        """Initialize CLI interface.

        Args:
            sleep: Callable used for the inter-frame delay
        """
        self._sleep = sleep

    def render(self, simulation: Simulation, config: SimulationConfig) -> None:
        """Print the current generation of a simulation."""
        print(format_generation(simulation.generation, simulation.snapshot(), config.alive_glyph, config.dead_glyph))

    def run_simulation(self, config: SimulationConfig, verbose: bool = False) -> Simulation:
        """Seed a glider and render it for the configured number of generations.

        Args:
            config: Grid, boundary, generation and rendering settings
            verbose: Print progress details

        Returns:
            The simulation after the last generation

        Raises:
            InvalidConfiguration: If the configuration is invalid
        """
        simulation = config.build_simulation()

        if verbose:
            print(
                f"Initializing {config.width}x{config.height} grid "
                f"(boundary: {simulation.boundary.value}, generations: {config.generations})"
            )

        self.render(simulation, config)

        for _ in simulation.run(config.generations):
            self.render(simulation, config)
            if config.delay > 0:
                self._sleep(config.delay)

        if verbose:
            print(f"Final population: {simulation.population} cells")

        return simulation


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run Conway's Game of Life from a glider seed and print every generation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default run: 25x25 torus, 10 generations, 100 ms between frames
  lifegrid

  # Finite edges, 40 generations, no delay
  lifegrid --boundary finite -g 40 -d 0

  # Larger grid with plain ASCII glyphs
  lifegrid -W 40 -H 30 --alive-glyph "# " --dead-glyph "  "
        """,
    )

    # Grid configuration
    parser.add_argument("-W", "--width", type=int, default=25, help="Grid width (default: 25)")

    parser.add_argument("-H", "--height", type=int, default=25, help="Grid height (default: 25)")

    parser.add_argument(
        "-b",
        "--boundary",
        type=str,
        default=BoundaryPolicy.TOROIDAL.value,
        choices=[policy.value for policy in BoundaryPolicy],
        help="Edge behaviour for neighbor counting (default: toroidal)",
    )

    # Simulation configuration
    parser.add_argument(
        "-g",
        "--generations",
        type=int,
        default=10,
        help="Generations to simulate after the initial state (default: 10)",
    )

    parser.add_argument(
        "-d",
        "--delay",
        type=int,
        default=100,
        help="Delay between generations in milliseconds (default: 100)",
    )

    # Output configuration
    parser.add_argument("--alive-glyph", type=str, default=ALIVE_GLYPH, help="Two-character glyph for live cells")

    parser.add_argument("--dead-glyph", type=str, default=DEAD_GLYPH, help="Two-character glyph for dead cells")

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed progress information",
    )

    return parser


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    """Build a SimulationConfig from parsed arguments."""
    return SimulationConfig(
        width=args.width,
        height=args.height,
        boundary=args.boundary,
        generations=args.generations,
        delay=args.delay / 1000.0,
        alive_glyph=args.alive_glyph,
        dead_glyph=args.dead_glyph,
    )


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = config_from_args(args).problems()

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main() -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if not validate_args(args):
        return 1

    cli = CLIGameOfLife()

    try:
        cli.run_simulation(config_from_args(args), verbose=args.verbose)
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except InvalidConfiguration as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
