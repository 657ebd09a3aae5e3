#!/usr/bin/env python3
"""
Example usage of the lifegrid package.
"""

from lifegrid import GLIDER, BoundaryPolicy, Simulation
from lifegrid.frontends.text import format_generation


def main():
    """Run the glider on both boundary policies and compare the results."""
    for policy in BoundaryPolicy:
        sim = Simulation(12, 12, policy)
        sim.seed(GLIDER)

        for _ in sim.run(24):
            pass

        print(f"Boundary: {policy.value}, population after {sim.generation} generations: {sim.population}")
        print(format_generation(sim.generation, sim.snapshot(), alive="# ", dead=". "))


if __name__ == "__main__":
    main()
