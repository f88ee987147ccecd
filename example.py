#!/usr/bin/env python3
"""
Example usage of the lifecubes package.
"""

from lifecubes import GenerationEngine, Grid, PatternLibrary, Simulation, SimulationConfig


def main():
    """Demonstrate programmatic usage of the lifecubes package."""
    # Step a glider directly with the engine
    grid = Grid(12)
    engine = GenerationEngine(grid)

    glider = PatternLibrary().get_pattern("Glider")
    glider.apply_to_grid(grid, 1, 1)

    print(f"Generation {engine.generation}:")
    print(grid)
    print()

    for _ in range(4):
        result = engine.tick()
        print(f"Generation {result.generation} (births: {result.births}):")
        print(grid)
        print()

    # Drive a random grid from frame time, the way a renderer would
    config = SimulationConfig(grid_size=16, seed=7, pacing="fixed")
    simulation = Simulation(config)

    for frame in range(120):
        result = simulation.update(1 / 60)
        if result is not None:
            print(f"Frame {frame}: generation {result.generation}, {result.population} cubes spawned")

    print("Final statistics:")
    for key, value in simulation.get_statistics().items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
