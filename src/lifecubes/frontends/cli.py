"""Command-line interface for running the simulation headless."""

import argparse
import logging
import sys
import time
import traceback
from typing import Any, Dict, Optional, Tuple

from ..config import SimulationConfig
from ..core.errors import LifeError
from ..core.grid import Grid
from ..core.pacing import GATES
from ..core.patterns import PatternLibrary
from ..core.simulation import Simulation


class CLISimulation:
    """Command-line interface for running frame-driven simulations."""

    def __init__(self):
        """Initialize CLI interface."""
        self.pattern_library = PatternLibrary()

    def run_simulation(
        self,
        config: SimulationConfig,
        max_generations: int,
        dt: float = 1 / 60,
        max_frames: Optional[int] = None,
        verbose: bool = False,
        show_grid: bool = False,
    ) -> Tuple[int, str, Dict[str, Any]]:
        """Run a simulation frame by frame.

        Args:
            config: Simulation configuration
            max_generations: Stop once this many generations were computed
            dt: Simulated seconds per frame
            max_frames: Optional frame limit
            verbose: Print every generation
            show_grid: Show initial and final grid states

        Returns:
            Tuple of (final_generation, finish_reason, statistics)
        """
        simulation = Simulation(config)
        grid = simulation.grid
        initial_population = grid.population

        if verbose:
            print(f"Initializing {grid.size}x{grid.size} grid (pacing: {config.pacing})")
            print(f"Initial population: {initial_population} cells")

        if show_grid:
            print("\nInitial grid:")
            print(self._format_grid(grid))

        start_time = time.time()
        frames = 0
        reason = "max_generations"

        while simulation.generation - 1 < max_generations:
            if max_frames is not None and frames >= max_frames:
                reason = "max_frames"
                break

            result = simulation.update(dt)
            frames += 1

            if result is None:
                continue

            if verbose:
                print(
                    f"Generation {result.generation}: population {result.population}, "
                    f"births {len(result.births)}, records {len(simulation.tracker)}"
                )

            if result.population == 0:
                reason = "extinction"
                break

        duration = time.time() - start_time

        stats = simulation.get_statistics()
        stats["frames"] = frames
        stats["simulated_seconds"] = frames * dt
        stats["duration_seconds"] = duration
        stats["initial_population"] = initial_population

        if show_grid and reason != "extinction":
            print(f"\nFinal grid (generation {simulation.generation}):")
            print(self._format_grid(grid))

        return simulation.generation, reason, stats

    def _format_grid(self, grid: Grid, max_size: int = 60) -> str:
        """Format grid for display, truncating if too large."""
        if grid.size > max_size:
            return f"Grid too large to display ({grid.size}x{grid.size})"

        return str(grid)

    def list_patterns(self) -> None:
        """List available patterns by category."""
        print("Available patterns:")
        for category, names in self.pattern_library.get_patterns_by_category().items():
            print(f"\n{category}:")
            for name in names:
                pattern = self.pattern_library.get_pattern(name)
                rows, cols = pattern.get_size()
                print(f"  {name}: {rows}x{cols}, {len(pattern.cells)} cells")
                if pattern.description:
                    print(f"    {pattern.description}")


def format_finish_reason(reason: str) -> str:
    """Format finish reason for display."""
    reason_map = {
        "extinction": "Population died out",
        "max_generations": "Reached maximum generations",
        "max_frames": "Reached frame limit",
    }
    return reason_map.get(reason, reason)


def print_results(final_generation: int, reason: str, stats: Dict[str, Any]) -> None:
    """Print simulation results."""
    print("\nSimulation Results:")
    print(f"  Finished at generation: {final_generation}")
    print(f"  Reason: {format_finish_reason(reason)}")
    print(f"  Final population: {stats['population']} (initial: {stats['initial_population']})")
    print(f"  Population density: {stats['population_density']:.2%}")
    print(f"  Frames: {stats['frames']} ({stats['simulated_seconds']:.2f}s simulated)")
    print(f"  Cell records: {stats['records']} live, {stats['retired_records']} retired")
    print(f"  Duration: {stats['duration_seconds']:.3f}s")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser."""
    parser = argparse.ArgumentParser(
        description="Run the falling-cubes Game of Life simulation headless",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 20x20 random grid, 50 generations
  lifecubes -n 20 -G 50

  # Glider on a 10x10 grid, printing every generation
  lifecubes -n 10 --pattern Glider -G 8 -v -g

  # Pace generations by the fall animation instead of a fixed timer
  lifecubes --pacing animation -G 20

  # Load settings from a JSON file
  lifecubes --config settings.json
        """,
    )

    parser.add_argument("-n", "--size", type=int, help="Grid size (default: 20)")

    parser.add_argument(
        "-p",
        "--probability",
        type=float,
        help="Initial live probability 0.0-1.0 (default: 0.5)",
    )

    parser.add_argument("-s", "--seed", type=int, help="Random seed for reproducible runs")

    parser.add_argument("--pattern", type=str, help="Seed with a named pattern instead of random cells")

    parser.add_argument(
        "-G",
        "--generations",
        type=int,
        default=100,
        help="Number of generations to compute (default: 100)",
    )

    parser.add_argument("--frames", type=int, help="Stop after this many frames")

    parser.add_argument(
        "--dt",
        type=float,
        default=1 / 60,
        help="Simulated seconds per frame (default: 1/60)",
    )

    parser.add_argument("--pacing", choices=GATES, help="Tick pacing policy (default: fixed)")

    parser.add_argument("-c", "--config", type=str, help="JSON configuration file")

    parser.add_argument("-v", "--verbose", action="store_true", help="Print every generation")

    parser.add_argument(
        "-g",
        "--show-grid",
        action="store_true",
        help="Display initial and final grid states",
    )

    parser.add_argument("--list-patterns", action="store_true", help="List available patterns and exit")

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Returns:
        True if arguments are valid, False otherwise
    """
    errors = []

    if args.size is not None and args.size < 0:
        errors.append("Grid size must be non-negative")

    if args.probability is not None and not 0.0 <= args.probability <= 1.0:
        errors.append("Probability must be between 0.0 and 1.0")

    if args.seed is not None and args.seed < 0:
        errors.append("Seed must be non-negative")

    if args.generations < 0:
        errors.append("Generations must be non-negative")

    if args.frames is not None and args.frames < 0:
        errors.append("Frames must be non-negative")

    if args.dt <= 0:
        errors.append("Frame time must be positive")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def build_config(args: argparse.Namespace) -> SimulationConfig:
    """Build the configuration from an optional file and argument overrides.

    Raises:
        ConfigError: If the file or the resulting configuration is invalid
    """
    config = SimulationConfig.from_file(args.config) if args.config else SimulationConfig()

    overrides = {
        "grid_size": args.size,
        "live_probability": args.probability,
        "seed": args.seed,
        "pattern": args.pattern,
        "pacing": args.pacing,
    }
    for name, value in overrides.items():
        if value is not None:
            setattr(config, name, value)

    return config.check()


def main() -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args()

    level = getattr(logging, args.log_level)
    if args.verbose and args.log_level == "WARNING":
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    cli = CLISimulation()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    try:
        config = build_config(args)
        final_generation, reason, stats = cli.run_simulation(
            config,
            max_generations=args.generations,
            dt=args.dt,
            max_frames=args.frames,
            verbose=args.verbose,
            show_grid=args.show_grid,
        )
    except LifeError as e:
        print(f"Error: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            traceback.print_exc()
        return 1

    print_results(final_generation, reason, stats)
    return 0


if __name__ == "__main__":
    sys.exit(main())
