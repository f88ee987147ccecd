"""Frame-driven simulation shell wiring grid, engine, gate and records."""

from enum import Enum
from typing import List, Optional
import logging
import numpy as np

from ..config import SimulationConfig
from .engine import GenerationEngine, TickResult
from .errors import ConfigError
from .grid import Grid
from .lifecycle import LifecycleTracker
from .pacing import create_gate
from .patterns import PatternLibrary

logger = logging.getLogger(__name__)


def initialize(size: int, live_probability: float = 0.5, seed: Optional[int] = None) -> Grid:
    """Create a randomly seeded grid.

    Args:
        size: Number of rows and columns
        live_probability: Chance each cell starts alive
        seed: Optional seed for reproducible grids

    Returns:
        The seeded grid (generation 1)
    """
    grid = Grid(size)
    grid.randomize(live_probability, np.random.default_rng(seed))
    return grid


class SimulationState(Enum):
    """Whether the simulation is still waiting to start."""

    WAITING = "waiting"
    RUNNING = "running"


class Simulation:
    """Drives the generation engine from frame time.

    The simulation waits ``start_delay`` seconds, then on every frame feeds
    the elapsed time to the gate, ticks at most once when the gate is open,
    spawns records for the living cells of the new generation and ages all
    records.
    """

    def __init__(self, config: Optional[SimulationConfig] = None, grid: Optional[Grid] = None) -> None:
        """Initialize the simulation.

        Args:
            config: Simulation configuration (defaults if omitted)
            grid: Pre-seeded grid to use instead of seeding from config

        Raises:
            ConfigError: If the configuration is invalid or names an unknown pattern
        """
        self.config = (config or SimulationConfig()).check()

        if grid is None:
            grid = self._seed_grid()

        self.grid = grid
        self.gate = create_gate(
            self.config.pacing,
            interval=self.config.fixed_timestep,
            threshold=self.config.animation_threshold,
        )
        self.engine = GenerationEngine(grid, self.gate)
        self.tracker = LifecycleTracker(
            fall_delay=self.config.fixed_timestep,
            fall_speed=self.config.fall_speed,
            destroy_position=self.config.destroy_position,
            despawn_delay=self.config.despawn_delay,
        )
        self.state = SimulationState.WAITING
        self._wait_elapsed = 0.0
        self._retired = 0

        self.tracker.spawn(grid.alive_cells(), self.engine.generation)
        logger.info(
            "Simulation initialized: %dx%d grid, population %d, pacing '%s'",
            grid.size,
            grid.size,
            grid.population,
            self.config.pacing,
        )

    def _seed_grid(self) -> Grid:
        """Build the initial grid from the configured pattern or at random."""
        if self.config.pattern:
            pattern = PatternLibrary().get_pattern(self.config.pattern)
            if pattern is None:
                raise ConfigError(f"Pattern '{self.config.pattern}' not found")

            grid = Grid(self.config.grid_size)
            pattern = pattern.normalize()
            row_offset, col_offset = pattern.centered_offset(grid)
            pattern.apply_to_grid(grid, row_offset, col_offset)
            return grid

        return initialize(self.config.grid_size, self.config.live_probability, self.config.seed)

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self.engine.generation

    @property
    def retired_count(self) -> int:
        """Total number of records retired so far."""
        return self._retired

    def update(self, dt: float) -> Optional[TickResult]:
        """Advance the simulation by one frame.

        Args:
            dt: Seconds elapsed since the previous frame

        Returns:
            The tick result if a new generation was computed this frame
        """
        if dt < 0:
            raise ValueError(f"Frame time must be non-negative, got {dt}")

        if self.state is SimulationState.WAITING:
            self._wait_elapsed += dt
            if self._wait_elapsed >= self.config.start_delay:
                self.state = SimulationState.RUNNING
                logger.info("Simulation running after %.2fs", self._wait_elapsed)
            return None

        self.gate.advance(dt, self.tracker)
        overstep = self.gate.overstep
        result = self.engine.try_tick()
        if result is not None:
            self.tracker.spawn(result.alive_cells, result.generation, initial_age=overstep)

        self._retired += len(self.tracker.advance(dt))
        return result

    def run(self, frames: int, dt: float = 1 / 60) -> List[TickResult]:
        """Run a number of frames.

        Returns:
            Results of every tick that happened
        """
        results = []
        for _ in range(frames):
            result = self.update(dt)
            if result is not None:
                results.append(result)
        return results

    def get_statistics(self) -> dict:
        """Get a summary of the simulation state."""
        return {
            "state": self.state.value,
            "generation": self.generation,
            "population": self.grid.population,
            "grid_size": self.grid.size,
            "population_density": (
                self.grid.population / (self.grid.size * self.grid.size) if self.grid.size else 0.0
            ),
            "records": len(self.tracker),
            "retired_records": self._retired,
        }
