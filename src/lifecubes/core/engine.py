"""Generation engine: Conway's Game of Life on a bounded grid."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, TYPE_CHECKING
import logging
import numpy as np

from .grid import Grid

if TYPE_CHECKING:
    from .pacing import TickGate

logger = logging.getLogger(__name__)

# The seeded grid is generation 1
FIRST_GENERATION = 1


def next_state(alive: bool, neighbors: int) -> bool:
    """Apply Conway's rule to a single cell.

    Args:
        alive: Whether the cell is currently alive
        neighbors: Number of living neighbors

    Returns:
        Whether the cell is alive in the next generation
    """
    if alive:
        return neighbors in (2, 3)
    return neighbors == 3


@dataclass
class TickResult:
    """Outcome of one generation transition."""

    generation: int
    alive_cells: List[Tuple[int, int]] = field(default_factory=list)
    births: List[Tuple[int, int]] = field(default_factory=list)

    @property
    def population(self) -> int:
        """Number of living cells in the new generation."""
        return len(self.alive_cells)


class GenerationEngine:
    """Conway's Game of Life simulation engine.

    Implements the classic rules:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead

    Neighbor counts are always taken from the pre-transition buffer; the
    next generation is built in a separate buffer and published in one swap.
    """

    def __init__(self, grid: Grid, gate: Optional["TickGate"] = None) -> None:
        """Initialize the engine with a grid.

        Args:
            grid: The grid to simulate; the engine is its only writer
            gate: Optional throttle gate consulted by try_tick()
        """
        self.grid = grid
        self.gate = gate
        self._generation = FIRST_GENERATION

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    def current_generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.population

    def compute_next(self) -> np.ndarray:
        """Compute the next generation without touching the grid.

        Returns:
            New flat cell buffer
        """
        cells = self.grid.cells
        neighbor_counts = self.grid.count_all_neighbors()

        # Survival: live cell with 2 or 3 neighbors
        survive_mask = (cells > 0) & ((neighbor_counts == 2) | (neighbor_counts == 3))

        # Birth: dead cell with exactly 3 neighbors
        birth_mask = (cells == 0) & (neighbor_counts == 3)

        return (survive_mask | birth_mask).astype(np.int8)

    def tick(self) -> TickResult:
        """Advance the simulation by one generation.

        Returns:
            The new generation number with its living and newborn cells
        """
        self.grid.publish(self.compute_next())
        self._generation += 1

        result = TickResult(self._generation, self.grid.alive_cells(), self.grid.births())
        logger.debug(
            "Generation %d: population %d, births %d",
            result.generation,
            result.population,
            len(result.births),
        )
        return result

    def try_tick(self) -> Optional[TickResult]:
        """Advance one generation if the gate allows it.

        Without a gate every call ticks. With a gate, the gate is closed
        right after the transition so a single open event yields at most
        one generation.

        Returns:
            The tick result, or None if the gate was closed
        """
        if self.gate is None:
            return self.tick()

        if not self.gate.is_tick_allowed():
            return None

        result = self.tick()
        self.gate.mark_tick_consumed()
        return result

    def run(self, generations: int) -> List[TickResult]:
        """Advance several generations, ignoring any gate.

        Args:
            generations: Number of ticks to perform

        Returns:
            Results of every tick, in order
        """
        if generations < 0:
            raise ValueError(f"Generations must be non-negative, got {generations}")
        return [self.tick() for _ in range(generations)]
