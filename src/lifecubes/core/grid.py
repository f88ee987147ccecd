"""Grid store for the Game of Life simulation."""

from typing import Iterator, List, Optional, Tuple
import numpy as np
import torch
import torch.nn.functional as F

from .errors import InvalidDimension, OutOfBounds

# (row, col) offsets of the eight neighbors of a cell
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, 1),
    (-1, 0),
    (-1, -1),
    (0, 1),
    (0, -1),
    (1, 1),
    (1, 0),
    (1, -1),
)


def is_valid_size(size: object) -> bool:
    """Whether a value can be used as a grid size (a non-negative integer)."""
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        return False
    return size >= 0


class Grid:
    """Square, bounded grid of cells stored as a flat row-major buffer.

    Cell ``(row, col)`` lives at index ``row * size + col``. Cells outside
    ``[0, size)`` on either axis do not exist; there is no wraparound.

    The grid keeps the buffer of the previous generation next to the current
    one so that births can be reported after a generation is published.
    """

    def __init__(self, size: int) -> None:
        """Initialize an all-dead grid.

        Args:
            size: Number of rows (and columns)

        Raises:
            InvalidDimension: If size is negative or not an integer
        """
        if not is_valid_size(size):
            raise InvalidDimension(size)

        self._size = int(size)
        self._cells = np.zeros(self._size * self._size, dtype=np.int8)
        self._previous_cells = np.zeros(self._size * self._size, dtype=np.int8)

        # Neighbor counting kernel, reused by count_all_neighbors()
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    @property
    def size(self) -> int:
        """Number of rows and columns."""
        return self._size

    @property
    def cells(self) -> np.ndarray:
        """Get the current flat cell buffer."""
        return self._cells

    @property
    def previous_cells(self) -> np.ndarray:
        """Get the flat cell buffer of the previous generation."""
        return self._previous_cells

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def index(self, row: int, col: int) -> int:
        """Get the flat buffer index of a cell.

        Raises:
            OutOfBounds: If coordinates are outside the grid
        """
        if not (0 <= row < self._size and 0 <= col < self._size):
            raise OutOfBounds(row, col, self._size)
        return row * self._size + col

    def get_cell(self, row: int, col: int) -> bool:
        """Get the state of a cell.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            True if cell is alive, False if dead

        Raises:
            OutOfBounds: If coordinates are outside the grid
        """
        return bool(self._cells[self.index(row, col)])

    def set_cell(self, row: int, col: int, alive: bool) -> None:
        """Set the state of a cell.

        Args:
            row: Row coordinate
            col: Column coordinate
            alive: Whether the cell should be alive

        Raises:
            OutOfBounds: If coordinates are outside the grid
        """
        self._cells[self.index(row, col)] = 1 if alive else 0

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._cells.fill(0)

    def randomize(self, probability: float = 0.5, rng: Optional[np.random.Generator] = None) -> None:
        """Randomly populate the grid.

        Args:
            probability: Chance each cell will be alive (0.0 to 1.0)
            rng: Random generator to draw from (a fresh one if omitted)

        Raises:
            ValueError: If probability is outside [0, 1]
        """
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"Probability must be between 0 and 1, got {probability}")

        rng = rng if rng is not None else np.random.default_rng()
        mask = rng.random(self._cells.shape[0]) < probability
        self._cells[:] = mask.astype(np.int8)

    def publish(self, next_cells: np.ndarray) -> None:
        """Make a freshly computed buffer the current generation.

        The current buffer becomes the previous one in the same assignment,
        so readers never see a mix of two generations.

        Args:
            next_cells: Flat buffer of the next generation

        Raises:
            ValueError: If the buffer has the wrong shape
        """
        if next_cells.shape != self._cells.shape:
            raise ValueError(f"Buffer shape {next_cells.shape} doesn't match grid {self._cells.shape}")

        self._previous_cells, self._cells = self._cells, next_cells.astype(np.int8, copy=False)

    def count_neighbors(self, row: int, col: int) -> int:
        """Count living neighbors of a cell.

        Offsets landing outside the grid are skipped, so edge cells have
        five candidate neighbors and corner cells three.

        Returns:
            Number of living neighbors (0-8)
        """
        self.index(row, col)

        count = 0
        for dr, dc in NEIGHBOR_OFFSETS:
            nr, nc = row + dr, col + dc
            if 0 <= nr < self._size and 0 <= nc < self._size:
                count += int(self._cells[nr * self._size + nc])

        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using a PyTorch convolution.

        Zero padding keeps the topology bounded.

        Returns:
            Flat array with the neighbor count of each cell
        """
        if self._size == 0:
            return np.zeros(0, dtype=np.int8)

        matrix = torch.from_numpy(self._cells.reshape(self._size, self._size).astype(np.float32))
        neighbors = F.conv2d(matrix.unsqueeze(0).unsqueeze(0), self._torch_kernel, padding=1)

        return neighbors[0, 0].numpy().astype(np.int8).reshape(-1)

    def alive_cells(self) -> List[Tuple[int, int]]:
        """Get coordinates of all living cells in row-major order."""
        return [divmod(int(i), self._size) for i in np.flatnonzero(self._cells)]

    def births(self) -> List[Tuple[int, int]]:
        """Get coordinates of cells alive now but dead in the previous generation."""
        born = (self._cells > 0) & (self._previous_cells == 0)
        return [divmod(int(i), self._size) for i in np.flatnonzero(born)]

    def iter_cells(self) -> Iterator[Tuple[int, int, bool]]:
        """Iterate over every cell as (row, col, alive)."""
        for i, value in enumerate(self._cells):
            row, col = divmod(i, self._size)
            yield (row, col, bool(value))

    def snapshot(self) -> "Grid":
        """Get an independent copy of the current generation."""
        copy = Grid(self._size)
        copy._cells[:] = self._cells
        return copy

    def to_list(self) -> list:
        """Convert grid to a nested list of rows.

        Returns:
            2D list representation of the grid
        """
        return self._cells.reshape(self._size, self._size).tolist()

    def from_list(self, data: list) -> None:
        """Load grid from a nested list of rows.

        Args:
            data: 2D list with cell states

        Raises:
            ValueError: If data dimensions don't match grid
        """
        arr = np.array(data, dtype=np.int8)
        if self._size == 0 and arr.size == 0:
            return
        if arr.shape != (self._size, self._size):
            raise ValueError(f"Data shape {arr.shape} doesn't match grid ({self._size}, {self._size})")

        self._cells[:] = (arr.reshape(-1) > 0).astype(np.int8)

    def __eq__(self, other: object) -> bool:
        """Check if two grids hold the same cells."""
        if not isinstance(other, Grid):
            return False
        return self._size == other._size and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        rows = []
        for row in range(self._size):
            start = row * self._size
            rows.append("".join("*" if v else "." for v in self._cells[start:start + self._size]))
        return "\n".join(rows)
