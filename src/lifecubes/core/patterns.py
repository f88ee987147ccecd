"""Common Conway's Game of Life patterns used to seed a grid."""

from typing import Any, Dict, List, Optional, Tuple

from .errors import OutOfBounds
from .grid import Grid


class Pattern:
    """Represents a Game of Life pattern in (row, col) coordinates."""

    def __init__(self, name: str, cells: List[Tuple[int, int]], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (row, col) coordinates for living cells
            description: Optional description
        """
        self.name = name
        self.cells = cells
        self.description = description

    def apply_to_grid(self, grid: Grid, row_offset: int = 0, col_offset: int = 0) -> int:
        """Clear a grid and place this pattern on it.

        Cells falling outside the grid are skipped.

        Returns:
            Number of cells placed
        """
        grid.clear()
        placed = 0
        for row, col in self.cells:
            try:
                grid.set_cell(row + row_offset, col + col_offset, True)
                placed += 1
            except OutOfBounds:
                pass
        return placed

    def centered_offset(self, grid: Grid) -> Tuple[int, int]:
        """Offset that centers the normalized pattern on a grid."""
        rows, cols = self.get_size()
        return (max(0, (grid.size - rows) // 2), max(0, (grid.size - cols) // 2))

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern.

        Returns:
            Tuple of (min_row, min_col, max_row, max_col)
        """
        if not self.cells:
            return (0, 0, 0, 0)

        rows, cols = zip(*self.cells)
        return (min(rows), min(cols), max(rows), max(cols))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size as (rows, cols)."""
        min_row, min_col, max_row, max_col = self.get_bounding_box()
        return (max_row - min_row + 1, max_col - min_col + 1)

    def normalize(self) -> "Pattern":
        """Return a new pattern with coordinates normalized to start at (0, 0)."""
        if not self.cells:
            return Pattern(self.name, [], self.description)

        min_row, min_col, _, _ = self.get_bounding_box()
        return Pattern(self.name, [(r - min_row, c - min_col) for r, c in self.cells], self.description)

    def to_dict(self) -> Dict[str, Any]:
        """Convert pattern to dictionary for serialization."""
        return {"name": self.name, "cells": [list(cell) for cell in self.cells], "description": self.description}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pattern":
        """Create pattern from dictionary."""
        cells = [(int(cell[0]), int(cell[1])) for cell in data["cells"]]
        return cls(name=data["name"], cells=cells, description=data.get("description", ""))

    @classmethod
    def from_grid(cls, grid: Grid, name: str, description: str = "") -> "Pattern":
        """Create pattern from the living cells of a grid."""
        return cls(name, grid.alive_cells(), description)


class PatternLibrary:
    """Manages a collection of named patterns."""

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._categories: Dict[str, List[str]] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        """Load built-in common patterns."""
        self.add_pattern(Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block"), "Still Lifes")
        self.add_pattern(
            Pattern("Beehive", [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 2)], "Beehive still life"),
            "Still Lifes",
        )
        self.add_pattern(
            Pattern("Loaf", [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 3), (3, 2)], "Loaf still life"),
            "Still Lifes",
        )

        self.add_pattern(Pattern("Blinker", [(1, 0), (1, 1), (1, 2)], "Period-2 oscillator"), "Oscillators")
        self.add_pattern(
            Pattern("Toad", [(0, 1), (0, 2), (0, 3), (1, 0), (1, 1), (1, 2)], "Period-2 oscillator"),
            "Oscillators",
        )
        self.add_pattern(
            Pattern("Beacon", [(0, 0), (0, 1), (1, 0), (2, 3), (3, 2), (3, 3)], "Period-2 oscillator"),
            "Oscillators",
        )

        self.add_pattern(
            Pattern("Glider", [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)], "Smallest spaceship, period-4"),
            "Spaceships",
        )
        self.add_pattern(
            Pattern(
                "Lightweight Spaceship",
                [(0, 0), (0, 3), (1, 4), (2, 0), (2, 4), (3, 1), (3, 2), (3, 3), (3, 4)],
                "LWSS - Period-4 spaceship",
            ),
            "Spaceships",
        )

        self.add_pattern(
            Pattern(
                "R-pentomino",
                [(0, 1), (0, 2), (1, 0), (1, 1), (2, 1)],
                "Methuselah that stabilizes after 1103 generations",
            ),
            "Methuselahs",
        )
        self.add_pattern(
            Pattern(
                "Diehard",
                [(0, 6), (1, 0), (1, 1), (2, 1), (2, 5), (2, 6), (2, 7)],
                "Dies after exactly 130 generations",
            ),
            "Methuselahs",
        )

    def add_pattern(self, pattern: Pattern, category: str = "Custom") -> None:
        """Add a pattern to the library under a category."""
        self._patterns[pattern.name] = pattern
        names = self._categories.setdefault(category, [])
        if pattern.name not in names:
            names.append(pattern.name)

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name (case-insensitive)."""
        if name in self._patterns:
            return self._patterns[name]
        for key, pattern in self._patterns.items():
            if key.lower() == name.lower():
                return pattern
        return None

    def list_patterns(self) -> List[str]:
        """Get the names of all patterns."""
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get pattern names grouped by category."""
        return {category: list(names) for category, names in self._categories.items()}
