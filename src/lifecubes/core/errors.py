"""Exceptions raised by the simulation core."""


class LifeError(Exception):
    """Base class for all lifecubes errors."""


class InvalidDimension(LifeError, ValueError):
    """Raised when a grid is requested with a negative or non-integer size."""

    def __init__(self, size: object) -> None:
        super().__init__(f"Grid size must be a non-negative integer, got {size!r}")
        self.size = size


class OutOfBounds(LifeError, IndexError):
    """Raised when a cell coordinate falls outside the grid."""

    def __init__(self, row: int, col: int, size: int) -> None:
        super().__init__(f"Coordinates ({row}, {col}) out of bounds for {size}x{size} grid")
        self.row = row
        self.col = col
        self.size = size


class ConfigError(LifeError, ValueError):
    """Raised for invalid simulation configuration."""
