"""Game of Life simulation core for an animated 3D grid of falling cubes."""

__version__ = "0.1.0"

from .core.grid import Grid
from .core.engine import GenerationEngine, TickResult
from .core.simulation import Simulation, initialize
from .core.patterns import Pattern, PatternLibrary
from .config import SimulationConfig

__all__ = [
    "Grid",
    "GenerationEngine",
    "TickResult",
    "Simulation",
    "initialize",
    "Pattern",
    "PatternLibrary",
    "SimulationConfig",
]
