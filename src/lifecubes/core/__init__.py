"""Core simulation logic."""

from .errors import LifeError, InvalidDimension, OutOfBounds, ConfigError
from .grid import Grid
from .engine import GenerationEngine, TickResult, next_state
from .lifecycle import CellRecord, LifecycleTracker
from .pacing import TickGate, FixedIntervalGate, AnimationGate, FreeRunningGate, create_gate
from .patterns import Pattern, PatternLibrary
from .simulation import Simulation, SimulationState, initialize

__all__ = [
    "LifeError",
    "InvalidDimension",
    "OutOfBounds",
    "ConfigError",
    "Grid",
    "GenerationEngine",
    "TickResult",
    "next_state",
    "CellRecord",
    "LifecycleTracker",
    "TickGate",
    "FixedIntervalGate",
    "AnimationGate",
    "FreeRunningGate",
    "create_gate",
    "Pattern",
    "PatternLibrary",
    "Simulation",
    "SimulationState",
    "initialize",
]
