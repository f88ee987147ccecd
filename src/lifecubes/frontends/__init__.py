"""Frontend interfaces for the simulation."""

from .cli import CLISimulation

__all__ = ["CLISimulation"]
