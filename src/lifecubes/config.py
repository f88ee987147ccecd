"""Simulation configuration."""

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import json

from .core.errors import ConfigError
from .core.grid import is_valid_size
from .core.pacing import GATES


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class SimulationConfig:
    """Configuration for a simulation run."""

    grid_size: int = 20
    live_probability: float = 0.5
    seed: Optional[int] = None
    pattern: Optional[str] = None
    fixed_timestep: float = 0.1
    fall_speed: float = 5.0
    destroy_position: float = 30.0
    despawn_delay: float = 0.3
    start_delay: float = 0.5
    pacing: str = "fixed"
    animation_threshold: float = 1.0

    def validate(self) -> List[str]:
        """Collect configuration errors.

        Returns:
            List of error messages, empty if the configuration is valid
        """
        errors = []

        if not is_valid_size(self.grid_size):
            errors.append(f"grid_size must be a non-negative integer, got {self.grid_size!r}")

        if self.seed is not None and not is_valid_size(self.seed):
            errors.append(f"seed must be a non-negative integer, got {self.seed!r}")

        if self.pattern is not None and not isinstance(self.pattern, str):
            errors.append(f"pattern must be a string, got {self.pattern!r}")

        # (field, lower bound, whether the bound itself is allowed, upper bound)
        bounds = [
            ("live_probability", 0.0, True, 1.0),
            ("fixed_timestep", 0.0, False, None),
            ("fall_speed", 0.0, False, None),
            ("destroy_position", 0.0, False, None),
            ("despawn_delay", 0.0, True, None),
            ("start_delay", 0.0, True, None),
            ("animation_threshold", 0.0, True, 1.0),
        ]
        for name, low, inclusive, high in bounds:
            value = getattr(self, name)
            if not _is_number(value):
                errors.append(f"{name} must be a number, got {value!r}")
            elif (value < low if inclusive else value <= low) or (high is not None and value > high):
                if high is not None:
                    errors.append(f"{name} must be between {low} and {high}, got {value}")
                elif inclusive:
                    errors.append(f"{name} must be non-negative, got {value}")
                else:
                    errors.append(f"{name} must be positive, got {value}")

        if self.pacing not in GATES:
            errors.append(f"pacing must be one of {', '.join(GATES)}, got {self.pacing!r}")

        return errors

    def check(self) -> "SimulationConfig":
        """Raise if the configuration is invalid.

        Raises:
            ConfigError: Listing every problem found
        """
        errors = self.validate()
        if errors:
            raise ConfigError("Invalid configuration: " + "; ".join(errors))
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SimulationConfig":
        """Create a configuration from a dictionary.

        Raises:
            ConfigError: If the dictionary has unknown keys
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "SimulationConfig":
        """Load a configuration from a JSON file.

        Raises:
            ConfigError: If the file can't be read or parsed
        """
        try:
            with open(path, "r") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Could not load configuration from {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Configuration in {path} must be a JSON object")
        return cls.from_dict(data)
