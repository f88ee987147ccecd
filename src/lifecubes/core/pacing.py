"""Throttle gates deciding when the next generation may be computed.

A gate starts closed. ``advance()`` is the external timing signal and is
the only way a closed gate opens; ``mark_tick_consumed()`` closes it right
after a generation transition.
"""

from abc import ABC, abstractmethod
from typing import Optional
import logging

from .errors import ConfigError
from .lifecycle import LifecycleTracker

logger = logging.getLogger(__name__)


class TickGate(ABC):
    """Base throttle gate."""

    def __init__(self) -> None:
        self._open = False

    def is_tick_allowed(self) -> bool:
        """Whether a generation may be computed now."""
        return self._open

    def mark_tick_consumed(self) -> None:
        """Close the gate after a generation transition."""
        self._open = False

    @abstractmethod
    def advance(self, elapsed: float, tracker: Optional[LifecycleTracker] = None) -> None:
        """Feed the gate a timing signal.

        Args:
            elapsed: Seconds since the previous signal
            tracker: Lifecycle tracker of the visual records, if any
        """

    @property
    def overstep(self) -> float:
        """Time already elapsed past the moment the gate opened."""
        return 0.0


class FixedIntervalGate(TickGate):
    """Opens once every ``interval`` seconds of accumulated time."""

    def __init__(self, interval: float = 0.1) -> None:
        super().__init__()
        if interval <= 0:
            raise ConfigError(f"Tick interval must be positive, got {interval}")
        self.interval = interval
        self._accumulated = 0.0

    def advance(self, elapsed: float, tracker: Optional[LifecycleTracker] = None) -> None:
        self._accumulated += elapsed
        if not self._open and self._accumulated >= self.interval:
            self._open = True
            logger.debug("Fixed gate opened (accumulated %.3fs)", self._accumulated)

    def mark_tick_consumed(self) -> None:
        if self._open:
            self._accumulated -= self.interval
        super().mark_tick_consumed()

    @property
    def overstep(self) -> float:
        if not self._open:
            return 0.0
        return self._accumulated - self.interval


class AnimationGate(TickGate):
    """Opens once the newest generation's records have started falling."""

    def __init__(self, threshold: float = 1.0) -> None:
        super().__init__()
        if not 0.0 <= threshold <= 1.0:
            raise ConfigError(f"Animation threshold must be between 0 and 1, got {threshold}")
        self.threshold = threshold

    def advance(self, elapsed: float, tracker: Optional[LifecycleTracker] = None) -> None:
        if self._open:
            return

        newest = tracker.newest_generation if tracker is not None else None
        if newest is None or tracker.generation_progress(newest) >= self.threshold:
            self._open = True
            logger.debug("Animation gate opened after generation %s", newest)


class FreeRunningGate(TickGate):
    """Opens on every timing signal."""

    def advance(self, elapsed: float, tracker: Optional[LifecycleTracker] = None) -> None:
        self._open = True


GATES = ("fixed", "animation", "free")


def create_gate(name: str, interval: float = 0.1, threshold: float = 1.0) -> TickGate:
    """Create a gate by pacing policy name.

    Args:
        name: One of "fixed", "animation" or "free"
        interval: Tick interval for the fixed gate
        threshold: Fall progress required by the animation gate

    Raises:
        ConfigError: If the name is unknown
    """
    if name == "fixed":
        return FixedIntervalGate(interval)
    if name == "animation":
        return AnimationGate(threshold)
    if name == "free":
        return FreeRunningGate()
    raise ConfigError(f"Unknown pacing policy '{name}' (expected one of: {', '.join(GATES)})")
