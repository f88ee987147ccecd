"""Tests for the throttle gates."""

import pytest

from lifecubes.core.errors import ConfigError
from lifecubes.core.lifecycle import LifecycleTracker
from lifecubes.core.pacing import (
    AnimationGate,
    FixedIntervalGate,
    FreeRunningGate,
    TickGate,
    create_gate,
)


class TestFixedIntervalGate:
    """Test cases for the fixed interval gate."""

    def test_starts_closed(self):
        """Test a new gate is closed."""
        gate = FixedIntervalGate(0.5)
        assert not gate.is_tick_allowed()
        assert gate.overstep == 0.0

    def test_opens_after_interval(self):
        """Test the gate opens once enough time has accumulated."""
        gate = FixedIntervalGate(0.5)

        gate.advance(0.25)
        assert not gate.is_tick_allowed()

        gate.advance(0.25)
        assert gate.is_tick_allowed()

    def test_consume_closes(self):
        """Test consuming the tick closes the gate until the next signal."""
        gate = FixedIntervalGate(0.5)
        gate.advance(0.5)
        gate.mark_tick_consumed()

        assert not gate.is_tick_allowed()

        gate.advance(0.25)
        assert not gate.is_tick_allowed()

    def test_overstep(self):
        """Test the time past the boundary is reported and carried over."""
        gate = FixedIntervalGate(0.5)
        gate.advance(1.25)

        assert gate.is_tick_allowed()
        assert gate.overstep == pytest.approx(0.75)

        gate.mark_tick_consumed()
        assert not gate.is_tick_allowed()

        # Leftover time reopens the gate only on the next signal
        gate.advance(0.0)
        assert gate.is_tick_allowed()
        assert gate.overstep == pytest.approx(0.25)

    def test_one_opening_per_signal(self):
        """A long frame still opens the gate only once."""
        gate = FixedIntervalGate(0.1)
        gate.advance(1.0)
        gate.advance(1.0)

        assert gate.is_tick_allowed()
        gate.mark_tick_consumed()
        assert not gate.is_tick_allowed()

    def test_invalid_interval(self):
        """Test the interval must be positive."""
        with pytest.raises(ConfigError):
            FixedIntervalGate(0.0)


class TestAnimationGate:
    """Test cases for the animation gate."""

    def test_opens_without_tracker(self):
        """Test the gate opens when there is nothing to wait for."""
        gate = AnimationGate()
        gate.advance(0.1)
        assert gate.is_tick_allowed()

    def test_waits_for_fall(self):
        """Test the gate waits until the newest records are falling."""
        tracker = LifecycleTracker(fall_delay=0.1)
        tracker.spawn([(0, 0), (1, 1)], generation=1)
        gate = AnimationGate()

        gate.advance(0.06, tracker)
        assert not gate.is_tick_allowed()

        tracker.advance(0.06)
        tracker.advance(0.06)
        tracker.advance(0.06)
        gate.advance(0.06, tracker)
        assert gate.is_tick_allowed()

        gate.mark_tick_consumed()
        tracker.spawn([(2, 2)], generation=2)
        gate.advance(0.06, tracker)
        assert not gate.is_tick_allowed()

    def test_partial_threshold(self):
        """Test a threshold below one opens on partial progress."""
        tracker = LifecycleTracker(fall_delay=0.1)
        tracker.spawn([(0, 0)], generation=1, initial_age=0.2)
        tracker.spawn([(1, 1)], generation=1)
        tracker.advance(0.01)

        strict = AnimationGate(1.0)
        strict.advance(0.01, tracker)
        assert not strict.is_tick_allowed()

        half = AnimationGate(0.5)
        half.advance(0.01, tracker)
        assert half.is_tick_allowed()

    def test_invalid_threshold(self):
        """Test the threshold must be a fraction."""
        with pytest.raises(ConfigError):
            AnimationGate(1.5)


class TestFreeRunningGate:
    """Test cases for the free running gate."""

    def test_opens_on_every_signal(self):
        """Test the gate opens on each advance."""
        gate = FreeRunningGate()
        assert not gate.is_tick_allowed()

        gate.advance(0.0)
        assert gate.is_tick_allowed()

        gate.mark_tick_consumed()
        assert not gate.is_tick_allowed()


class TestCreateGate:
    """Test cases for the gate factory."""

    def test_known_names(self):
        """Test each pacing name maps to its gate."""
        assert isinstance(create_gate("fixed", interval=0.2), FixedIntervalGate)
        assert create_gate("fixed", interval=0.2).interval == 0.2
        assert isinstance(create_gate("animation", threshold=0.5), AnimationGate)
        assert isinstance(create_gate("free"), FreeRunningGate)

    def test_unknown_name(self):
        """Test unknown pacing names are rejected."""
        with pytest.raises(ConfigError):
            create_gate("sometimes")

    def test_base_gate_is_abstract(self):
        """Test the base gate can't be created without a timing policy."""
        with pytest.raises(TypeError):
            TickGate()
