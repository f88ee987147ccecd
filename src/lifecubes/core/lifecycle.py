"""Per-cell visual records and their fall/retire timeline.

Every generation spawns one record per living cell. A record waits
``fall_delay`` seconds, then falls at ``fall_speed`` units per second until
it passes ``destroy_position``, and is retired ``despawn_delay`` seconds
later. The tracker holds plain data only; mapping records to renderable
objects is up to the caller.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple
import logging

logger = logging.getLogger(__name__)


@dataclass
class CellRecord:
    """Visual record of one living cell of one generation."""

    row: int
    col: int
    generation: int
    age: float = 0.0
    falling: bool = False
    offset: float = 0.0
    destroy_elapsed: Optional[float] = None

    @property
    def destroying(self) -> bool:
        """Whether the record has fallen far enough to be torn down."""
        return self.destroy_elapsed is not None


class LifecycleTracker:
    """Tracks the age and fall of every spawned cell record."""

    def __init__(
        self,
        fall_delay: float = 0.1,
        fall_speed: float = 5.0,
        destroy_position: float = 30.0,
        despawn_delay: float = 0.3,
    ) -> None:
        """Initialize the tracker.

        Args:
            fall_delay: Seconds a record stays in place before falling
            fall_speed: Fall speed in units per second
            destroy_position: Fall distance after which a record is destroyed
            despawn_delay: Seconds between destruction and retirement
        """
        self.fall_delay = fall_delay
        self.fall_speed = fall_speed
        self.destroy_position = destroy_position
        self.despawn_delay = despawn_delay
        self._records: List[CellRecord] = []

    @property
    def records(self) -> List[CellRecord]:
        """All live records, oldest first."""
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    @property
    def newest_generation(self) -> Optional[int]:
        """Generation of the most recently spawned record."""
        if not self._records:
            return None
        return max(record.generation for record in self._records)

    def spawn(
        self, cells: Iterable[Tuple[int, int]], generation: int, initial_age: float = 0.0
    ) -> List[CellRecord]:
        """Create records for the living cells of a generation.

        Args:
            cells: (row, col) coordinates of living cells
            generation: Generation that produced the cells
            initial_age: Time already elapsed since the generation was computed

        Returns:
            The new records
        """
        new_records = [CellRecord(row, col, generation, age=initial_age) for row, col in cells]
        self._records.extend(new_records)
        return new_records

    def advance(self, dt: float) -> List[CellRecord]:
        """Age every record by ``dt`` seconds.

        Returns:
            Records retired during this step
        """
        for record in self._records:
            if record.destroying:
                continue

            if record.age > self.fall_delay:
                if not record.falling:
                    record.offset = -self.fall_speed * (record.age - self.fall_delay)
                    record.falling = True
                record.offset -= self.fall_speed * dt

                if abs(record.offset) > self.destroy_position:
                    record.destroy_elapsed = 0.0

            record.age += dt

        retired = []
        remaining = []
        for record in self._records:
            if record.destroying and record.destroy_elapsed > self.despawn_delay:
                retired.append(record)
                continue
            if record.destroying:
                record.destroy_elapsed += dt
            remaining.append(record)

        self._records = remaining
        if retired:
            logger.debug("Retired %d cell records", len(retired))
        return retired

    def generation_records(self, generation: int) -> List[CellRecord]:
        """Records spawned by a given generation."""
        return [record for record in self._records if record.generation == generation]

    def generation_progress(self, generation: int) -> float:
        """Fraction of a generation's records that have started falling.

        Returns:
            Value between 0.0 and 1.0; 1.0 if the generation has no records
        """
        records = self.generation_records(generation)
        if not records:
            return 1.0
        return sum(1 for record in records if record.falling) / len(records)

    def counts_by_generation(self) -> Dict[int, int]:
        """Number of live records per generation."""
        counts: Dict[int, int] = {}
        for record in self._records:
            counts[record.generation] = counts.get(record.generation, 0) + 1
        return counts

    def clear(self) -> None:
        """Drop every record."""
        self._records.clear()
