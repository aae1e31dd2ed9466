"""Priority queue deciding which core may write to shared data next."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import WriteState


@dataclass
class WriteCounts:
    """How many queue updates a core has spent in its current write state."""

    active: int = 0
    idle: int = 0
    wait: int = 0


class WriteQueue:
    """Orders cores by write state: waiting cores first, writing cores last."""

    def __init__(self, num_cores: int) -> None:
        if num_cores < 1:
            raise ValueError("num_cores must be positive")
        self._states = [WriteState.IDLE] * num_cores
        self._counts = [WriteCounts() for _ in range(num_cores)]
        self._queue = list(range(num_cores))

    @property
    def num_cores(self) -> int:
        return len(self._states)

    @property
    def order(self) -> tuple[int, ...]:
        """Core ids in queue order; the first may write next."""
        return tuple(self._queue)

    @property
    def counts(self) -> tuple[WriteCounts, ...]:
        """Copies of the per-core state counters, indexed by core id."""
        return tuple(
            WriteCounts(c.active, c.idle, c.wait) for c in self._counts
        )

    def _check(self, core_id: int) -> None:
        if not 0 <= core_id < len(self._states):
            raise IndexError(f"core id {core_id} out of range")

    def state_of(self, core_id: int) -> WriteState:
        """Current write state of ``core_id``."""
        self._check(core_id)
        return self._states[core_id]

    def set_state(self, core_id: int, state: WriteState) -> None:
        """Set the write state of ``core_id``."""
        self._check(core_id)
        self._states[core_id] = WriteState(state)

    def update_queue(self) -> None:
        """Advance the counter of each core's current state, resetting the others."""
        for state, counts in zip(self._states, self._counts):
            if state is WriteState.IDLE:
                counts.active, counts.idle, counts.wait = 0, counts.idle + 1, 0
            elif state is WriteState.WAIT:
                counts.active, counts.idle, counts.wait = 0, 0, counts.wait + 1
            else:
                counts.active, counts.idle, counts.wait = counts.active + 1, 0, 0

    def _should_swap(self, first: int, second: int) -> bool:
        state_a, state_b = self._states[first], self._states[second]
        counts_a, counts_b = self._counts[first], self._counts[second]
        if state_a is WriteState.WRITE:
            if state_b in (WriteState.WAIT, WriteState.IDLE):
                return True
            return counts_a.active > counts_b.active
        if state_a is WriteState.IDLE:
            if state_b is WriteState.WAIT:
                return True
            if state_b is WriteState.IDLE:
                return counts_a.idle < counts_b.idle
            return False
        if state_b is WriteState.WAIT:
            return counts_a.wait > counts_b.wait
        return False

    def sort_queue(self) -> None:
        """Reorder the queue by state and by time spent in that state."""
        queue = self._queue
        for pos_a in range(len(queue) - 1):
            for pos_b in range(pos_a + 1, len(queue)):
                if self._should_swap(queue[pos_a], queue[pos_b]):
                    queue[pos_a], queue[pos_b] = queue[pos_b], queue[pos_a]

    def core_to_write(self) -> int:
        """Core id at the head of the queue."""
        return self._queue[0]