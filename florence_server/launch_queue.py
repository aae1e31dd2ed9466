"""Priority queue deciding which concurrent core is launched next."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import CoreState


@dataclass
class LaunchCounts:
    """How many queue updates a core has spent active or idle."""

    active: int = 0
    idle: int = 0


class LaunchQueue:
    """Orders concurrent cores: long-idle cores first, active cores last."""

    def __init__(self, num_concurrent: int) -> None:
        if num_concurrent < 1:
            raise ValueError("num_concurrent must be positive")
        self._states = [CoreState.IDLE] * num_concurrent
        self._counts = [LaunchCounts() for _ in range(num_concurrent)]
        self._queue = list(range(num_concurrent))

    @property
    def num_concurrent(self) -> int:
        return len(self._states)

    @property
    def order(self) -> tuple[int, ...]:
        """Core ids in queue order; the first is launched next."""
        return tuple(self._queue)

    @property
    def counts(self) -> tuple[LaunchCounts, ...]:
        """Copies of the per-core state counters, indexed by core id."""
        return tuple(LaunchCounts(c.active, c.idle) for c in self._counts)

    def _check(self, core_id: int) -> None:
        if not 0 <= core_id < len(self._states):
            raise IndexError(f"core id {core_id} out of range")

    def is_active(self, core_id: int) -> bool:
        """True if ``core_id`` is running an algorithm."""
        self._check(core_id)
        return self._states[core_id] is CoreState.ACTIVE

    def set_state(self, core_id: int, state: CoreState) -> None:
        """Set the run state of ``core_id``."""
        self._check(core_id)
        self._states[core_id] = CoreState(state)

    def update_queue(self) -> None:
        """Advance the counter of each core's current state, resetting the other."""
        for state, counts in zip(self._states, self._counts):
            if state is CoreState.ACTIVE:
                counts.active, counts.idle = counts.active + 1, 0
            else:
                counts.active, counts.idle = 0, counts.idle + 1

    def _should_swap(self, first: int, second: int) -> bool:
        state_a, state_b = self._states[first], self._states[second]
        counts_a, counts_b = self._counts[first], self._counts[second]
        if state_a is CoreState.ACTIVE:
            if state_b is CoreState.IDLE:
                return True
            return counts_a.active > counts_b.active
        if state_b is CoreState.IDLE:
            return counts_a.idle < counts_b.idle
        return False

    def sort_queue(self) -> None:
        """Reorder the queue by state and by time spent in that state."""
        queue = self._queue
        for pos_a in range(len(queue) - 1):
            for pos_b in range(pos_a + 1, len(queue)):
                if self._should_swap(queue[pos_a], queue[pos_b]):
                    queue[pos_a], queue[pos_b] = queue[pos_b], queue[pos_a]

    def core_to_launch(self) -> int:
        """Core id at the head of the queue."""
        return self._queue[0]

    def activate(self) -> int:
        """Mark the core at the head of the queue active and return its id."""
        core_id = self._queue[0]
        self._states[core_id] = CoreState.ACTIVE
        return core_id