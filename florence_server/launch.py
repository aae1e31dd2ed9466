"""Turn-taking launch control for the concurrent cores."""

from __future__ import annotations

import threading

from .constants import CoreState
from .launch_queue import LaunchQueue


class LaunchControl:
    """Serialises launching and ending of concurrent cores.

    A core obtains the launch turn by rotating the shared index until it
    points at that core; the turn is held until released.
    """

    def __init__(self, num_concurrent: int) -> None:
        self.queue = LaunchQueue(num_concurrent)
        self._cond = threading.Condition()
        self._busy = False
        self._current_index = 0
        self._next_index = 0

    @property
    def num_concurrent(self) -> int:
        return self.queue.num_concurrent

    @property
    def busy(self) -> bool:
        """True while some core holds the launch turn."""
        with self._cond:
            return self._busy

    @property
    def current_index(self) -> int:
        """Core id that last took the launch turn."""
        with self._cond:
            return self._current_index

    @property
    def next_index(self) -> int:
        """Core id the rotation will offer the turn to next."""
        with self._cond:
            return self._next_index

    def _check(self, core_id: int) -> None:
        if not 0 <= core_id < self.queue.num_concurrent:
            raise IndexError(f"core id {core_id} out of range")

    def _take_turn(self, core_id: int) -> None:
        # Caller holds the condition and has seen the turn free.
        while True:
            self._current_index = self._next_index
            if self._current_index == core_id:
                self._busy = True
                return
            self._next_index = (self._current_index + 1) % self.queue.num_concurrent

    def _release(self) -> None:
        self._busy = False
        self._cond.notify_all()

    def request(self, core_id: int) -> None:
        """Block until the head of the queue is idle and take the turn for ``core_id``."""
        self._check(core_id)
        with self._cond:
            self._cond.wait_for(
                lambda: not self._busy
                and not self.queue.is_active(self.queue.core_to_launch())
            )
            self._take_turn(core_id)

    def start(self, core_id: int) -> int:
        """Launch the core at the head of the queue; return the launched core id."""
        self.request(core_id)
        with self._cond:
            try:
                self.queue.update_queue()
                self.queue.sort_queue()
                launched = self.queue.activate()
                self.queue.update_queue()
                self.queue.sort_queue()
            finally:
                self._release()
        return launched

    def end(self, core_id: int) -> None:
        """Mark ``core_id`` idle once the launch turn is free."""
        self._check(core_id)
        with self._cond:
            self._cond.wait_for(lambda: not self._busy)
            self._take_turn(core_id)
            try:
                self.queue.set_state(core_id, CoreState.IDLE)
            finally:
                self._release()