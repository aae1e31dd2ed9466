"""Turn-taking write permission for cores that modify shared data."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator

from .constants import WriteState
from .write_queue import WriteQueue


class WriteEnable:
    """Serialises writes to shared data between the server's cores.

    A core obtains the write turn by rotating the shared index until it
    points at that core. While waiting for the turn the core is marked
    WAIT, while holding it WRITE, and IDLE once it has released it.
    """

    def __init__(self, num_cores: int) -> None:
        self.queue = WriteQueue(num_cores)
        self._cond = threading.Condition()
        self._busy = False
        self._current_index = 0
        self._next_index = 1 % num_cores

    @property
    def num_cores(self) -> int:
        return self.queue.num_cores

    @property
    def busy(self) -> bool:
        """True while some core holds the write turn."""
        with self._cond:
            return self._busy

    @property
    def current_index(self) -> int:
        """Core id that last took the write turn."""
        with self._cond:
            return self._current_index

    @property
    def next_index(self) -> int:
        """Core id the rotation will offer the turn to next."""
        with self._cond:
            return self._next_index

    def _check(self, core_id: int) -> None:
        if not 0 <= core_id < self.queue.num_cores:
            raise IndexError(f"core id {core_id} out of range")

    def request(self, core_id: int) -> None:
        """Block until the write turn is free and take it for ``core_id``."""
        self._check(core_id)
        with self._cond:
            self._cond.wait_for(lambda: not self._busy)
            while True:
                self._current_index = self._next_index
                if self._current_index == core_id:
                    break
                self._next_index = (self._current_index + 1) % self.queue.num_cores
            self._busy = True
            self.queue.set_state(core_id, WriteState.WAIT)

    def activate(self, core_id: int) -> None:
        """Mark ``core_id`` as writing."""
        self._check(core_id)
        with self._cond:
            self.queue.set_state(core_id, WriteState.WRITE)

    def start(self, core_id: int) -> None:
        """Take the write turn for ``core_id`` and begin writing."""
        self.request(core_id)
        with self._cond:
            self.queue.update_queue()
            self.queue.sort_queue()
            self.queue.set_state(core_id, WriteState.WRITE)

    def end(self, core_id: int) -> None:
        """Finish writing for ``core_id`` and pass the turn on."""
        self._check(core_id)
        with self._cond:
            if not self._busy or self._current_index != core_id:
                raise RuntimeError(f"core {core_id} does not hold the write turn")
            try:
                self.queue.set_state(core_id, WriteState.IDLE)
                self._next_index = (self._current_index + 1) % self.queue.num_cores
                self.queue.update_queue()
                self.queue.sort_queue()
            finally:
                self._busy = False
                self._cond.notify_all()

    @contextmanager
    def hold(self, core_id: int) -> Iterator[None]:
        """Hold the write turn for ``core_id`` for the duration of the block."""
        self.start(core_id)
        try:
            yield
        finally:
            self.end(core_id)