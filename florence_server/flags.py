"""Start-up and I/O-direction flags shared by the server's threads."""

from __future__ import annotations

import threading
from dataclasses import dataclass


class ExecuteControl:
    """Tracks which cores have finished initialising."""

    def __init__(self, num_cores: int) -> None:
        if num_cores < 1:
            raise ValueError("num_cores must be positive")
        self._initialising = [True] * num_cores
        self._cond = threading.Condition()

    @property
    def num_cores(self) -> int:
        return len(self._initialising)

    def _check(self, core_id: int) -> None:
        if not 0 <= core_id < len(self._initialising):
            raise IndexError(f"core id {core_id} out of range")

    def mark_thread_ready(self, core_id: int) -> None:
        """Record that the thread of ``core_id`` has finished initialising."""
        self._check(core_id)
        with self._cond:
            self._initialising[core_id] = False
            self._cond.notify_all()

    def system_initialising(self) -> bool:
        """True while any core is still initialising."""
        with self._cond:
            return any(self._initialising)

    def thread_initialising(self, core_id: int) -> bool:
        """True while the thread of ``core_id`` is still initialising."""
        self._check(core_id)
        with self._cond:
            return self._initialising[core_id]

    def wait_until_ready(self, timeout: float | None = None) -> bool:
        """Block until every core is ready; return False on timeout."""
        with self._cond:
            return self._cond.wait_for(
                lambda: not any(self._initialising), timeout=timeout
            )


@dataclass
class ListenRespondControl:
    """Direction of the I/O core: listening (True) or distributing (False)."""

    listening: bool = False