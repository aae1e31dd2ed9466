"""Shared state constants and server sizing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_NUM_CORES = 4


class CoreState(Enum):
    """Run state of a concurrent core."""

    IDLE = False
    ACTIVE = True


class WriteState(Enum):
    """Write-permission state of a core, encoded as a pair of flags."""

    IDLE = (False, False)
    WAIT = (False, True)
    WRITE = (True, False)

    def flags(self) -> tuple[bool, bool]:
        """Return the two-flag encoding of this state."""
        return self.value

    @classmethod
    def from_flags(cls, first: bool, second: bool) -> "WriteState":
        """Decode a flag pair; raise ValueError for the unused pair."""
        try:
            return cls((bool(first), bool(second)))
        except ValueError:
            raise ValueError(
                f"flag pair ({first!r}, {second!r}) is not a write state"
            ) from None


@dataclass(frozen=True)
class ServerConfig:
    """Number of cores the server runs: one I/O core plus concurrent cores."""

    num_cores: int = DEFAULT_NUM_CORES

    def __post_init__(self) -> None:
        if self.num_cores < 2:
            raise ValueError("a server needs at least two cores")

    def num_concurrent(self) -> int:
        """Number of cores that run algorithms (all but the I/O core)."""
        return self.num_cores - 1