"""Input and output records carried between the I/O core and workers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from .praise0 import Praise0Input, Praise0Output

_INPUT_SUBSETS: dict[int, Callable[[], Praise0Input]] = {0: Praise0Input}
_OUTPUT_SUBSETS: dict[int, Callable[[], Praise0Output]] = {0: Praise0Output}


@dataclass
class InputRecord:
    """A praise event id together with its input subset."""

    praise_event_id: int = 0
    subset: Praise0Input = field(default_factory=Praise0Input)


@dataclass
class OutputRecord:
    """A praise event id together with its output subset."""

    praise_event_id: int = 0
    subset: Praise0Output = field(default_factory=Praise0Output)


def select_input_subset(record: InputRecord, praise_event_id: int) -> Praise0Input:
    """Give the record a fresh input subset for the event; unknown ids leave it."""
    factory = _INPUT_SUBSETS.get(praise_event_id)
    if factory is not None:
        record.subset = factory()
    return record.subset


def select_output_subset(record: OutputRecord, praise_event_id: int) -> Praise0Output:
    """Give the record a fresh output subset for the event; unknown ids leave it."""
    factory = _OUTPUT_SUBSETS.get(praise_event_id)
    if factory is not None:
        record.subset = factory()
    return record.subset