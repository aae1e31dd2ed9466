"""Shared data held by the server: buffers, per-core records and work stacks."""

from __future__ import annotations

from .data_control import DataControl
from .records import InputRecord, OutputRecord


class DataStore:
    """All records the I/O core and the concurrent cores exchange.

    ``praise_buffer`` receives incoming praise events and ``distribute_buffer``
    holds the result being sent out. Each concurrent core has its own input
    and output record. The two stacks keep a template record at index 0,
    with queued records after it.
    """

    def __init__(self, num_concurrent: int) -> None:
        if num_concurrent < 1:
            raise ValueError("num_concurrent must be positive")
        self.control = DataControl()
        self.praise_buffer = InputRecord()
        self.distribute_buffer = OutputRecord()
        self.input_records = [InputRecord() for _ in range(num_concurrent)]
        self.output_records = [OutputRecord() for _ in range(num_concurrent)]
        self.input_stack: list[InputRecord] = [InputRecord()]
        self.output_stack: list[OutputRecord] = [OutputRecord()]

    @property
    def num_concurrent(self) -> int:
        return len(self.input_records)

    def _check(self, core_id: int) -> None:
        if not 0 <= core_id < len(self.input_records):
            raise IndexError(f"core id {core_id} out of range")

    def input_of_core(self, core_id: int) -> InputRecord:
        """Input record assigned to concurrent core ``core_id``."""
        self._check(core_id)
        return self.input_records[core_id]

    def output_of_core(self, core_id: int) -> OutputRecord:
        """Output record assigned to concurrent core ``core_id``."""
        self._check(core_id)
        return self.output_records[core_id]