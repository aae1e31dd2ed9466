"""Stack handling for queued input and output records.

Index 0 of each stack holds a template record; queued records follow it
in arrival order.
"""

from __future__ import annotations

from dataclasses import dataclass

from .records import InputRecord, OutputRecord


@dataclass
class DataControl:
    """Moves records on and off the shared stacks and tracks whether they hold work."""

    input_loaded: bool = False
    output_loaded: bool = False

    def __init__(self) -> None:
        self.input_loaded = False
        self.output_loaded = False

    def push_input(self, stack: list[InputRecord], record: InputRecord) -> InputRecord:
        """Queue a copy of ``record`` on the input stack and return the queued copy."""
        if not stack:
            raise IndexError("input stack has no template record")
        queued = InputRecord(record.praise_event_id, record.subset)
        stack.append(queued)
        return queued

    def pop_input(self, stack: list[InputRecord], target: InputRecord) -> InputRecord:
        """Move the oldest queued input into ``target`` and return it."""
        if len(stack) < 2:
            raise IndexError("input stack holds no queued record")
        queued = stack.pop(1)
        target.praise_event_id = queued.praise_event_id
        target.subset = queued.subset
        return target

    def push_output(self, stack: list[OutputRecord], record: OutputRecord) -> OutputRecord:
        """Queue a copy of ``record`` on the output stack and return the queued copy."""
        if not stack:
            raise IndexError("output stack has no template record")
        queued = OutputRecord(record.praise_event_id, record.subset)
        stack.append(queued)
        return queued

    def pop_output(self, stack: list[OutputRecord], target: OutputRecord) -> OutputRecord:
        """Move the oldest queued output into ``target`` and return it."""
        if len(stack) < 2:
            raise IndexError("output stack holds no queued record")
        queued = stack.pop(1)
        target.praise_event_id = queued.praise_event_id
        target.subset = queued.subset
        return target