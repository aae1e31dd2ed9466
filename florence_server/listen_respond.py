"""One pass of the I/O core: either accept a praise event or distribute a result."""

from __future__ import annotations

from .data import DataStore
from .flags import ExecuteControl, ListenRespondControl
from .launch import LaunchControl
from .records import OutputRecord, select_input_subset
from .write_enable import WriteEnable

_RECEIVED_EVENT_ID = 0


def listen_distribute(
    core_id: int,
    data: DataStore,
    execute: ExecuteControl,
    launch: LaunchControl,
    write_enable: WriteEnable,
    listen_control: ListenRespondControl,
) -> int | OutputRecord | None:
    """Run one listen or distribute step for the I/O core ``core_id``.

    The core marks itself ready and waits for all cores. When listening it
    queues a praise event, launches the concurrent core at the head of the
    launch queue and returns that core's id. When distributing it moves the
    oldest queued output into the distribute buffer and returns a copy of it,
    or returns None if no output is queued. Each step flips the direction.
    """
    execute.mark_thread_ready(core_id)
    execute.wait_until_ready()

    if listen_control.listening:
        with write_enable.hold(core_id):
            buffer = data.praise_buffer
            buffer.praise_event_id = _RECEIVED_EVENT_ID
            subset = select_input_subset(buffer, buffer.praise_event_id)
            subset.a = False
            subset.b = False
            data.control.push_input(data.input_stack, buffer)
            data.control.input_loaded = True
            launched = launch.start(launch.queue.core_to_launch())
        listen_control.listening = False
        return launched

    distributed: OutputRecord | None = None
    if data.control.output_loaded:
        with write_enable.hold(core_id):
            target = data.control.pop_output(data.output_stack, data.distribute_buffer)
            data.control.output_loaded = len(data.output_stack) > 1
            distributed = OutputRecord(target.praise_event_id, target.subset)
    listen_control.listening = True
    return distributed