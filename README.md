# florence-server

Building blocks for a server that listens for *praise events*, queues
them, launches a concurrent worker core for each one and collects results
for distribution. The pieces are thread-safe where they are shared between
threads.

## Modules

- `florence_server.constants`: `CoreState` (`IDLE`, `ACTIVE`), `WriteState`
  (`IDLE`, `WAIT`, `WRITE`, each a pair of flags given by `flags()` and
  decoded by `WriteState.from_flags`), and `ServerConfig`, which holds
  `num_cores` (default 4, at least 2) and gives `num_concurrent()`, all
  cores but the I/O core.
- `florence_server.praise0`: the sample praise event 0. `Praise0Input` has
  the booleans `a` and `b`, and `Praise0Algorithm.do_praise` stores
  `a and b` in `Praise0Output.result`.
- `florence_server.records`: `InputRecord` and `OutputRecord` pair a
  `praise_event_id` with a `subset`. `select_input_subset` and
  `select_output_subset` give a record a fresh subset for event id 0 and
  leave it unchanged for unknown ids.
- `florence_server.flags`: `ExecuteControl` tracks which cores are still
  initialising (`mark_thread_ready`, `system_initialising`,
  `thread_initialising`, `wait_until_ready`). `ListenRespondControl.listening`
  sets the direction of the I/O core.
- `florence_server.write_queue`: `WriteQueue` keeps a write state and
  counters per core and orders cores so that waiting cores come first and
  writing cores last (`update_queue`, `sort_queue`, `core_to_write`).
- `florence_server.write_enable`: `WriteEnable` hands the write turn to one
  core at a time in rotation. `start` / `end`, or the context manager
  `hold(core_id)`, bracket a write; `end` raises `RuntimeError` if the core
  does not hold the turn.
- `florence_server.launch_queue`: `LaunchQueue` orders concurrent cores so
  that long-idle cores come first and active cores last.
- `florence_server.launch`: `LaunchControl` serialises launching.
  `start(core_id)` marks the core at the head of the launch queue active and
  returns its id; `end(core_id)` marks a core idle again.
- `florence_server.data_control`: `DataControl` pushes and pops records on
  the input and output stacks, whose index 0 is a template record, and holds
  the `input_loaded` / `output_loaded` flags.
- `florence_server.data`: `DataStore` holds the praise buffer, the
  distribute buffer, one input and one output record per concurrent core
  (`input_of_core`, `output_of_core`) and the two stacks.
- `florence_server.listen_respond`: `listen_distribute` runs one step of the
  I/O core. When listening it queues a praise event and launches a core,
  returning that core's id. When distributing it moves the oldest queued
  output into the distribute buffer and returns a copy, or `None` if nothing
  is queued. Each step flips the direction.

## Example

```python
from florence_server.praise0 import Praise0Algorithm, Praise0Input, Praise0Output

inputs = Praise0Input(a=True, b=True)
outputs = Praise0Output()
Praise0Algorithm().do_praise(inputs, outputs)
assert outputs.result is True
```

Holding the write turn around a change to shared data:

```python
from florence_server.write_enable import WriteEnable

gate = WriteEnable(4)
with gate.hold(1):
    ...  # only core 1 writes here
```

## What it does not do

The package has no command and no ready-made server. Nothing in it
starts threads, and no worker loop takes queued input from the stack, runs
the praise algorithm on a launched core and pushes the result onto the
output stack. `LaunchControl.start` only marks a core active, and
`listen_distribute` does one step per call. There is also no networking.
Incoming praise events are filled in locally, and distributed results are
only returned to the caller.

## Tests

```
pip install .[test]
pytest
```