import threading

import pytest

from florence_server.constants import CoreState
from florence_server.launch import LaunchControl


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        LaunchControl(0)


@pytest.mark.parametrize("method", ["request", "start", "end"])
def test_out_of_range_core_rejected(method):
    control = LaunchControl(3)
    with pytest.raises(IndexError):
        getattr(control, method)(3)
    assert control.busy is False


def test_request_takes_turn_for_core():
    control = LaunchControl(3)
    control.request(2)
    assert control.busy is True
    assert control.current_index == 2
    assert control.next_index == 2


def test_start_activates_head_and_releases_turn():
    control = LaunchControl(3)
    head = control.queue.core_to_launch()
    launched = control.start(head)
    assert launched == head
    assert control.queue.is_active(head)
    assert control.busy is False


def test_start_moves_launched_core_to_back():
    control = LaunchControl(3)
    launched = control.start(0)
    order = control.queue.order
    assert sorted(order) == [0, 1, 2]
    assert order[-1] == launched
    assert not control.queue.is_active(control.queue.core_to_launch())


def test_end_makes_core_idle():
    control = LaunchControl(3)
    launched = control.start(0)
    control.end(launched)
    assert control.queue.is_active(launched) is False
    assert control.busy is False
    assert control.current_index == launched


def test_start_waits_while_head_core_active():
    control = LaunchControl(2)
    for core_id in range(2):
        control.queue.set_state(core_id, CoreState.ACTIVE)
    head = control.queue.core_to_launch()
    result = []
    worker = threading.Thread(target=lambda: result.append(control.start(head)))
    worker.start()
    worker.join(0.2)
    assert worker.is_alive()
    control.end(head)
    worker.join(2.0)
    assert not worker.is_alive()
    assert result == [head]
    assert control.queue.is_active(head)


def test_end_waits_for_held_turn():
    control = LaunchControl(3)
    control.request(1)
    done = threading.Event()
    worker = threading.Thread(target=lambda: (control.end(1), done.set()))
    worker.start()
    assert not done.wait(0.2)
    with control._cond:
        control._release()
    worker.join(2.0)
    assert done.is_set()
    assert control.busy is False