import pytest

from florence_server.data import DataStore
from florence_server.praise0 import Praise0Output
from florence_server.records import InputRecord, OutputRecord


def test_per_core_records_are_distinct():
    data = DataStore(3)
    assert data.num_concurrent == 3
    inputs = [data.input_of_core(i) for i in range(3)]
    outputs = [data.output_of_core(i) for i in range(3)]
    assert len({id(r) for r in inputs}) == 3
    assert len({id(r) for r in outputs}) == 3


def test_records_start_at_event_zero():
    data = DataStore(2)
    assert data.input_of_core(1).praise_event_id == 0
    assert data.output_of_core(0).praise_event_id == 0
    assert data.praise_buffer.praise_event_id == 0
    assert data.distribute_buffer.subset.result is False


def test_stacks_hold_only_template():
    data = DataStore(2)
    assert len(data.input_stack) == 1
    assert len(data.output_stack) == 1
    assert data.control.input_loaded is False
    assert data.control.output_loaded is False


@pytest.mark.parametrize("core_id", [-1, 2, 5])
def test_core_id_out_of_range(core_id):
    data = DataStore(2)
    with pytest.raises(IndexError):
        data.input_of_core(core_id)
    with pytest.raises(IndexError):
        data.output_of_core(core_id)


@pytest.mark.parametrize("count", [0, -3])
def test_needs_a_concurrent_core(count):
    with pytest.raises(ValueError):
        DataStore(count)


def test_input_stack_round_trip_through_control():
    data = DataStore(2)
    record = InputRecord(praise_event_id=0)
    record.subset.a = True
    data.control.push_input(data.input_stack, record)
    target = data.input_of_core(1)
    data.control.pop_input(data.input_stack, target)
    assert target.subset.a is True
    assert len(data.input_stack) == 1


def test_output_stack_round_trip_through_control():
    data = DataStore(2)
    data.control.push_output(
        data.output_stack, OutputRecord(0, Praise0Output(result=True))
    )
    data.control.pop_output(data.output_stack, data.distribute_buffer)
    assert data.distribute_buffer.subset.result is True
    assert len(data.output_stack) == 1