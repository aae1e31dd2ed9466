import pytest

from florence_server.praise0 import Praise0Algorithm, Praise0Input, Praise0Output


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (True, True, True),
        (True, False, False),
        (False, True, False),
        (False, False, False),
    ],
)
def test_truth_table(a, b, expected):
    out = Praise0Output()
    Praise0Algorithm().do_praise(Praise0Input(a, b), out)
    assert out.result is expected


def test_result_overwritten():
    out = Praise0Output(result=True)
    Praise0Algorithm().do_praise(Praise0Input(), out)
    assert out.result is False


def test_instances_do_not_share_state():
    first = Praise0Input(a=True, b=True)
    second = Praise0Input()
    assert (second.a, second.b) == (False, False)
    assert first != second