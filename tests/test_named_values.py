import pytest

from bbscript.errors import NoAssociatedValue
from bbscript.named_values import NamedValues


@pytest.fixture
def nv():
    return NamedValues([(0, 3, "kStateIdle"), (0, 4, "kStateRun"), (1, 3, "kStateIdle")])


def test_lookup_both_directions(nv):
    assert nv.get_name(0, 3) == "kStateIdle"
    assert nv.get_value(0, "kStateRun") == 4
    assert nv.get_name(1, 3) == "kStateIdle"
    assert nv.get_value(1, "kStateIdle") == 3


def test_missing_name_is_none(nv):
    assert nv.get_name(0, 99) is None
    assert nv.get_name(2, 3) is None


def test_missing_value_raises(nv):
    with pytest.raises(NoAssociatedValue) as ei:
        nv.get_value(0, "kStateDead")
    assert ei.value.slot == 0
    assert ei.value.name == "kStateDead"


def test_roundtrip(nv):
    for slot, value, name in nv:
        assert nv.get_name(slot, nv.get_value(slot, name)) == name


@pytest.mark.parametrize(
    "pairs",
    [
        [(0, 1, "a"), (0, 1, "b")],
        [(0, 1, "a"), (0, 2, "a")],
    ],
)
def test_rejects_non_bijection(pairs):
    with pytest.raises(ValueError):
        NamedValues(pairs)


def test_slots_and_len(nv):
    assert len(nv) == 3
    assert nv.slots() == [0, 1]
    assert not NamedValues()
