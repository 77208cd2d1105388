import pytest
from hypothesis import given
from hypothesis import strategies as st

from structkit.avl_map import AVLMap


def _demo_map():
    m = AVLMap(default_factory=str)
    for key in (10, 20, 30, 100, 200, 150, 300):
        m.insert(key, str(key))
    return m


def test_demo_sequence():
    m = _demo_map()
    m[30] = "LOL"
    m.erase(12)
    assert 30 in m
    assert m[30] == "LOL"
    assert m.in_order() == ["10", "20", "LOL", "100", "150", "200", "300"]
    assert m.is_balanced()


def test_ascending_inserts_rotate():
    m = AVLMap()
    m.insert(1, "a")
    m.insert(2, "b")
    m.insert(3, "c")
    assert m.pre_order() == ["b", "a", "c"]
    assert m.post_order() == ["a", "c", "b"]
    assert m.height() == 2


def test_insert_replaces_value():
    m = AVLMap()
    m.insert(5, "x")
    m.insert(5, "y")
    assert m.in_order() == ["y"]
    assert m.find(5) == "y"


def test_find_missing_returns_none():
    m = _demo_map()
    assert m.find(999) is None
    assert m.find(100) == "100"


def test_getitem_missing_without_factory_raises():
    m = AVLMap()
    m.insert(1, "one")
    with pytest.raises(KeyError):
        m[2]
    assert 2 not in m
    assert m.in_order() == ["one"]


def test_getitem_missing_with_factory_inserts_default():
    m = AVLMap(default_factory=list)
    m[7].append("item")
    assert 7 in m
    assert m[7] == ["item"]


def test_erase_missing_is_noop():
    m = _demo_map()
    before = m.in_order()
    m.erase(12)
    assert m.in_order() == before


def test_erase_node_with_two_children():
    m = _demo_map()
    m.erase(100)
    assert 100 not in m
    assert m.in_order() == ["10", "20", "30", "150", "200", "300"]
    assert m.is_balanced()


def test_empty_map():
    m = AVLMap()
    assert m.in_order() == []
    assert m.height() == 0
    assert 1 not in m


@given(st.lists(st.tuples(st.integers(-50, 50), st.integers())))
def test_matches_dict(pairs):
    m = AVLMap()
    for key, value in pairs:
        m.insert(key, value)
    expected = dict(pairs)
    assert m.in_order() == [expected[k] for k in sorted(expected)]
    assert m.is_balanced()
    for key, value in expected.items():
        assert key in m
        assert m[key] == value


@given(
    st.lists(st.integers(-30, 30), unique=True),
    st.lists(st.integers(-30, 30)),
)
def test_erase_matches_dict(keys, removals):
    m = AVLMap()
    for key in keys:
        m[key] = key * 2
    expected = {key: key * 2 for key in keys}
    for key in removals:
        m.erase(key)
        expected.pop(key, None)
        assert m.is_balanced()
    assert m.in_order() == [expected[k] for k in sorted(expected)]
    assert sorted(m.pre_order()) == sorted(m.post_order()) == sorted(expected.values())