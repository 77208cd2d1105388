import pytest
from hypothesis import given
from hypothesis import strategies as st

from structkit.hashtable import HashTable, int_hash


def test_int_hash_uses_multiplicative_constant():
    assert int_hash(1) == 2654435761
    assert int_hash(0) == 0


@given(st.integers(min_value=-(2**70), max_value=2**70))
def test_int_hash_fits_in_word(key):
    assert 0 <= int_hash(key) < 2**64


def test_example_session():
    table = HashTable(default_factory=str)
    table.insert(10, "10")
    table.insert(20, "twenty")
    table[10] = "KEK"
    assert table[30] == ""
    assert table.value(10) == "KEK"
    assert table.value(20) == "twenty"
    assert len(table) == 3


def test_update_does_not_grow_size():
    table = HashTable()
    table.insert(1, "a")
    table.insert(1, "b")
    assert len(table) == 1
    assert table.value(1) == "b"


def test_missing_value_raises_key_error():
    table = HashTable()
    with pytest.raises(KeyError):
        table.value(5)
    with pytest.raises(KeyError):
        table[5]
    assert 5 not in table


def test_getitem_with_factory_inserts_default():
    table = HashTable(default_factory=list)
    table[7].append("x")
    assert 7 in table
    assert table.value(7) == ["x"]


def test_growth_doubles_capacity_and_keeps_entries():
    table = HashTable()
    assert table.capacity() == 16
    for key in range(13):
        table.insert(key, key * 10)
    assert table.capacity() == 32
    assert all(table.value(key) == key * 10 for key in range(13))


def test_remove_and_empty():
    table = HashTable()
    assert table.is_empty()
    table.insert("a", 1)
    table.insert("b", 2)
    table.remove("a")
    table.remove("missing")
    assert "a" not in table
    assert table.value("b") == 2
    assert len(table) == 1
    table.remove("b")
    assert table.is_empty()


def test_custom_hash_with_collisions():
    table = HashTable(capacity=4, hash_func=lambda key: 0)
    for key in range(10):
        table.insert(key, str(key))
    table.remove(3)
    assert 3 not in table
    assert [table.value(k) for k in (0, 9)] == ["0", "9"]
    assert len(table) == 9


def test_invalid_capacity():
    with pytest.raises(ValueError):
        HashTable(capacity=0)


@given(
    st.lists(
        st.tuples(st.booleans(), st.integers(-50, 50), st.integers()),
        max_size=200,
    )
)
def test_behaves_like_dict(operations):
    table = HashTable(capacity=2)
    model = {}
    for is_insert, key, value in operations:
        if is_insert:
            table.insert(key, value)
            model[key] = value
        else:
            table.remove(key)
            model.pop(key, None)
    assert len(table) == len(model)
    for key in range(-50, 51):
        assert (key in table) == (key in model)
        if key in model:
            assert table.value(key) == model[key]