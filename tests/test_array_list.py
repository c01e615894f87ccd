import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsbasics.array_list import ArrayList


def _filled(values, capacity=5):
    array = ArrayList(capacity)
    for value in values:
        array.append(value)
    return array


@pytest.mark.parametrize("capacity", [1, 0, -3])
def test_invalid_capacity_rejected(capacity):
    with pytest.raises(ValueError, match="invalid size"):
        ArrayList(capacity)


def test_demo_scenario():
    list1 = ArrayList(5)
    list2 = ArrayList(7)
    for value in (100, 250, 330):
        list2.append(value)
    assert str(list2) == "100 250 330"
    for value in (10, 20, 30):
        list1.append(value)
    assert list1.retrieve_at(1) == 20
    list2 = list1.copy()
    list1.insert(1, 500)
    assert list(list1) == [10, 500, 20, 30]
    assert list2.binary_search(330) == -1
    assert list(list2) == [10, 20, 30]


def test_empty_string():
    assert str(ArrayList(3)) == "Array is empty"


def test_empty_and_full_flags():
    array = ArrayList(2)
    assert array.is_empty()
    array.append(1)
    array.append(2)
    assert array.is_full()
    assert not array.is_empty()


def test_append_grows_when_full():
    array = _filled([1, 2], capacity=2)
    array.append(3)
    assert list(array) == [1, 2, 3]
    assert array.capacity > 2
    assert len(array) == 3


def test_copy_is_independent():
    original = _filled([1, 2, 3])
    duplicate = original.copy()
    duplicate.append(4)
    original.replace_at(0, 9)
    assert list(original) == [9, 2, 3]
    assert list(duplicate) == [1, 2, 3, 4]
    assert duplicate.capacity == original.capacity


def test_insert_out_of_range():
    array = _filled([1, 2])
    with pytest.raises(IndexError):
        array.insert(5, 7)
    with pytest.raises(IndexError):
        array.insert(-1, 7)


def test_retrieve_errors():
    with pytest.raises(IndexError, match="list is empty"):
        ArrayList(3).retrieve_at(0)
    with pytest.raises(IndexError, match="invalid index"):
        _filled([1]).retrieve_at(1)


def test_replace_and_delete():
    array = _filled([10, 20, 30])
    array.replace_at(2, 77)
    assert array.retrieve_at(2) == 77
    assert array.delete(0) == 10
    assert list(array) == [20, 77]


def test_replace_and_delete_errors():
    with pytest.raises(IndexError):
        ArrayList(3).replace_at(0, 1)
    with pytest.raises(IndexError):
        ArrayList(3).delete(0)
    with pytest.raises(IndexError):
        _filled([1, 2]).delete(2)


def test_sequential_search():
    array = _filled([4, 8, 4])
    assert array.sequential_search(4) == 0
    assert array.sequential_search(8) == 1
    assert array.sequential_search(99) == -1
    assert ArrayList(3).sequential_search(4) == -1


def test_binary_search_on_empty():
    assert ArrayList(3).binary_search(1) == -1


def test_min_max_empty_raises():
    with pytest.raises(ValueError):
        ArrayList(3).max_item()
    with pytest.raises(ValueError):
        ArrayList(3).min_item()


def test_is_item_equal():
    array = _filled([5, 6])
    assert array.is_item_equal(1, 6)
    assert not array.is_item_equal(0, 6)
    with pytest.raises(IndexError):
        array.is_item_equal(2, 6)


@given(st.lists(st.integers(), min_size=1, max_size=40))
def test_min_max_match_builtins(values):
    array = _filled(values, capacity=2)
    assert array.max_item() == max(values)
    assert array.min_item() == min(values)
    assert list(array) == values


@given(st.lists(st.integers(), min_size=1, max_size=40, unique=True))
def test_binary_search_finds_every_item(values):
    values.sort()
    array = _filled(values)
    for value in values:
        assert array.retrieve_at(array.binary_search(value)) == value


@given(st.lists(st.integers(), max_size=30), st.integers())
def test_insert_then_delete_round_trip(values, extra):
    array = _filled(values, capacity=2)
    position = len(values) // 2
    array.insert(position, extra)
    assert array.retrieve_at(position) == extra
    assert array.delete(position) == extra
    assert list(array) == values