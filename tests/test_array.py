import threading

import pytest

from anttools.array import Array, search


def test_concurrent_append_then_operations():
    a = Array()
    threads = [threading.Thread(target=a.append, args=(i,)) for i in range(100)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(a) == 100
    assert sorted(a.list()) == list(range(100))


def test_source_sequence_on_ordered_data():
    a = Array()
    for i in range(100):
        a.append(i)
    assert a.get(0) == 0
    a.insert(9, 8888)
    assert a.list()[8:11] == [8, 8888, 9]
    assert len(a) == 101
    assert a.set(9, 100) is True
    assert a.get(9) == 100
    assert a.search(100) == 9
    a.clear()
    assert a.list() == []


def test_get_out_of_range_raises():
    a = Array([1, 2])
    with pytest.raises(IndexError):
        a.get(2)
    with pytest.raises(IndexError):
        a.get(-1)


def test_delete_returns_value_and_shrinks():
    a = Array(["x", "y", "z"])
    assert a.delete(1) == "y"
    assert a.list() == ["x", "z"]
    with pytest.raises(IndexError):
        a.delete(5)


def test_set_out_of_range_returns_false():
    a = Array([1])
    assert a.set(3, 9) is False
    assert a.list() == [1]


def test_insert_at_end_and_invalid():
    a = Array([1, 2])
    a.insert(2, 3)
    assert a.list() == [1, 2, 3]
    with pytest.raises(IndexError):
        a.insert(5, 0)


def test_search_missing_returns_minus_one():
    a = Array(["a", "b"])
    assert a.search("c") == -1


def test_list_is_snapshot():
    a = Array([1])
    snapshot = a.list()
    snapshot.append(2)
    assert a.list() == [1]


def test_lock_func_mutates_underlying_list():
    a = Array([3, 1, 2])
    result = a.lock_func(lambda items: items.sort())
    assert result is a
    assert a.list() == [1, 2, 3]


@pytest.mark.parametrize(
    "items, key, expected",
    [
        (["a", "b", "c"], "b", 1),
        ([1, 2, 3], 4, -1),
        ([1.5, 2.5], 2.5, 1),
        ([], "x", -1),
        ([7, 7, 7], 7, 0),
    ],
)
def test_search_function(items, key, expected):
    assert search(items, key) == expected