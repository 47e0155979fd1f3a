import pytest

from errors import EmptyQueueError, HuffmanError
from pqueue import MinPriorityQueue


def test_pop_returns_smallest_weight_first():
    q = MinPriorityQueue()
    for item, weight in [("c", 5), ("a", 1), ("d", 9), ("b", 3)]:
        q.push(item, weight)
    assert len(q) == 4
    assert [q.pop() for _ in range(4)] == ["a", "b", "c", "d"]
    assert q.is_empty()


def test_equal_weights_pop_in_insertion_order():
    q = MinPriorityQueue()
    for item in ["x", "y", "z"]:
        q.push(item, 2)
    q.push("w", 1)
    assert [q.pop() for _ in range(4)] == ["w", "x", "y", "z"]


def test_items_are_never_compared():
    q = MinPriorityQueue()
    q.push({"n": 1}, 1)
    q.push({"n": 2}, 1)
    assert q.pop() == {"n": 1}
    assert q.pop() == {"n": 2}


def test_pop_empty_raises():
    q = MinPriorityQueue()
    assert q.is_empty()
    with pytest.raises(EmptyQueueError):
        q.pop()
    with pytest.raises(IndexError):
        q.pop()
    assert issubclass(EmptyQueueError, HuffmanError)
