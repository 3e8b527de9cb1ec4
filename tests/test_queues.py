import pytest

from courselib.queues import Queue
from courselib.strlib import LibraryError


def test_fifo_order():
    q = Queue()
    for value in [3, 1, 4, 1, 5]:
        q.enqueue(value)
    assert len(q) == 5
    assert [q.dequeue() for _ in range(5)] == [3, 1, 4, 1, 5]
    assert len(q) == 0


def test_peek_and_back_do_not_remove():
    q = Queue(["a", "b", "c"])
    assert q.peek() == "a"
    assert q.back() == "c"
    assert len(q) == 3


def test_iteration_leaves_queue_intact():
    q = Queue(range(20))
    assert list(q) == list(range(20))
    assert len(q) == 20
    assert q.dequeue() == 0


def test_many_values_keep_order():
    q = Queue()
    for i in range(100):
        q.enqueue(i)
        if i % 3 == 0:
            q.dequeue()
    assert list(q) == list(range(34, 100))


def test_clear_empties_queue():
    q = Queue([1, 2])
    q.clear()
    assert len(q) == 0
    with pytest.raises(LibraryError):
        q.peek()


@pytest.mark.parametrize("method", ["dequeue", "peek", "back"])
def test_empty_queue_errors(method):
    with pytest.raises(LibraryError, match=method):
        getattr(Queue(), method)()


def test_str_format():
    assert str(Queue([1, 2, 3])) == "{1, 2, 3}"
    assert str(Queue()) == "{}"
    assert str(Queue(["x"])) == '{"x"}'


def test_round_trip_strings():
    q = Queue(["hello world", "a,b", "tab\there"])
    parsed = Queue.from_string(str(q))
    assert list(parsed) == list(q)


def test_round_trip_integers():
    q = Queue([10, -2, 7])
    assert list(Queue.from_string(str(q), int)) == [10, -2, 7]


def test_from_string_empty():
    assert len(Queue.from_string("  { } ")) == 0


def test_from_string_missing_brace():
    with pytest.raises(LibraryError, match="Missing"):
        Queue.from_string("1, 2}", int)


def test_from_string_bad_separator():
    with pytest.raises(LibraryError, match="Unexpected character"):
        Queue.from_string("{1; 2}", int)