import pytest

from courselib.pqueue import PriorityQueue
from courselib.strlib import LibraryError


def _drain(pq):
    return [pq.dequeue() for _ in range(len(pq))]


def test_lower_priority_numbers_first():
    pq = PriorityQueue()
    pq.enqueue("c", 3)
    pq.enqueue("a", 1)
    pq.enqueue("b", 2)
    assert _drain(pq) == ["a", "b", "c"]


def test_equal_priorities_keep_arrival_order():
    pq = PriorityQueue()
    for name in ["first", "second", "third", "fourth"]:
        pq.enqueue(name, 5)
    pq.enqueue("urgent", 1)
    assert _drain(pq) == ["urgent", "first", "second", "third", "fourth"]


def test_peek_and_peek_priority():
    pq = PriorityQueue()
    pq.enqueue("x", 4.5)
    pq.enqueue("y", 2.25)
    assert pq.peek() == "y"
    assert pq.peek_priority() == 2.25
    assert len(pq) == 2


def test_back_is_last_to_leave():
    pq = PriorityQueue()
    pq.enqueue("a", 2)
    pq.enqueue("b", 9)
    pq.enqueue("c", 9)
    pq.enqueue("d", 1)
    assert pq.back() == "c"
    assert _drain(pq)[-1] == "c"


def test_dequeue_is_sorted_invariant():
    pq = PriorityQueue()
    priorities = [7, 3, 9, 1, 3, 8, 2, 7, 0, 5]
    for index, priority in enumerate(priorities):
        pq.enqueue(index, priority)
    seen = []
    while len(pq):
        seen.append(pq.peek_priority())
        pq.dequeue()
    assert seen == sorted(priorities)


def test_copy_is_independent():
    pq = PriorityQueue()
    pq.enqueue("a", 1)
    pq.enqueue("b", 2)
    duplicate = pq.copy()
    assert _drain(duplicate) == ["a", "b"]
    assert len(pq) == 2
    pq.enqueue("c", 2)
    assert _drain(pq) == ["a", "b", "c"]


def test_clear():
    pq = PriorityQueue()
    pq.enqueue(1, 1)
    pq.clear()
    assert len(pq) == 0
    with pytest.raises(LibraryError):
        pq.dequeue()


@pytest.mark.parametrize(
    "method, message",
    [
        ("dequeue", "dequeue"),
        ("peek", "peek"),
        ("peek_priority", "peekPriority"),
        ("back", "back"),
    ],
)
def test_empty_errors(method, message):
    with pytest.raises(LibraryError, match=message):
        getattr(PriorityQueue(), method)()


def test_str_format():
    pq = PriorityQueue()
    pq.enqueue("b", 2)
    pq.enqueue("a", 1)
    assert str(pq) == '{1:"a", 2:"b"}'
    assert str(PriorityQueue()) == "{}"


def test_str_does_not_consume():
    pq = PriorityQueue()
    pq.enqueue(10, 3)
    str(pq)
    assert len(pq) == 1


def test_round_trip():
    pq = PriorityQueue()
    pq.enqueue("low", 8)
    pq.enqueue("high", 0.5)
    pq.enqueue("tie one", 3)
    pq.enqueue("tie two", 3)
    parsed = PriorityQueue.from_string(str(pq))
    assert str(parsed) == str(pq)
    assert _drain(parsed) == ["high", "tie one", "tie two", "low"]


def test_round_trip_integer_values():
    pq = PriorityQueue()
    pq.enqueue(42, 2)
    pq.enqueue(-7, 1)
    parsed = PriorityQueue.from_string(str(pq), int)
    assert _drain(parsed) == [-7, 42]


def test_from_string_missing_colon():
    with pytest.raises(LibraryError, match="colon"):
        PriorityQueue.from_string('{1 "a"}')


def test_from_string_missing_brace():
    with pytest.raises(LibraryError, match="Missing"):
        PriorityQueue.from_string('1:"a"}')


def test_from_string_bad_separator():
    with pytest.raises(LibraryError, match="Unexpected character"):
        PriorityQueue.from_string('{1:"a"; 2:"b"}')