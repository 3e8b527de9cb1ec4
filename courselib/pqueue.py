"""A priority queue in which lower priority numbers come out first."""

from __future__ import annotations

import heapq
from itertools import count
from typing import Any, Callable, Optional

from courselib.strlib import (
    CharStream,
    LibraryError,
    read_generic_value,
    write_generic_value,
)

__all__ = ["PriorityQueue"]


class PriorityQueue:
    """Values leave in priority order; equal priorities leave in arrival order."""

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, Any]] = []
        self._sequence = count()

    def __len__(self) -> int:
        return len(self._heap)

    def enqueue(self, value: Any, priority: float) -> None:
        """Add ``value`` with the given priority."""
        heapq.heappush(self._heap, (float(priority), next(self._sequence), value))

    def dequeue(self) -> Any:
        """Remove and return the value of highest priority."""
        if not self._heap:
            raise LibraryError("dequeue: Attempting to dequeue an empty queue")
        return heapq.heappop(self._heap)[2]

    def peek(self) -> Any:
        """Return the value of highest priority without removing it."""
        if not self._heap:
            raise LibraryError("peek: Attempting to peek at an empty queue")
        return self._heap[0][2]

    def peek_priority(self) -> float:
        """Return the priority of the value that would be dequeued next."""
        if not self._heap:
            raise LibraryError("peekPriority: Attempting to peek at an empty queue")
        return self._heap[0][0]

    def back(self) -> Any:
        """Return the value that would be dequeued last."""
        if not self._heap:
            raise LibraryError("back: Attempting to read back of an empty queue")
        return max(self._heap, key=lambda entry: (entry[0], entry[1]))[2]

    def clear(self) -> None:
        """Remove every value."""
        self._heap.clear()

    def copy(self) -> "PriorityQueue":
        """Return an independent queue with the same contents and order."""
        duplicate = type(self)()
        duplicate._heap = list(self._heap)
        duplicate._sequence = count(next(self._sequence))
        # keep our own counter moving past the value just consumed
        return duplicate

    def _ordered(self) -> list[tuple[float, int, Any]]:
        return sorted(self._heap, key=lambda entry: (entry[0], entry[1]))

    def __str__(self) -> str:
        entries = (
            f"{priority:g}:{write_generic_value(value, True)}"
            for priority, _, value in self._ordered()
        )
        return "{" + ", ".join(entries) + "}"

    def __repr__(self) -> str:
        pairs = [(value, priority) for priority, _, value in self._ordered()]
        return f"{type(self).__name__}({pairs!r})"

    @classmethod
    def from_string(
        cls, text: str, value_type: Callable[[str], Any] = str
    ) -> "PriorityQueue":
        """Parse the ``{priority:value, ...}`` form produced by ``str()``."""
        stream = CharStream(text)
        result = cls()
        if _next_nonspace(stream) != "{":
            raise LibraryError("operator >>: Missing {")
        ch = _next_nonspace(stream)
        if ch == "}":
            return result
        if ch is None:
            raise LibraryError("operator >>: Unexpected end of input")
        stream.unread()
        while True:
            priority = read_generic_value(stream, float)
            if _next_nonspace(stream) != ":":
                raise LibraryError("operator >>: Missing colon after priority")
            value = read_generic_value(stream, value_type)
            result.enqueue(value, priority)
            ch = _next_nonspace(stream)
            if ch == "}":
                return result
            if ch is None:
                raise LibraryError("operator >>: Unexpected end of input")
            if ch != ",":
                raise LibraryError(f"operator >>: Unexpected character {ch}")


def _next_nonspace(stream: CharStream) -> Optional[str]:
    stream.skip_whitespace()
    return stream.read_char()