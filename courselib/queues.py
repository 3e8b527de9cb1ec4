"""A first-in/first-out queue with a readable text form."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any, Callable, Optional

from courselib.strlib import (
    CharStream,
    LibraryError,
    read_generic_value,
    write_generic_value,
)

__all__ = ["Queue"]


class Queue:
    """Values are added at the back and removed from the front."""

    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        self._items: deque[Any] = deque()
        if values is not None:
            for value in values:
                self.enqueue(value)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Visit the values from front to back without removing them."""
        return iter(list(self._items))

    def enqueue(self, value: Any) -> None:
        """Add ``value`` to the back of the queue."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if not self._items:
            raise LibraryError("dequeue: Attempting to dequeue an empty queue")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the value at the front without removing it."""
        if not self._items:
            raise LibraryError("peek: Attempting to peek at an empty queue")
        return self._items[0]

    def back(self) -> Any:
        """Return the value at the back without removing it."""
        if not self._items:
            raise LibraryError("back: Attempting to read back of an empty queue")
        return self._items[-1]

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()

    def __str__(self) -> str:
        return "{" + ", ".join(write_generic_value(v, True) for v in self._items) + "}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Queue):
            return NotImplemented
        return list(self._items) == list(other._items)

    @classmethod
    def from_string(cls, text: str, value_type: Callable[[str], Any] = str) -> "Queue":
        """Parse the ``{value, ...}`` form produced by ``str()``."""
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
            result.enqueue(read_generic_value(stream, value_type))
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