"""A case-insensitive word list backed by a packed word graph and a sorted list."""

from __future__ import annotations

import bisect
import re
from collections.abc import Iterator
from typing import Callable, NamedTuple, Optional

from courselib.strlib import LibraryError, to_lower_case

__all__ = ["Lexicon"]

_MAGIC = b"DAWG"
_EDGE_SIZE = 4
_NUMBER_RE = re.compile(rb"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class _Edge(NamedTuple):
    letter: int
    last_edge: bool
    accept: bool
    children: int


def _decode_edge(word: int) -> _Edge:
    return _Edge(
        letter=word & 0x1F,
        last_edge=bool((word >> 5) & 1),
        accept=bool((word >> 6) & 1),
        children=word >> 8,
    )


def _char_to_ord(ch: str) -> int:
    return ord(to_lower_case(ch)) - ord("a") + 1


def _ord_to_char(letter: int) -> str:
    return chr(letter - 1 + ord("a"))


class Lexicon:
    """A set of lowercase words with fast word and prefix lookup.

    Words come either from a precompiled binary word graph (a file that
    starts with ``DAWG``) or from text, one word per line, or are added one
    at a time.  Iteration visits every word in alphabetical order.
    """

    def __init__(self, filename: Optional[str] = None) -> None:
        self._edges: list[_Edge] = []
        self._start: Optional[int] = None
        self._dawg_count = 0
        self._other_words: list[str] = []
        if filename is not None:
            self.add_words_from_file(filename)

    def __len__(self) -> int:
        return self._dawg_count + len(self._other_words)

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        word = to_lower_case(word)
        edge = self._trace_to_last_edge(word)
        if edge is not None and edge.accept:
            return True
        index = bisect.bisect_left(self._other_words, word)
        return index < len(self._other_words) and self._other_words[index] == word

    def __iter__(self) -> Iterator[str]:
        dawg = self._dawg_words()
        others = iter(list(self._other_words))
        dawg_word = next(dawg, None)
        other_word = next(others, None)
        while dawg_word is not None or other_word is not None:
            if other_word is None or (dawg_word is not None and dawg_word < other_word):
                yield dawg_word  # type: ignore[misc]
                dawg_word = next(dawg, None)
            else:
                yield other_word
                other_word = next(others, None)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def add(self, word: str) -> None:
        """Add ``word``, stored in lowercase, unless it is already present."""
        word = to_lower_case(word)
        if word not in self:
            bisect.insort(self._other_words, word)

    def add_words_from_file(self, filename: str) -> None:
        """Load a binary word graph, or add every line of a text file as a word."""
        try:
            with open(filename, "rb") as handle:
                data = handle.read()
        except OSError as exc:
            raise LibraryError(f"Couldn't open lexicon file {filename}") from exc
        if data[:4] == _MAGIC:
            if self._other_words:
                raise LibraryError("Binary files require an empty lexicon")
            self._read_binary(data, filename)
            return
        text = data.decode("utf-8")
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        for line in lines:
            self.add(line)

    def contains_prefix(self, prefix: str) -> bool:
        """Return True if any word begins with ``prefix``, ignoring case."""
        if not prefix:
            return True
        prefix = to_lower_case(prefix)
        if self._trace_to_last_edge(prefix) is not None:
            return True
        index = bisect.bisect_left(self._other_words, prefix)
        return index < len(self._other_words) and self._other_words[index].startswith(
            prefix
        )

    def clear(self) -> None:
        """Remove every word."""
        self._edges = []
        self._start = None
        self._dawg_count = 0
        self._other_words = []

    def copy(self) -> "Lexicon":
        """Return an independent lexicon holding the same words."""
        duplicate = type(self)()
        duplicate._edges = list(self._edges)
        duplicate._start = self._start
        duplicate._dawg_count = self._dawg_count
        duplicate._other_words = list(self._other_words)
        return duplicate

    def map_all(self, fn: Callable[[str], object]) -> None:
        """Call ``fn(word)`` for every word in alphabetical order."""
        for word in self:
            fn(word)

    def _read_binary(self, data: bytes, filename: str) -> None:
        malformed = LibraryError(f"Improperly formed lexicon file {filename}")
        pos = 5
        first = _NUMBER_RE.match(data, pos)
        if first is None:
            raise malformed
        start_index = int(first.group(1))
        pos = first.end() + 1
        second = _NUMBER_RE.match(data, pos)
        if second is None:
            raise malformed
        num_bytes = int(second.group(1))
        pos = second.end() + 1
        if start_index < 0 or num_bytes < 0:
            raise malformed
        payload = data[pos : pos + num_bytes]
        if len(payload) < num_bytes:
            raise malformed
        count = num_bytes // _EDGE_SIZE
        if start_index >= count:
            raise malformed
        edges = [
            _decode_edge(int.from_bytes(payload[i * _EDGE_SIZE : (i + 1) * _EDGE_SIZE], "big"))
            for i in range(count)
        ]
        self._edges = edges
        self._start = start_index
        try:
            self._dawg_count = sum(1 for _ in self._dawg_words())
        except LibraryError:
            self._edges = []
            self._start = None
            self._dawg_count = 0
            raise malformed from None

    def _edge_at(self, index: int) -> _Edge:
        if not 0 <= index < len(self._edges):
            raise LibraryError("Lexicon: edge index out of range")
        return self._edges[index]

    def _siblings(self, index: int) -> Iterator[_Edge]:
        while True:
            edge = self._edge_at(index)
            yield edge
            if edge.last_edge:
                return
            index += 1

    def _find_edge_for_char(self, index: int, ch: str) -> Optional[_Edge]:
        target = _char_to_ord(ch)
        for edge in self._siblings(index):
            if edge.letter == target:
                return edge
        return None

    def _trace_to_last_edge(self, word: str) -> Optional[_Edge]:
        if self._start is None or not word:
            return None
        edge = self._find_edge_for_char(self._start, word[0])
        for ch in word[1:]:
            if edge is None or edge.children == 0:
                return None
            edge = self._find_edge_for_char(edge.children, ch)
        return edge

    def _dawg_words(self) -> Iterator[str]:
        if self._start is None:
            return
        yield from self._words_below(self._start, "")

    def _words_below(self, index: int, prefix: str) -> Iterator[str]:
        for edge in self._siblings(index):
            word = prefix + _ord_to_char(edge.letter)
            if edge.accept:
                yield word
            if edge.children != 0:
                yield from self._words_below(edge.children, word)