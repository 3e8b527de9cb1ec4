"""Prompted console input with validation and retry."""

from __future__ import annotations

import re
import sys
from typing import Callable, Optional, TextIO, TypeVar

from courselib.strlib import LibraryError, string_to_real

__all__ = ["get_integer", "get_real", "get_line"]

T = TypeVar("T")

_WHITESPACE = " \t\n\v\f\r"
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _read_line(prompt: str, stdin: TextIO, stdout: TextIO) -> Optional[str]:
    stdout.write(prompt)
    stdout.flush()
    line = stdin.readline()
    if not line:
        return None
    return line[:-1] if line.endswith("\n") else line


def _parse_integer(line: str) -> Optional[int]:
    candidate = line.strip(_WHITESPACE)
    if not _INTEGER_RE.fullmatch(candidate):
        return None
    value = int(candidate)
    return value if _INT_MIN <= value <= _INT_MAX else None


def _parse_real(line: str) -> Optional[float]:
    try:
        return string_to_real(line)
    except LibraryError:
        return None


def _ask(
    prompt: str,
    stdin: Optional[TextIO],
    stdout: Optional[TextIO],
    parse: Callable[[str], Optional[T]],
    complaint: str,
    fallback_prompt: str,
) -> T:
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    while True:
        line = _read_line(prompt, stdin, stdout)
        if line is None:
            raise EOFError("end of input while reading a value")
        value = parse(line)
        if value is not None:
            return value
        stdout.write(complaint + "\n")
        if prompt == "":
            prompt = fallback_prompt


def get_integer(
    prompt: str = "", *, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None
) -> int:
    """Read lines until one holds a single integer, and return it."""
    return _ask(
        prompt,
        stdin,
        stdout,
        _parse_integer,
        "Illegal integer format. Try again.",
        "Enter an integer: ",
    )


def get_real(
    prompt: str = "", *, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None
) -> float:
    """Read lines until one holds a single number, and return it."""
    return _ask(
        prompt,
        stdin,
        stdout,
        _parse_real,
        "Illegal numeric format. Try again.",
        "Enter a number: ",
    )


def get_line(
    prompt: str = "", *, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None
) -> str:
    """Print the prompt and return the next input line without its newline."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    line = _read_line(prompt, stdin, stdout)
    return "" if line is None else line