"""String conversion, case-folding and quoting helpers."""

from __future__ import annotations

import math
import re
import string
from typing import Any, Callable, Optional

__all__ = [
    "LibraryError",
    "CharStream",
    "integer_to_string",
    "string_to_integer",
    "real_to_string",
    "string_to_real",
    "to_upper_case",
    "to_lower_case",
    "equals_ignore_case",
    "starts_with",
    "ends_with",
    "trim",
    "string_needs_quoting",
    "read_quoted_string",
    "write_quoted_string",
    "write_generic_value",
    "read_generic_value",
]


class LibraryError(Exception):
    """Raised wherever the library reports an error."""


_WHITESPACE = " \t\n\v\f\r"
_STRING_DELIMITERS = ",:)}]\n"
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_REAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

_ESCAPES_IN = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    '"': '"',
    "'": "'",
    "\\": "\\",
}

_ESCAPES_OUT = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
}


class CharStream:
    """A character cursor over a string that supports one-character pushback."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def read_char(self) -> Optional[str]:
        """Return the next character, or None at the end of the text."""
        if self._pos >= len(self._text):
            return None
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def unread(self) -> None:
        """Push back the character most recently read."""
        if self._pos > 0:
            self._pos -= 1

    def skip_whitespace(self) -> None:
        """Advance past any whitespace characters."""
        while self._pos < len(self._text) and self._text[self._pos] in _WHITESPACE:
            self._pos += 1

    def at_end(self) -> bool:
        """Return True when no characters remain."""
        return self._pos >= len(self._text)

    def _match(self, pattern: re.Pattern[str]) -> Optional[str]:
        match = pattern.match(self._text, self._pos)
        if match is None:
            return None
        self._pos = match.end()
        return match.group()


def integer_to_string(n: int) -> str:
    """Return the decimal digits of ``n``."""
    return str(int(n))


def string_to_integer(text: str) -> int:
    """Parse a whole string as a 32-bit integer; leading whitespace is allowed."""
    candidate = text.lstrip(_WHITESPACE)
    if _INTEGER_RE.fullmatch(candidate):
        value = int(candidate)
        if _INT_MIN <= value <= _INT_MAX:
            return value
    raise LibraryError(f"string_to_integer: Illegal integer format ({text})")


def real_to_string(value: float) -> str:
    """Format a number the way a default-precision uppercase stream does."""
    return f"{value:G}"


def string_to_real(text: str) -> float:
    """Parse a whole string as a floating-point number; surrounding whitespace is allowed."""
    candidate = text.strip(_WHITESPACE)
    if _REAL_RE.fullmatch(candidate):
        value = float(candidate)
        if not math.isinf(value):
            return value
    raise LibraryError(f"string_to_real: Illegal floating-point format ({text})")


def to_upper_case(text: str) -> str:
    """Return ``text`` with ASCII lowercase letters converted to uppercase."""
    return text.translate(_TO_UPPER)


def to_lower_case(text: str) -> str:
    """Return ``text`` with ASCII uppercase letters converted to lowercase."""
    return text.translate(_TO_LOWER)


def equals_ignore_case(s1: str, s2: str) -> bool:
    """Compare two strings, ignoring differences in ASCII letter case."""
    return len(s1) == len(s2) and to_lower_case(s1) == to_lower_case(s2)


def starts_with(text: str, prefix: str) -> bool:
    """Return True if ``text`` begins with ``prefix`` (a string or a character)."""
    return text.startswith(prefix)


def ends_with(text: str, suffix: str) -> bool:
    """Return True if ``text`` ends with ``suffix`` (a string or a character)."""
    return text.endswith(suffix)


def trim(text: str) -> str:
    """Remove whitespace from both ends of ``text``."""
    return text.strip(_WHITESPACE)


def string_needs_quoting(text: str) -> bool:
    """Return True if an unquoted ``text`` could not be read back as one value."""
    for ch in text:
        if ch in _WHITESPACE:
            return False
        if ch in _STRING_DELIMITERS:
            return True
    return False


def _read_numeric_escape(stream: CharStream, ch: str, delim: str) -> str:
    base, max_digits = (16, 2) if ch == "x" else (8, 3)
    result = 0
    for _ in range(max_digits):
        if ch == delim:
            break
        if ch in string.digits:
            digit = int(ch)
        elif base == 16 and ch in string.hexdigits:
            digit = int(ch, 16)
        else:
            break
        result = base * result + digit
        next_ch = stream.read_char()
        if next_ch is None:
            raise LibraryError("Unterminated string")
        ch = next_ch
    stream.unread()
    return chr(result & 0xFF)


def _read_delimited(stream: CharStream, delim: str) -> str:
    parts: list[str] = []
    while (ch := stream.read_char()) is not None and ch != delim:
        if ch == "\\":
            escaped = stream.read_char()
            if escaped is None:
                raise LibraryError("Unterminated string")
            if escaped in string.digits or escaped == "x":
                ch = _read_numeric_escape(stream, escaped, delim)
            else:
                ch = _ESCAPES_IN.get(escaped, escaped)
        parts.append(ch)
    return "".join(parts)


def _read_bare(stream: CharStream, first: str) -> str:
    chars = [first]
    end_trim = 0
    while (ch := stream.read_char()) is not None and ch not in _STRING_DELIMITERS:
        chars.append(ch)
        if ch not in _WHITESPACE:
            end_trim = len(chars)
    if ch is not None:
        stream.unread()
    return "".join(chars[:end_trim])


def read_quoted_string(stream: CharStream) -> str:
    """Read a quoted string with escapes, or a bare string up to a delimiter."""
    ch = stream.read_char()
    while ch is not None and ch in _WHITESPACE:
        ch = stream.read_char()
    if ch is None:
        return ""
    if ch in "'\"":
        return _read_delimited(stream, ch)
    return _read_bare(stream, ch)


def write_quoted_string(text: str, force_quotes: bool = True) -> str:
    """Render ``text`` with escapes, in double quotes when forced or needed."""
    quote = force_quotes or string_needs_quoting(text)
    parts: list[str] = []
    for ch in text:
        if ch in _ESCAPES_OUT:
            parts.append(_ESCAPES_OUT[ch])
        elif " " <= ch <= "~" and ch != '"':
            parts.append(ch)
        else:
            parts.append(f"\\{ord(ch) & 0xFF:03o}")
    body = "".join(parts)
    return f'"{body}"' if quote else body


def write_generic_value(value: Any, force_quotes: bool) -> str:
    """Render a value; strings are quoted, other values use their plain form."""
    if isinstance(value, str):
        return write_quoted_string(value, force_quotes)
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _read_token(stream: CharStream, pattern: re.Pattern[str], kind: str) -> str:
    stream.skip_whitespace()
    token = stream._match(pattern)
    if token is None:
        raise LibraryError(f"read_generic_value: Illegal {kind} format")
    return token


def read_generic_value(stream: CharStream, value_type: Callable[[str], Any] = str) -> Any:
    """Read one value of ``value_type`` from ``stream``."""
    if value_type is str:
        return read_quoted_string(stream)
    if value_type is bool:
        number = int(_read_token(stream, _INTEGER_RE, "boolean"))
        if number not in (0, 1):
            raise LibraryError("read_generic_value: Illegal boolean format")
        return number == 1
    if value_type is int:
        return int(_read_token(stream, _INTEGER_RE, "integer"))
    if value_type is float:
        return float(_read_token(stream, _REAL_RE, "floating-point"))
    return value_type(read_quoted_string(stream))