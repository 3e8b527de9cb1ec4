"""Portable pseudorandom numbers from a fixed linear congruential generator."""

from __future__ import annotations

import math
import os
import re
import time
from typing import Optional

__all__ = [
    "RandomGenerator",
    "random_integer",
    "random_real",
    "random_chance",
    "set_random_seed",
]

_MULTIPLIER = 1103515245
_OFFSET = 12345
_RAND_MAX = 2147483647
_WORD_MASK = 0xFFFFFFFF

_LEADING_INT_RE = re.compile(r"\s*([+-]?[0-9]+)")


def _initial_seed() -> int:
    configured = os.environ.get("RANDOM_SEED")
    if configured is None:
        return int(time.time())
    match = _LEADING_INT_RE.match(configured)
    return int(match.group(1)) if match else 0


class RandomGenerator:
    """A generator producing the same sequence for the same seed on every platform."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._state = 1
        self.set_seed(_initial_seed() if seed is None else seed)

    def set_seed(self, seed: int) -> None:
        """Restart the sequence; seeds that are zero or negative act as 1."""
        seed = int(seed)
        self._state = seed & _WORD_MASK if seed > 0 else 1

    def next_raw(self) -> int:
        """Return the next raw value in the range 0 to 2**31 - 1."""
        self._state = (_MULTIPLIER * self._state + _OFFSET) & _WORD_MASK
        return self._state & _RAND_MAX

    def _unit(self) -> float:
        return self.next_raw() / (_RAND_MAX + 1.0)

    def random_integer(self, low: int, high: int) -> int:
        """Return an integer between ``low`` and ``high`` inclusive."""
        scaled = self._unit() * (float(high) - low + 1)
        return int(math.floor(low + scaled))

    def random_real(self, low: float, high: float) -> float:
        """Return a real number in the half-open interval [low, high)."""
        return low + self._unit() * (high - low)

    def random_chance(self, p: float) -> bool:
        """Return True with probability ``p``."""
        return self.random_real(0, 1) < p


_default = RandomGenerator()


def random_integer(low: int, high: int) -> int:
    """Return an integer between ``low`` and ``high`` inclusive."""
    return _default.random_integer(low, high)


def random_real(low: float, high: float) -> float:
    """Return a real number in the half-open interval [low, high)."""
    return _default.random_real(low, high)


def random_chance(p: float) -> bool:
    """Return True with probability ``p``."""
    return _default.random_chance(p)


def set_random_seed(seed: int) -> None:
    """Reseed the shared generator so later results are repeatable."""
    _default.set_seed(seed)