"""Real-valued points, dimensions and rectangles for the graphics plane."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from courselib.strlib import real_to_string

__all__ = ["GPoint", "GDimension", "GRectangle"]


@dataclass(frozen=True)
class GPoint:
    """A location on the graphics plane."""

    x: float = 0.0
    y: float = 0.0

    def __str__(self) -> str:
        return f"({real_to_string(self.x)}, {real_to_string(self.y)})"


@dataclass(frozen=True)
class GDimension:
    """The size of a graphical object."""

    width: float = 0.0
    height: float = 0.0

    def __str__(self) -> str:
        return f"({real_to_string(self.width)}, {real_to_string(self.height)})"


@dataclass(frozen=True)
class GRectangle:
    """The bounding box of a graphical object."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def is_empty(self) -> bool:
        """Return True if the rectangle has no area."""
        return self.width <= 0 or self.height <= 0

    def contains(self, x: Union[float, GPoint], y: Optional[float] = None) -> bool:
        """Return True if the point, given as a GPoint or as coordinates, lies inside."""
        if isinstance(x, GPoint):
            if y is not None:
                raise TypeError("contains: pass a GPoint or two coordinates, not both")
            x, y = x.x, x.y
        elif y is None:
            raise TypeError("contains: missing y coordinate")
        return (
            x >= self.x
            and y >= self.y
            and x < self.x + self.width
            and y < self.y + self.height
        )

    def __str__(self) -> str:
        parts = (self.x, self.y, self.width, self.height)
        return "(" + ", ".join(real_to_string(v) for v in parts) + ")"