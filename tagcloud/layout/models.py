"""Layout primitives — points, sizes, rectangles, growth directions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# ── Errors ─────────────────────────────────────────────────────────


class InvalidInputError(ValueError):
    """Raised when a size, collection or layout cannot be laid out."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


# ── Primitives ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Point:
    """Integer point in layout space."""

    x: int
    y: int


@dataclass(frozen=True)
class Size:
    """Requested width × height of one tag box."""

    width: int
    height: int

    @property
    def is_positive(self) -> bool:
        return self.width > 0 and self.height > 0


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle.

    ``(x, y)`` is the top-left corner; width grows toward +x and height
    toward +y (screen coordinates, so "up" is decreasing y).
    """

    x: int
    y: int
    width: int
    height: int

    @classmethod
    def at(cls, location: Point, size: Size) -> Rectangle:
        return cls(location.x, location.y, size.width, size.height)

    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def location(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def area(self) -> int:
        return self.width * self.height

    def intersects_with(self, other: Rectangle) -> bool:
        """True if the two rectangles share a region of positive area.

        Rectangles that only touch along an edge or at a corner do not
        intersect.
        """
        return (
            min(self.right, other.right) > max(self.left, other.left)
            and min(self.bottom, other.bottom) > max(self.top, other.top)
        )


class Direction(Enum):
    """Cardinal growth direction, ordered clockwise."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    def clockwise(self) -> Direction:
        return Direction((self.value + 1) % 4)

    def counter_clockwise(self) -> Direction:
        return Direction((self.value + 3) % 4)
