"""Circular cloud layouter — online, non-backtracking rectangle placement."""

from __future__ import annotations

import logging
from typing import Sequence

from .geometry import (
    attach, move, move_over, point_is_beyond, axis_position,
    first_intersecting, intersects_any,
)
from .models import Direction, InvalidInputError, Point, Rectangle, Size


log = logging.getLogger(__name__)


class CircularCloudLayouter:
    """Places rectangles one at a time around a fixed center.

    Each rectangle is attached to the previously placed one along the
    current growth direction, pushed out of any collision, pulled back
    toward the center, and finally used to decide whether the spiral
    should turn.  Placed rectangles are never moved again.

    Worst-case cost per call is proportional to the rectangle's
    dimensions: compaction advances one unit at a time.

    Instances are not thread-safe; use one layouter per thread or guard
    calls externally.
    """

    def __init__(self, center: Point) -> None:
        self._center = center
        self._rectangles: list[Rectangle] = []
        self._direction = Direction.UP

    @classmethod
    def from_history(
        cls,
        center: Point,
        rectangles: Sequence[Rectangle],
        direction: Direction = Direction.UP,
    ) -> CircularCloudLayouter:
        """Resume a layout from a previously recorded history.

        Raises
        ------
        InvalidInputError
            If a rectangle has a non-positive size or two rectangles overlap.
        """
        history = list(rectangles)
        for i, rect in enumerate(history):
            if not rect.size.is_positive:
                raise InvalidInputError(
                    f"Rectangle {i} has non-positive size "
                    f"{rect.width}×{rect.height}")
            for j in range(i):
                if history[j].intersects_with(rect):
                    raise InvalidInputError(f"Rectangles {j} and {i} overlap")

        layouter = cls(center)
        layouter._rectangles = history
        layouter._direction = direction
        return layouter

    @property
    def center(self) -> Point:
        return self._center

    @property
    def direction(self) -> Direction:
        """Growth direction that the next placement will attach along."""
        return self._direction

    @property
    def rectangles(self) -> Sequence[Rectangle]:
        """Placement history, in call order."""
        return tuple(self._rectangles)

    def __len__(self) -> int:
        return len(self._rectangles)

    def put_next_rectangle(self, size: Size) -> Rectangle:
        """Place a rectangle of *size* and return its position.

        Raises
        ------
        InvalidInputError
            If either dimension is not positive.  The layouter state is
            left untouched.
        """
        if not size.is_positive:
            raise InvalidInputError(
                f"Rectangle size must be positive, got "
                f"{size.width}×{size.height}")

        if not self._rectangles:
            rect = Rectangle(
                self._center.x - size.width // 2,
                self._center.y - size.height // 2,
                size.width, size.height,
            )
        else:
            rect = self._place_around_last(size)

        self._rectangles.append(rect)
        log.debug("Placed #%d %d×%d at (%d, %d), next direction %s",
                  len(self._rectangles), rect.width, rect.height,
                  rect.x, rect.y, self._direction.name)
        return rect

    # ── Placement steps ────────────────────────────────────────────

    def _place_around_last(self, size: Size) -> Rectangle:
        direction = self._direction
        offsetting = direction.counter_clockwise()
        changed = direction.clockwise()

        rect = attach(self._rectangles[-1], size, direction)
        rect = self._push_out(rect, offsetting)
        rect = self._pull_toward_center(rect, changed)

        # Turn early if an equally sized neighbour would fit in the next
        # direction; keeps the cloud from growing a single long arm.
        lookahead = attach(rect, rect.size, changed)
        if not intersects_any(lookahead, self._rectangles):
            log.debug("Direction %s -> %s", direction.name, changed.name)
            self._direction = changed

        return rect

    def _push_out(self, rect: Rectangle, direction: Direction) -> Rectangle:
        """Jump *rect* past every colliding rectangle along *direction*."""
        while (blocker := first_intersecting(rect, self._rectangles)) is not None:
            moved = move_over(rect, blocker, direction)
            assert axis_position(moved, direction) > axis_position(rect, direction), \
                "overlap resolution made no progress"
            rect = moved
        return rect

    def _pull_toward_center(self, rect: Rectangle, direction: Direction) -> Rectangle:
        """Step *rect* toward the center along *direction* while it stays free."""
        while point_is_beyond(rect, self._center, direction):
            moved = move(rect, 1, direction)
            if intersects_any(moved, self._rectangles):
                break
            rect = moved
        return rect
