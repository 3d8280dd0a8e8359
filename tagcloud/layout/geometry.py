"""Low-level geometry helpers for the cloud layouter."""

from __future__ import annotations

from typing import Iterable

from .models import Direction, InvalidInputError, Point, Rectangle, Size


# ── Directional moves ──────────────────────────────────────────────


def move(rect: Rectangle, offset: int, direction: Direction) -> Rectangle:
    """Shift *rect* by *offset* units along *direction*."""
    x, y = rect.x, rect.y
    if direction is Direction.UP:
        y -= offset
    elif direction is Direction.DOWN:
        y += offset
    elif direction is Direction.RIGHT:
        x += offset
    else:
        x -= offset
    return Rectangle(x, y, rect.width, rect.height)


def move_over(rect: Rectangle, other: Rectangle, direction: Direction) -> Rectangle:
    """Move *rect* along *direction* until it sits flush against *other*.

    Only the coordinate on the direction's axis changes: moving UP puts
    *rect*'s bottom edge on *other*'s top edge, moving RIGHT puts *rect*'s
    left edge on *other*'s right edge, and so on.
    """
    x, y = rect.x, rect.y
    if direction is Direction.UP:
        y = other.top - rect.height
    elif direction is Direction.DOWN:
        y = other.bottom
    elif direction is Direction.RIGHT:
        x = other.right
    else:
        x = other.left - rect.width
    return Rectangle(x, y, rect.width, rect.height)


def attach(anchor: Rectangle, size: Size, direction: Direction) -> Rectangle:
    """A rectangle of *size* adjacent to *anchor* on its *direction* side.

    The new rectangle shares *anchor*'s origin on the perpendicular axis.
    """
    return move_over(Rectangle(anchor.x, anchor.y, size.width, size.height),
                     anchor, direction)


def point_is_beyond(rect: Rectangle, point: Point, direction: Direction) -> bool:
    """True if *point* lies strictly past *rect*'s leading edge along *direction*."""
    if direction is Direction.UP:
        return point.y < rect.top
    if direction is Direction.DOWN:
        return point.y > rect.bottom
    if direction is Direction.RIGHT:
        return point.x > rect.right
    return point.x < rect.left


def axis_position(rect: Rectangle, direction: Direction) -> int:
    """Signed coordinate of *rect* that grows when moving along *direction*."""
    if direction is Direction.UP:
        return -rect.y
    if direction is Direction.DOWN:
        return rect.y
    if direction is Direction.RIGHT:
        return rect.x
    return -rect.x


# ── Collision queries ──────────────────────────────────────────────


def first_intersecting(
    rect: Rectangle, others: Iterable[Rectangle],
) -> Rectangle | None:
    """First rectangle of *others* (in iteration order) overlapping *rect*."""
    return next((o for o in others if o.intersects_with(rect)), None)


def intersects_any(rect: Rectangle, others: Iterable[Rectangle]) -> bool:
    return any(o.intersects_with(rect) for o in others)


# ── Bounding region ────────────────────────────────────────────────


def bounding_region(rectangles: Iterable[Rectangle]) -> Rectangle:
    """Smallest axis-aligned rectangle covering every input rectangle.

    Order-independent min/max reduction over each rectangle's edges.

    Raises
    ------
    InvalidInputError
        If *rectangles* is empty.
    """
    min_x = min_y = max_x = max_y = None
    for r in rectangles:
        if min_x is None:
            min_x, min_y, max_x, max_y = r.left, r.top, r.right, r.bottom
            continue
        min_x = min(min_x, r.left)
        min_y = min(min_y, r.top)
        max_x = max(max_x, r.right)
        max_y = max(max_y, r.bottom)

    if min_x is None:
        raise InvalidInputError(
            "Cannot compute a bounding region of an empty collection")

    return Rectangle(min_x, min_y, max_x - min_x, max_y - min_y)
