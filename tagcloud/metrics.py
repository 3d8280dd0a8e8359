"""Cloud quality metrics — roundness, density and coverage.

Every metric is taken over the placed rectangles *plus the center point*,
so a cloud that drifted away from its center is penalised for the empty
space in between.
"""

from __future__ import annotations

import math
from typing import Sequence

from shapely.geometry import box as shapely_box
from shapely.ops import unary_union

from tagcloud.layout.geometry import bounding_region
from tagcloud.layout.models import InvalidInputError, Point, Rectangle


def _require(rectangles: Sequence[Rectangle]) -> None:
    if not rectangles:
        raise InvalidInputError("Cloud metrics need at least one rectangle")


def cloud_bounds(rectangles: Sequence[Rectangle], center: Point) -> Rectangle:
    """Bounding region of *rectangles* extended to include *center*."""
    _require(rectangles)
    return bounding_region([*rectangles, Rectangle(center.x, center.y, 0, 0)])


def roundness(rectangles: Sequence[Rectangle], center: Point) -> float:
    """Farthest / nearest distance from *center* to the bounds' corners.

    1.0 means the bounding box is a square centred on *center*; larger
    values mean a lopsided cloud.  Returns ``inf`` when the center sits on
    a corner of the bounds.
    """
    mbr = cloud_bounds(rectangles, center)
    corners = [
        (mbr.left, mbr.top), (mbr.right, mbr.top),
        (mbr.right, mbr.bottom), (mbr.left, mbr.bottom),
    ]
    distances = [math.hypot(x - center.x, y - center.y) for x, y in corners]
    nearest = min(distances)
    if nearest == 0:
        return math.inf
    return max(distances) / nearest


def density(rectangles: Sequence[Rectangle], center: Point) -> float:
    """Total rectangle area over the area of the cloud bounds."""
    mbr = cloud_bounds(rectangles, center)
    total = sum(r.area for r in rectangles)
    return total / mbr.area if mbr.area else 0.0


def coverage(rectangles: Sequence[Rectangle], center: Point) -> float:
    """Union area over the area of the cloud bounds.

    Same as :func:`density` for a non-overlapping layout; lower if any
    rectangles overlap.
    """
    mbr = cloud_bounds(rectangles, center)
    if not mbr.area:
        return 0.0
    union = unary_union([
        shapely_box(r.left, r.top, r.right, r.bottom) for r in rectangles
    ])
    return union.area / mbr.area


def overlapping_pairs(rectangles: Sequence[Rectangle]) -> list[tuple[int, int]]:
    """Index pairs ``(i, j)`` with ``i < j`` whose rectangles overlap."""
    pairs: list[tuple[int, int]] = []
    for i in range(len(rectangles) - 1):
        for j in range(i + 1, len(rectangles)):
            if rectangles[i].intersects_with(rectangles[j]):
                pairs.append((i, j))
    return pairs
