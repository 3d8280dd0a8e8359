"""Layout serialization — JSON conversion."""

from __future__ import annotations

from .engine import CircularCloudLayouter
from .models import Direction, InvalidInputError, Point, Rectangle


def rectangle_to_dict(rect: Rectangle) -> dict:
    return {"x": rect.x, "y": rect.y, "width": rect.width, "height": rect.height}


def parse_rectangle(data: dict) -> Rectangle:
    return Rectangle(
        x=int(data["x"]),
        y=int(data["y"]),
        width=int(data["width"]),
        height=int(data["height"]),
    )


def layout_to_dict(layouter: CircularCloudLayouter) -> dict:
    """Serialize a layouter's center, growth direction and history."""
    return {
        "center": {"x": layouter.center.x, "y": layouter.center.y},
        "direction": layouter.direction.name,
        "rectangles": [rectangle_to_dict(r) for r in layouter.rectangles],
    }


def parse_layout(data: dict) -> CircularCloudLayouter:
    """Rebuild a layouter from a layout dict, ready to keep placing.

    Raises
    ------
    InvalidInputError
        If the center or a rectangle is missing or malformed, the
        direction is unknown, a rectangle has a non-positive size, or two
        stored rectangles overlap.
    """
    try:
        center = Point(int(data["center"]["x"]), int(data["center"]["y"]))
    except (KeyError, TypeError, ValueError):
        raise InvalidInputError(
            f"Malformed layout center {data.get('center')!r}") from None

    try:
        direction = Direction[data.get("direction", Direction.UP.name)]
    except (KeyError, TypeError):
        raise InvalidInputError(
            f"Unknown growth direction {data.get('direction')!r}") from None

    rectangles: list[Rectangle] = []
    for i, r in enumerate(data.get("rectangles", [])):
        try:
            rectangles.append(parse_rectangle(r))
        except (KeyError, TypeError, ValueError):
            raise InvalidInputError(f"Malformed rectangle {i}: {r!r}") from None

    return CircularCloudLayouter.from_history(center, rectangles, direction)
