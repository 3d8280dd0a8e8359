"""Layout — positions tag rectangles around a cloud center.

Submodules:
  models        Primitives (Point, Size, Rectangle, Direction) and errors.
  geometry      Directional moves, collision queries, bounding region.
  engine        CircularCloudLayouter (the placement algorithm).
  serialization JSON conversion (layout_to_dict, parse_layout).
"""

from .models import Point, Size, Rectangle, Direction, InvalidInputError
from .engine import CircularCloudLayouter
from .geometry import bounding_region
from .serialization import layout_to_dict, parse_layout

__all__ = [
    # Models
    "Point", "Size", "Rectangle", "Direction", "InvalidInputError",
    # Engine
    "CircularCloudLayouter",
    # Geometry
    "bounding_region",
    # Serialization
    "layout_to_dict", "parse_layout",
]
