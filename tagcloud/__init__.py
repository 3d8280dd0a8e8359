"""tagcloud — circular tag-cloud layout.

Subpackages:
  layout   Rectangle placement around a center (the layout engine).
  render   Image output for laid-out clouds.

Modules:
  config   Render and size-generation constants.
  metrics  Roundness, density and coverage of a layout.
  sizes    Seeded random tag sizes.
"""

from .layout import (
    Point, Size, Rectangle, Direction, InvalidInputError,
    CircularCloudLayouter, bounding_region,
)

__all__ = [
    "Point", "Size", "Rectangle", "Direction", "InvalidInputError",
    "CircularCloudLayouter", "bounding_region",
]
