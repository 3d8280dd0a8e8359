"""Shared constants for the tag-cloud layout tools.

The layout engine itself has no tuneable parameters; these values describe
how clouds are *generated* for demos and tests and how they are *drawn*.
Both the CLI and the renderer derive their defaults from the singletons
at the bottom of this module.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderRules:
    """Canvas rules for the cloud renderer.

    All distances are in pixels (one layout unit = one pixel).
    """

    margin_px: int = 200
    """Blank border added on every side of the cloud's bounding region."""

    background: tuple[int, int, int] = (255, 255, 255)

    palette: tuple[tuple[int, int, int], ...] = (
        (0, 255, 255),      # aqua
        (255, 228, 196),    # bisque
        (0, 0, 0),          # black
        (0, 0, 255),        # blue
        (138, 43, 226),     # blue violet
        (165, 42, 42),      # brown
        (127, 255, 0),      # chartreuse
        (255, 140, 0),      # dark orange
    )
    """Fill colours, assigned to rectangles in placement order, cycling."""


@dataclass(frozen=True)
class SizeRules:
    """Defaults for random tag-size generation."""

    min_side: int = 10
    max_side: int = 100
    count: int = 100


# Module-level singletons — importable everywhere.
RENDER_RULES = RenderRules()
SIZE_RULES = SizeRules()
