"""
Cloud Visualizer - draws a laid-out tag cloud to an image.

Every rectangle is filled with the next colour of the palette (cycling in
placement order) on a canvas that fits the cloud's bounding region plus a
margin on each side.  One layout unit maps to one pixel.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence, Tuple

from PIL import Image, ImageDraw

from tagcloud.config import RENDER_RULES
from tagcloud.layout.geometry import bounding_region
from tagcloud.layout.models import InvalidInputError, Rectangle


log = logging.getLogger(__name__)


class CloudVisualizer:
    """Render a sequence of placed rectangles."""

    def __init__(
        self,
        margin_px: int = RENDER_RULES.margin_px,
        palette: Sequence[Tuple[int, int, int]] = RENDER_RULES.palette,
        background: Tuple[int, int, int] = RENDER_RULES.background,
    ):
        if not palette:
            raise InvalidInputError("palette must contain at least one colour")
        self.margin_px = margin_px
        self.palette = tuple(palette)
        self.background = background

    def colour_for(self, index: int) -> Tuple[int, int, int]:
        """Palette colour of the *index*-th placed rectangle."""
        return self.palette[index % len(self.palette)]

    def draw(self, rectangles: Sequence[Rectangle]) -> Image.Image:
        """Draw *rectangles* and return the image."""
        if not rectangles:
            raise InvalidInputError("Nothing to draw: no rectangles")

        mbr = bounding_region(rectangles)
        offset_x = self.margin_px - mbr.left
        offset_y = self.margin_px - mbr.top

        img = Image.new(
            'RGB',
            (mbr.width + 2 * self.margin_px, mbr.height + 2 * self.margin_px),
            self.background,
        )
        draw = ImageDraw.Draw(img)

        for i, rect in enumerate(rectangles):
            # PIL boxes are inclusive of the far corner
            draw.rectangle(
                [
                    (rect.left + offset_x, rect.top + offset_y),
                    (rect.right + offset_x - 1, rect.bottom + offset_y - 1),
                ],
                fill=self.colour_for(i),
            )

        return img

    def save(self, rectangles: Sequence[Rectangle], path: Path) -> Path:
        """Draw *rectangles* and write the image to *path*."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.draw(rectangles).save(path)
        log.info("Saved cloud image %s (%d rectangles)", path, len(rectangles))
        return path
