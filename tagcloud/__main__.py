"""
tagcloud — entry point.

Usage:
    python -m tagcloud render                          # 100 random tags -> cloud.png
    python -m tagcloud render --count 50 --seed 7
    python -m tagcloud render --center 50,50 --out out/cloud.png --json out/cloud.json
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

from tagcloud.config import SIZE_RULES
from tagcloud.layout import CircularCloudLayouter, InvalidInputError, Point, layout_to_dict
from tagcloud.metrics import density, roundness
from tagcloud.render import CloudVisualizer
from tagcloud.sizes import random_sizes

USAGE = ("Usage: python -m tagcloud render [--count N] [--seed S] "
         "[--center X,Y] [--out PATH] [--json PATH]")


def _parse_center(text: str) -> Point:
    try:
        x, y = (int(v) for v in text.split(","))
    except ValueError:
        raise InvalidInputError(f"--center expects X,Y integers, got {text!r}") from None
    return Point(x, y)


def render(args: list[str]) -> int:
    count = SIZE_RULES.count
    seed = None
    center = Point(0, 0)
    out = Path("cloud.png")
    json_out = None
    for i, a in enumerate(args):
        if i + 1 >= len(args):
            break
        value = args[i + 1]
        if a == "--count":
            count = int(value)
        elif a == "--seed":
            seed = int(value)
        elif a == "--center":
            center = _parse_center(value)
        elif a == "--out":
            out = Path(value)
        elif a == "--json":
            json_out = Path(value)

    layouter = CircularCloudLayouter(center)
    for size in random_sizes(count, seed=seed):
        layouter.put_next_rectangle(size)
    rects = layouter.rectangles

    CloudVisualizer().save(rects, out)
    if json_out is not None:
        json_out.parent.mkdir(parents=True, exist_ok=True)
        json_out.write_text(json.dumps(layout_to_dict(layouter), indent=2),
                            encoding="utf-8")

    print(f"{len(rects)} rectangles around ({center.x}, {center.y})")
    print(f"  roundness: {roundness(rects, center):.3f}")
    print(f"  density:   {density(rects, center):.3f}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    cmd = args[0] if args else "render"

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if cmd != "render":
        print(f"Unknown command: {cmd}")
        print(USAGE)
        return 1

    try:
        return render(args[1:])
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
