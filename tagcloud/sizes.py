"""Random tag sizes for demos and layout tests."""

from __future__ import annotations

import random

from tagcloud.config import SIZE_RULES
from tagcloud.layout.models import InvalidInputError, Size


def random_sizes(
    count: int = SIZE_RULES.count,
    *,
    min_side: int = SIZE_RULES.min_side,
    max_side: int = SIZE_RULES.max_side,
    seed: int | None = None,
) -> list[Size]:
    """Return *count* sizes with sides drawn uniformly from [min_side, max_side].

    The same *seed* always yields the same sequence.
    """
    if count < 0:
        raise InvalidInputError(f"count must be non-negative, got {count}")
    if min_side < 1:
        raise InvalidInputError(f"min_side must be at least 1, got {min_side}")
    if max_side < min_side:
        raise InvalidInputError(
            f"max_side ({max_side}) is smaller than min_side ({min_side})")

    rng = random.Random(seed)
    return [
        Size(rng.randint(min_side, max_side), rng.randint(min_side, max_side))
        for _ in range(count)
    ]
