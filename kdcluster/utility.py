"""Coordinate access and Euclidean distance for point-like sequences."""

from __future__ import annotations

import math
from typing import Any, Callable, Sequence

ValueAt = Callable[[Any, int], float]

DEFAULT_DIMENSION = 3


def at(point: Sequence[float], axis: int, dimension: int = DEFAULT_DIMENSION) -> float:
    """Return the coordinate of ``point`` along ``axis``.

    Raises IndexError when ``axis`` is not below ``dimension``.
    """
    if axis >= dimension:
        raise IndexError("axis out of range")
    return float(point[axis])


def distance(
    p1: Any,
    p2: Any,
    value_at: ValueAt | None = None,
    dimension: int = DEFAULT_DIMENSION,
) -> float:
    """Return the L2 distance between two points over ``dimension`` axes."""
    if value_at is None:

        def value_at(point: Any, axis: int) -> float:
            return at(point, axis, dimension)

    return math.sqrt(
        sum((value_at(p1, axis) - value_at(p2, axis)) ** 2 for axis in range(dimension))
    )