"""Distance metrics between two grid points."""

from __future__ import annotations

import math


def tile_move_distance(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    diagonal_movement: bool = False,
) -> float:
    """Return the number of tile moves needed to get from point 1 to point 2.

    Without diagonal movement this is the Manhattan distance. With diagonal
    movement one step covers a unit on both axes at once, so the Chebyshev
    distance (largest axis delta) applies instead.
    """

    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    if not diagonal_movement:
        return dx + dy
    # max() keeps whichever argument comes first when compared against NaN
    if math.isnan(dx) or math.isnan(dy):
        return math.nan
    return max(dx, dy)


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Return the straight-line (Euclidean) distance from point 1 to point 2.

    Any NaN coordinate yields NaN, even alongside an infinite delta.
    """
    dx = x2 - x1
    dy = y2 - y1
    return math.sqrt(dx * dx + dy * dy)
