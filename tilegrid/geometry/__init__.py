"""Grid geometry helpers for tilegrid."""

from .directions import (
    DIRECTIONS,
    DIRECTIONS_TO_OFFSETS,
    DIRECTIONS_WITH_DIAGONALS,
    Direction,
    Offset,
    adjacent_coords,
    is_direction,
    offset_for_direction,
)
from .distance import distance, tile_move_distance

__all__ = [
    "DIRECTIONS",
    "DIRECTIONS_TO_OFFSETS",
    "DIRECTIONS_WITH_DIAGONALS",
    "Direction",
    "Offset",
    "adjacent_coords",
    "is_direction",
    "offset_for_direction",
    "distance",
    "tile_move_distance",
]
