"""
tilegrid - geometry and data-shaping helpers for tile-based games.

Stateless functions only: direction offsets, grid distances, shallow
settings merges, and draw-data projection for renderers.
No I/O. No global mutable state.
"""

__version__ = "0.1.0"

from .geometry import (
    DIRECTIONS,
    DIRECTIONS_TO_OFFSETS,
    DIRECTIONS_WITH_DIAGONALS,
    Direction,
    Offset,
    adjacent_coords,
    distance,
    is_direction,
    offset_for_direction,
    tile_move_distance,
)
from .objects import merge, merge_defaults
from .draw import TILE_DRAW_DATA_KEYS, tile_draw_data, tile_draw_state
from .schemas import TileDrawState

__all__ = [
    # Directions
    "DIRECTIONS",
    "DIRECTIONS_TO_OFFSETS",
    "DIRECTIONS_WITH_DIAGONALS",
    "Direction",
    "Offset",
    "adjacent_coords",
    "is_direction",
    "offset_for_direction",
    # Distances
    "distance",
    "tile_move_distance",
    # Object composition
    "merge",
    "merge_defaults",
    # Draw data
    "TILE_DRAW_DATA_KEYS",
    "TileDrawState",
    "tile_draw_data",
    "tile_draw_state",
]
