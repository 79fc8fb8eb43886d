"""Compass directions and their unit offsets on a 2D tile grid.

Grid convention: +x points right, +y points down (screen coordinates), so
``up`` is ``(0, -1)``. Every table in this module is built once at import
time and exposed read-only.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, Literal, Mapping, Tuple

Direction = Literal[
    "up",
    "up_right",
    "right",
    "down_right",
    "down",
    "down_left",
    "left",
    "up_left",
]


@dataclass(frozen=True)
class Offset:
    """Unit step on the grid for a single direction."""

    x: int
    y: int

    def __iter__(self) -> Iterator[int]:
        # Lets callers unpack ``dx, dy = offset`` like a plain tuple
        yield self.x
        yield self.y

    def as_dict(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y}


# Orthogonal directions, clockwise from up.
DIRECTIONS: Tuple[str, ...] = ("up", "right", "down", "left")

# All eight directions, clockwise from up. Callers scanning neighbours rely on
# this order for deterministic tie-breaking.
DIRECTIONS_WITH_DIAGONALS: Tuple[str, ...] = (
    "up",
    "up_right",
    "right",
    "down_right",
    "down",
    "down_left",
    "left",
    "up_left",
)

DIRECTIONS_TO_OFFSETS: Mapping[str, Offset] = MappingProxyType(
    {
        "up": Offset(0, -1),
        "up_right": Offset(1, -1),
        "right": Offset(1, 0),
        "down_right": Offset(1, 1),
        "down": Offset(0, 1),
        "down_left": Offset(-1, 1),
        "left": Offset(-1, 0),
        "up_left": Offset(-1, -1),
    }
)


def is_direction(name: object) -> bool:
    """Return True if ``name`` is one of the eight known direction names."""
    return isinstance(name, str) and name in DIRECTIONS_TO_OFFSETS


def offset_for_direction(direction: Direction) -> Offset:
    """Return the coordinate offset for ``direction``.

    Raises ``KeyError`` for names outside the direction vocabulary; there is
    no fallback offset. Validate untrusted input with :func:`is_direction`
    first.
    """

    offset = DIRECTIONS_TO_OFFSETS[direction]
    return Offset(offset.x, offset.y)


def adjacent_coords(x: int, y: int, direction: Direction) -> Tuple[int, int]:
    """Return the coordinates one step from ``(x, y)`` towards ``direction``."""
    dx, dy = DIRECTIONS_TO_OFFSETS[direction]
    return x + dx, y + dy
