"""
tilegrid inspection CLI

Prints direction offsets, distances, and configuration for quick checks
while wiring up movement or rendering code.

Run: python -m tilegrid distance 0 0 3 4 --diagonal
"""

from __future__ import annotations

import argparse
from typing import List, Optional, Sequence

from .config import Config
from .geometry import (
    DIRECTIONS,
    DIRECTIONS_WITH_DIAGONALS,
    adjacent_coords,
    distance,
    offset_for_direction,
    tile_move_distance,
)
from .logging_utils import (
    MARKER_INFO,
    MARKER_RESULT,
    MARKER_SUCCESS,
    log_debug,
    log_deterministic,
    log_error,
    log_info,
    log_success,
)

_ARROWS = {
    "up": "↑",
    "up_right": "↗",
    "right": "→",
    "down_right": "↘",
    "down": "↓",
    "down_left": "↙",
    "left": "←",
    "up_left": "↖",
}


def render_compass(directions: Sequence[str]) -> str:
    """Return a 3x3 sketch with an arrow placed at each direction's offset."""
    cells = [[" ", " ", " "] for _ in range(3)]
    cells[1][1] = "@"
    for name in directions:
        dx, dy = offset_for_direction(name)
        cells[1 + dy][1 + dx] = _ARROWS[name]
    return "\n".join(" ".join(row) for row in cells)


def _number(text: str) -> float:
    value = float(text)
    return int(value) if value.is_integer() else value


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tilegrid", description="Tile grid geometry helpers")
    sub = parser.add_subparsers(dest="command", required=True)

    directions = sub.add_parser("directions", help="List directions and their offsets")
    directions.add_argument("--diagonals", action="store_true", help="Include diagonal directions")

    dist = sub.add_parser("distance", help="Tile-move and Euclidean distance between two points")
    for name in ("x1", "y1", "x2", "y2"):
        dist.add_argument(name, type=_number)
    dist.add_argument(
        "--diagonal",
        action=argparse.BooleanOptionalAction,
        default=Config.DIAGONAL_MOVEMENT,
        help="Allow diagonal moves (default from TILEGRID_DIAGONAL_MOVEMENT)",
    )

    offset = sub.add_parser("offset", help="Offset for a single direction")
    offset.add_argument("direction")
    offset.add_argument("--from", dest="origin", nargs=2, type=int, metavar=("X", "Y"))

    sub.add_parser("config", help="Show current configuration")

    return parser.parse_args(argv)


def _cmd_directions(args: argparse.Namespace) -> None:
    names = DIRECTIONS_WITH_DIAGONALS if args.diagonals else DIRECTIONS
    log_info(f"{MARKER_INFO} {len(names)} directions (clockwise from up)")
    for name in names:
        offset = offset_for_direction(name)
        log_deterministic(f"{MARKER_RESULT} {name:<11} x={offset.x:+d} y={offset.y:+d}")
    print(render_compass(names))


def _cmd_distance(args: argparse.Namespace) -> None:
    log_debug(f"points=({args.x1}, {args.y1}) -> ({args.x2}, {args.y2}) diagonal={args.diagonal}")
    moves = tile_move_distance(args.x1, args.y1, args.x2, args.y2, args.diagonal)
    straight = distance(args.x1, args.y1, args.x2, args.y2)
    log_deterministic(f"{MARKER_RESULT} tile moves: {moves}")
    log_deterministic(f"{MARKER_RESULT} euclidean: {straight:g}")


def _cmd_offset(args: argparse.Namespace) -> None:
    offset = offset_for_direction(args.direction)
    log_deterministic(f"{MARKER_RESULT} {args.direction}: x={offset.x:+d} y={offset.y:+d}")
    if args.origin is not None:
        x, y = args.origin
        nx, ny = adjacent_coords(x, y, args.direction)
        log_deterministic(f"{MARKER_RESULT} ({x}, {y}) -> ({nx}, {ny})")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        Config.validate()
        if args.command == "directions":
            _cmd_directions(args)
        elif args.command == "distance":
            _cmd_distance(args)
        elif args.command == "offset":
            _cmd_offset(args)
        elif args.command == "config":
            log_success(f"{MARKER_SUCCESS} {Config.display()}")
    except KeyError as exc:
        log_error(f"Unknown direction {exc}; expected one of {', '.join(DIRECTIONS_WITH_DIAGONALS)}")
        return 2
    except ValueError as exc:
        log_error(str(exc))
        return 2
    return 0
