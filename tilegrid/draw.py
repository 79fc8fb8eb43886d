"""Project tile-like objects down to the attributes a renderer draws."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterable, Optional, Tuple

from .schemas import TileDrawState

TILE_DRAW_DATA_KEYS: Tuple[str, ...] = (
    "x",
    "y",
    "char",
    "color",
    "bgColor",
    "borderColor",
    "borderWidth",
    "fontSize",
    "charStrokeColor",
    "charStrokeWidth",
)


def _read(obj: Any, key: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def tile_draw_data(obj: Any, keys: Optional[Iterable[str]] = None) -> Dict[str, Any]:
    """Return ``{key: obj[key]}`` for each of ``keys``.

    ``obj`` may be a mapping (read with ``.get``) or any object (read with
    ``getattr``). Keys the object lacks are still present in the result with
    a value of ``None`` so renderers can rely on the key set. ``keys``
    defaults to :data:`TILE_DRAW_DATA_KEYS`; only ``None`` selects the
    default, an empty sequence yields an empty dict.
    """

    if keys is None:
        keys = TILE_DRAW_DATA_KEYS
    return {key: _read(obj, key) for key in keys}


def tile_draw_state(obj: Any) -> TileDrawState:
    """Project ``obj`` onto the default draw keys and validate the result."""
    return TileDrawState.model_validate(tile_draw_data(obj))
