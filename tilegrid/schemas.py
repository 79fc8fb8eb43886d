"""Pydantic schemas for render-facing tile data.

``TileDrawState`` mirrors the plain dict produced by
:func:`tilegrid.draw.tile_draw_data` but gives renderers a validated,
serializable snapshot. Field aliases keep the camelCase keys renderers
expect, while attributes stay snake_case.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Number = Union[int, float]


class TileDrawState(BaseModel):
    """Minimal visual description of one grid tile. Every field is optional."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    x: Optional[Number] = Field(None, description="Tile column")
    y: Optional[Number] = Field(None, description="Tile row")
    char: Optional[str] = Field(None, description="Glyph drawn on the tile")
    color: Optional[str] = Field(None, description="Glyph colour")
    bg_color: Optional[str] = Field(None, alias="bgColor", description="Tile background colour")
    border_color: Optional[str] = Field(None, alias="borderColor")
    border_width: Optional[Number] = Field(None, alias="borderWidth")
    font_size: Optional[Number] = Field(None, alias="fontSize")
    # Outline drawn around the glyph, used for readability on busy backgrounds
    char_stroke_color: Optional[str] = Field(None, alias="charStrokeColor")
    char_stroke_width: Optional[Number] = Field(None, alias="charStrokeWidth")

    def to_draw_data(self) -> Dict[str, Any]:
        """Return the camelCase dict form, with ``None`` for unset attributes."""
        return self.model_dump(by_alias=True)
