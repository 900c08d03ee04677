"""Domain module - value types, settings and profiles."""

from viewtiles.domain.models import (
    BoundingBox,
    CoordinateModel,
    GeoTileBounds,
    TileBounds,
    TileIndex,
    Viewport,
    WorldTileBounds,
)
from viewtiles.domain.settings import TilingSettings

__all__ = [
    'BoundingBox',
    'CoordinateModel',
    'GeoTileBounds',
    'TileBounds',
    'TileIndex',
    'TilingSettings',
    'Viewport',
    'WorldTileBounds',
]
