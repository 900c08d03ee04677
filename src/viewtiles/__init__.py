"""Viewport tile selection for slippy-map and planar tile pyramids."""

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
from viewtiles.shared.constants import TILE_SIZE
from viewtiles.tiles.resolver import (
    TileResolver,
    resolve_tile_bounds,
    resolve_tile_indices,
)

__version__ = '0.1.0'

__all__ = [
    'TILE_SIZE',
    'BoundingBox',
    'CoordinateModel',
    'GeoTileBounds',
    'TileBounds',
    'TileIndex',
    'TileResolver',
    'TilingSettings',
    'Viewport',
    'WorldTileBounds',
    'resolve_tile_bounds',
    'resolve_tile_indices',
]
