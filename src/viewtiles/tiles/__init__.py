"""Tile selection for camera viewports.

This module provides:
- get_bounding_box: visible area of a viewport
- identity_tile_indices / geospatial_tile_indices: tile enumeration per model
- resolve_tile_indices / resolve_tile_bounds: public entry points
- TileResolver: entry points bound to TilingSettings
"""

from viewtiles.tiles.coverage import (
    geospatial_tile_indices,
    identity_tile_indices,
    tile_indices,
)
from viewtiles.tiles.resolver import (
    TileResolver,
    resolve_tile_bounds,
    resolve_tile_indices,
)
from viewtiles.tiles.viewport_bounds import get_bounding_box

__all__ = [
    'TileResolver',
    'geospatial_tile_indices',
    'get_bounding_box',
    'identity_tile_indices',
    'resolve_tile_bounds',
    'resolve_tile_indices',
    'tile_indices',
]
