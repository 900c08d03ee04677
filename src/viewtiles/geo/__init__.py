"""Geo module - tile grid projections."""

from .projection import (
    lnglat_to_tile_coords,
    lnglat_to_world,
    tile_to_lnglat,
    tile_to_world,
    world_to_tile_coords,
    zoom_scale,
)

__all__ = [
    'lnglat_to_tile_coords',
    'lnglat_to_world',
    'tile_to_lnglat',
    'tile_to_world',
    'world_to_tile_coords',
    'zoom_scale',
]
