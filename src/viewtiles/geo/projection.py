"""
Point conversions between spatial coordinates and the tile grid.

Geospatial functions follow the slippy-map scheme
(https://wiki.openstreetmap.org/wiki/Slippy_map_tilenames); identity
functions treat the world as a plane where one zoom-0 tile is TILE_SIZE wide.
"""

from __future__ import annotations

import math

from viewtiles.shared.constants import (
    MERCATOR_MAX_SIN,
    TILE_SIZE,
    WORLD_LNG_HALF_SPAN_DEG,
    WORLD_LNG_SPAN_DEG,
)


def zoom_scale(z: int) -> int:
    """Tiles per axis at level z."""
    return 1 << z


def lnglat_to_world(lng: float, lat: float) -> tuple[float, float]:
    """
    Web Mercator (lng, lat) -> world pixels at zoom 0 (side TILE_SIZE).

    World y grows northward. Longitude is not wrapped, so 190 lands past the
    right edge of the world.
    """
    siny = math.sin(math.radians(lat))
    siny = min(max(siny, -MERCATOR_MAX_SIN), MERCATOR_MAX_SIN)
    x = (lng + WORLD_LNG_HALF_SPAN_DEG) / WORLD_LNG_SPAN_DEG * TILE_SIZE
    y = (0.5 + math.log((1 + siny) / (1 - siny)) / (4 * math.pi)) * TILE_SIZE
    return x, y


def lnglat_to_tile_coords(lng: float, lat: float, scale: int) -> tuple[float, float]:
    """Fractional slippy-map tile coordinates; rows grow southward."""
    wx, wy = lnglat_to_world(lng, lat)
    return wx * scale / TILE_SIZE, (1 - wy / TILE_SIZE) * scale


def world_to_tile_coords(x: float, y: float, scale: int) -> tuple[float, float]:
    return x * scale / TILE_SIZE, y * scale / TILE_SIZE


def tile_to_lnglat(x: float, y: float, z: int) -> tuple[float, float]:
    """North-west corner of slippy-map tile (x, y, z) in degrees."""
    scale = zoom_scale(z)
    lng = (x / scale) * WORLD_LNG_SPAN_DEG - WORLD_LNG_HALF_SPAN_DEG
    n = math.pi - 2 * math.pi * y / scale
    lat = math.degrees(math.atan(math.sinh(n)))
    return lng, lat


def tile_to_world(x: float, y: float, z: int) -> tuple[float, float]:
    scale = zoom_scale(z)
    return (x / scale) * TILE_SIZE, (y / scale) * TILE_SIZE
