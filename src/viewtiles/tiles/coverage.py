"""Tile enumeration for a bounding box at a fixed zoom level."""

from __future__ import annotations

import math

from viewtiles.domain.models import BoundingBox, CoordinateModel, TileIndex
from viewtiles.geo.projection import (
    lnglat_to_tile_coords,
    world_to_tile_coords,
    zoom_scale,
)


def identity_tile_indices(bbox: BoundingBox, z: int) -> list[TileIndex]:
    """
    Tiles covering a world-space box. The plane is unbounded: no clamping,
    no wrapping, negative indices are valid.

        |  TILE  |  TILE  |  TILE  |
          |(min_x)           |(max_x)
    """
    scale = zoom_scale(z)
    min_x, min_y = world_to_tile_coords(bbox.min_x, bbox.min_y, scale)
    max_x, max_y = world_to_tile_coords(bbox.max_x, bbox.max_y, scale)

    # max is an exclusive bound: x < max_x for integer x is x < ceil(max_x)
    return [
        TileIndex(x=x, y=y, z=z)
        for x in range(math.floor(min_x), math.ceil(max_x))
        for y in range(math.floor(min_y), math.ceil(max_y))
    ]


def geospatial_tile_indices(bbox: BoundingBox, z: int) -> list[TileIndex]:
    """
    Slippy-map tiles covering a [west, south, east, north] box.

    Raw columns go out of range near the antimeridian or when several world
    copies are visible; they are folded back into [0, scale):

                |       |
    actual   -2 -1  0  1  2  3
    expected  2  3  0  1  2  3
    """
    scale = zoom_scale(z)
    # west/north is the top-left tile corner, east/south the bottom-right
    min_x, min_y = lnglat_to_tile_coords(bbox.min_x, bbox.max_y, scale)
    max_x, max_y = lnglat_to_tile_coords(bbox.max_x, bbox.min_y, scale)

    first_x = math.floor(min_x)
    # At most one full world of columns, otherwise folding yields duplicates
    max_x = min(first_x + scale, max_x)
    first_y = max(0, math.floor(min_y))
    max_y = min(scale, max_y)

    indices = []
    for x in range(first_x, math.ceil(max_x)):
        normalized_x = x - (x // scale) * scale
        for y in range(first_y, math.ceil(max_y)):
            indices.append(TileIndex(x=normalized_x, y=y, z=z))
    return indices


def tile_indices(bbox: BoundingBox, z: int, model: CoordinateModel) -> list[TileIndex]:
    if model is CoordinateModel.GEOSPATIAL:
        return geospatial_tile_indices(bbox, z)
    return identity_tile_indices(bbox, z)
