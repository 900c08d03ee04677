"""Public entry points: viewport -> tile indices, tile -> spatial bounds."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from pathlib import Path

from viewtiles.domain.models import (
    CoordinateModel,
    GeoTileBounds,
    TileBounds,
    TileIndex,
    Viewport,
    WorldTileBounds,
)
from viewtiles.domain.profiles import load_profile
from viewtiles.domain.settings import TilingSettings
from viewtiles.geo.projection import tile_to_lnglat, tile_to_world
from viewtiles.shared.constants import MIN_TILE_ZOOM
from viewtiles.tiles.coverage import tile_indices
from viewtiles.tiles.viewport_bounds import get_bounding_box

logger = logging.getLogger(__name__)


def _is_bounded(limit: float | None) -> bool:
    return limit is not None and math.isfinite(limit)


def resolve_tile_indices(
    viewport: Viewport,
    max_zoom: float | None = None,
    min_zoom: float | None = None,
) -> list[TileIndex]:
    """
    Return all tile indices visible in the viewport.

    The continuous zoom is rounded up to the next tile level. If that level is
    below min_zoom, nothing is returned; above max_zoom, tiles of max_zoom are
    returned instead. None or math.inf leaves a side unrestricted.
    """
    z = math.ceil(viewport.zoom)
    if _is_bounded(min_zoom) and z < min_zoom:
        logger.debug('Zoom level %s below min_zoom %s, no tiles', z, min_zoom)
        return []
    if _is_bounded(max_zoom) and z > max_zoom:
        logger.debug('Zoom level %s clamped to max_zoom %s', z, max_zoom)
        z = int(max_zoom)
    z = max(z, MIN_TILE_ZOOM)

    model = CoordinateModel.of(viewport)
    bbox = get_bounding_box(viewport)
    indices = tile_indices(bbox, z, model)
    logger.debug(
        'Resolved %d %s tiles at z=%d for bbox %s',
        len(indices),
        model.value,
        z,
        bbox.as_tuple(),
    )
    return indices


def resolve_tile_bounds(
    viewport: Viewport,
    tile: TileIndex | Sequence[int],
) -> TileBounds:
    """
    Spatial extent of a tile; only viewport.is_geospatial is consulted.

    Indices are not range-checked, callers pass them as enumerated.
    """
    if not isinstance(tile, TileIndex):
        x, y, z = tile
        tile = TileIndex(x=x, y=y, z=z)
    x, y, z = tile.as_tuple()

    if CoordinateModel.of(viewport) is CoordinateModel.GEOSPATIAL:
        west, north = tile_to_lnglat(x, y, z)
        east, south = tile_to_lnglat(x + 1, y + 1, z)
        return GeoTileBounds(west=west, north=north, east=east, south=south)

    left, top = tile_to_world(x, y, z)
    right, bottom = tile_to_world(x + 1, y + 1, z)
    return WorldTileBounds(left=left, top=top, right=right, bottom=bottom)


class TileResolver:
    """Applies a tile pyramid's zoom bounds to viewport queries."""

    def __init__(self, settings: TilingSettings | None = None) -> None:
        self.settings = settings or TilingSettings()

    @classmethod
    def from_profile(cls, name_or_path: str | Path) -> TileResolver:
        return cls(load_profile(str(name_or_path)))

    def tile_indices(self, viewport: Viewport) -> list[TileIndex]:
        return resolve_tile_indices(
            viewport,
            max_zoom=self.settings.max_zoom,
            min_zoom=self.settings.min_zoom,
        )

    def tile_bounds(
        self,
        viewport: Viewport,
        tile: TileIndex | Sequence[int],
    ) -> TileBounds:
        return resolve_tile_bounds(viewport, tile)
