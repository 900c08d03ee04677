"""Shared constants."""

from viewtiles.shared.constants import MERCATOR_MAX_LAT_DEG, TILE_SIZE

__all__ = [
    'MERCATOR_MAX_LAT_DEG',
    'TILE_SIZE',
]
