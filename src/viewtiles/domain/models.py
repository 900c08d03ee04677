"""Value types shared by the tiling modules."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Protocol, Union, runtime_checkable

import numpy as np
from pydantic import BaseModel, field_validator, model_validator


@runtime_checkable
class Viewport(Protocol):
    """Camera contract consumed from the host; never implemented here."""

    width: float
    height: float
    zoom: float
    is_geospatial: bool

    def unproject(self, xy: Sequence[float]) -> Sequence[float]: ...


class CoordinateModel(str, Enum):
    GEOSPATIAL = 'geospatial'
    IDENTITY = 'identity'

    @classmethod
    def of(cls, viewport: Viewport) -> CoordinateModel:
        return cls.GEOSPATIAL if viewport.is_geospatial else cls.IDENTITY


class BoundingBox(BaseModel):
    """
    Axis-aligned box in spatial coordinates.

    Geospatial boxes are ordered [west, south, east, north].
    """

    model_config = {'frozen': True}

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @model_validator(mode='after')
    def check_order(self) -> BoundingBox:
        if self.min_x > self.max_x or self.min_y > self.max_y:
            msg = (
                f'Bounding box is inverted: [{self.min_x}, {self.min_y}, '
                f'{self.max_x}, {self.max_y}]'
            )
            raise ValueError(msg)
        return self

    @classmethod
    def from_points(cls, points: Iterable[Sequence[float]]) -> BoundingBox:
        """Smallest box containing every (x, y) point, in any order."""
        # Extra components (e.g. altitude from unproject) are ignored
        xy = [tuple(p)[:2] for p in points]
        if not xy:
            msg = 'At least one point is required'
            raise ValueError(msg)
        arr = np.asarray(xy, dtype=np.float64)
        lo = arr.min(axis=0)
        hi = arr.max(axis=0)
        return cls(
            min_x=float(lo[0]),
            min_y=float(lo[1]),
            max_x=float(hi[0]),
            max_y=float(hi[1]),
        )

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def as_tuple(self) -> tuple[float, float, float, float]:
        return self.min_x, self.min_y, self.max_x, self.max_y


class TileIndex(BaseModel):
    """Tile address (x, y, z); equal tiles compare and hash equal."""

    model_config = {'frozen': True}

    x: int
    y: int
    z: int

    @field_validator('z')
    @classmethod
    def validate_zoom(cls, v: int) -> int:
        if v < 0:
            msg = 'Tile zoom level cannot be negative'
            raise ValueError(msg)
        return v

    @property
    def scale(self) -> int:
        return 1 << self.z

    def normalized(self) -> TileIndex:
        """Reduce x into the canonical column range [0, 2**z)."""
        # floor modulo, so x=-1 maps to 2**z - 1
        x = self.x % self.scale
        if x == self.x:
            return self
        return TileIndex(x=x, y=self.y, z=self.z)

    def as_tuple(self) -> tuple[int, int, int]:
        return self.x, self.y, self.z


class GeoTileBounds(BaseModel):
    """Tile extent in degrees."""

    model_config = {'frozen': True}

    west: float
    north: float
    east: float
    south: float

    def contains(self, lng: float, lat: float) -> bool:
        return self.west <= lng < self.east and self.south < lat <= self.north

    def as_dict(self) -> dict[str, float]:
        return self.model_dump()


class WorldTileBounds(BaseModel):
    """Tile extent in world units; y grows with the tile row."""

    model_config = {'frozen': True}

    left: float
    top: float
    right: float
    bottom: float

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x < self.right and self.top <= y < self.bottom

    def as_dict(self) -> dict[str, float]:
        return self.model_dump()


TileBounds = Union[GeoTileBounds, WorldTileBounds]
