from __future__ import annotations

import math

from pydantic import BaseModel, field_validator, model_validator


class TilingSettings(BaseModel):
    """
    Zoom bounds of the tile pyramid served by the host.

    None means the side is unrestricted.
    """

    model_config = {
        'extra': 'ignore',  # profiles may carry host-specific keys
    }

    # Coarsest level with tile data; coarser views request nothing
    min_zoom: int | None = None
    # Finest level with tile data; finer views reuse this level
    max_zoom: int | None = None

    @field_validator('min_zoom', 'max_zoom', mode='before')
    @classmethod
    def validate_zoom_bound(cls, v: int | float | str | None) -> int | None:
        if v is None:
            return None
        if isinstance(v, str):
            if v.strip().lower() in ('', 'none', 'inf', '+inf', '-inf'):
                return None
            v = float(v)
        if isinstance(v, float):
            if math.isinf(v):
                return None
            if not v.is_integer():
                msg = 'Zoom bound must be a whole number'
                raise ValueError(msg)
        v = int(v)
        if v < 0:
            msg = 'Zoom bound cannot be negative'
            raise ValueError(msg)
        return v

    @model_validator(mode='after')
    def check_range(self) -> TilingSettings:
        if (
            self.min_zoom is not None
            and self.max_zoom is not None
            and self.min_zoom > self.max_zoom
        ):
            msg = f'min_zoom ({self.min_zoom}) exceeds max_zoom ({self.max_zoom})'
            raise ValueError(msg)
        return self
