"""Pytest configuration and fixtures for viewtiles tests."""

import sys
from dataclasses import dataclass
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))


@dataclass
class StubViewport:
    """
    Axis-aligned viewport that maps the screen linearly onto `bounds`.

    bounds is (min_x, min_y, max_x, max_y). Geospatial viewports put north at
    screen y=0; identity viewports put min_y there.
    """

    bounds: tuple[float, float, float, float]
    zoom: float
    is_geospatial: bool
    width: float = 800
    height: float = 600

    def unproject(self, xy):
        sx, sy = xy
        min_x, min_y, max_x, max_y = self.bounds
        fx = sx / self.width if self.width else 0.0
        fy = sy / self.height if self.height else 0.0
        x = min_x + fx * (max_x - min_x)
        if self.is_geospatial:
            return [x, max_y - fy * (max_y - min_y)]
        return [x, min_y + fy * (max_y - min_y)]


@pytest.fixture
def make_viewport():
    """Factory for StubViewport instances."""

    def _make(bounds, zoom, *, geospatial, width=800, height=600):
        return StubViewport(
            bounds=tuple(bounds),
            zoom=zoom,
            is_geospatial=geospatial,
            width=width,
            height=height,
        )

    return _make
