from __future__ import annotations

from viewtiles.domain.models import BoundingBox, Viewport


def screen_corners(viewport: Viewport) -> list[tuple[float, float]]:
    w, h = viewport.width, viewport.height
    return [(0, 0), (w, 0), (0, h), (w, h)]


def get_bounding_box(viewport: Viewport) -> BoundingBox:
    """
    Bounding box of the visible area in world or geographic coordinates.

    Corners may unproject in any order (rotation, pitch, flipped y), so the
    box is the min/max over all four. Errors from unproject propagate.
    """
    return BoundingBox.from_points(
        viewport.unproject(corner) for corner in screen_corners(viewport)
    )
