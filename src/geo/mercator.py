from __future__ import annotations

import math

from shared.constants import TAU, TILE_SIZE


def geo_scale_to_zoom(k: float, tile_size: int = TILE_SIZE) -> float:
    """
    Convert a projection scale factor to a (fractional) zoom level.

    ``k`` is the Mercator scale in pixels per radian, so the whole world spans
    ``k * 2π`` pixels; zoom is how many times that exceeds one tile.
    A non-positive scale has no zoom and maps to ``-inf``.
    """
    if k <= 0:
        return -math.inf
    return math.log2(k * TAU) - math.log2(tile_size)


def geo_zoom_to_scale(z: float, tile_size: int = TILE_SIZE) -> float:
    """Inverse of geo_scale_to_zoom: zoom level -> pixels per radian."""
    return tile_size * math.pow(2, z) / TAU
