"""Spherical Web Mercator projection between lon/lat and screen pixels."""

from __future__ import annotations

import math

from geo.mercator import geo_zoom_to_scale
from geo.vector import Vec2
from shared.constants import (
    DEG_TO_RAD,
    MERCATOR_MAX_LAT_DEG,
    RAD_TO_DEG,
    TAU,
    TILE_SIZE,
)


class Projection:
    """
    Mercator projection with a pixel translation ``(x, y)`` and scale ``k``.

    ``k`` is measured in pixels per radian: at ``k = 256 / 2π`` the whole
    world fits one 256 px tile. The translation is where lon/lat (0, 0) lands
    in screen pixels. ``dimensions`` is the viewport in screen pixels.
    """

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        k: float = TILE_SIZE / TAU,
    ) -> None:
        self._x = x
        self._y = y
        self._k = k
        self._dimensions: tuple[Vec2, Vec2] = ((0.0, 0.0), (0.0, 0.0))

    def __repr__(self) -> str:
        return (
            f'Projection(x={self._x!r}, y={self._y!r}, k={self._k!r}, '
            f'dimensions={self._dimensions!r})'
        )

    def project(self, loc: Vec2) -> Vec2:
        """lon/lat (degrees) -> screen pixels."""
        lat = max(-MERCATOR_MAX_LAT_DEG, min(MERCATOR_MAX_LAT_DEG, loc[1]))
        lam = loc[0] * DEG_TO_RAD
        phi = lat * DEG_TO_RAD
        merc_x = lam
        merc_y = math.log(math.tan((math.pi / 2 + phi) / 2))
        return merc_x * self._k + self._x, self._y - merc_y * self._k

    def invert(self, point: Vec2) -> Vec2:
        """Screen pixels -> lon/lat (degrees)."""
        merc_x = (point[0] - self._x) / self._k
        merc_y = (self._y - point[1]) / self._k
        lam = merc_x
        phi = 2 * math.atan(math.exp(merc_y)) - math.pi / 2
        return lam * RAD_TO_DEG, phi * RAD_TO_DEG

    def scale(self) -> float:
        return self._k

    def set_scale(self, k: float) -> Projection:
        self._k = k
        return self

    def translate(self) -> Vec2:
        return self._x, self._y

    def set_translate(self, translate: Vec2) -> Projection:
        self._x, self._y = translate
        return self

    def dimensions(self) -> tuple[Vec2, Vec2]:
        return self._dimensions

    def set_dimensions(self, dimensions: tuple[Vec2, Vec2]) -> Projection:
        (min_x, min_y), (max_x, max_y) = dimensions
        self._dimensions = ((min_x, min_y), (max_x, max_y))
        return self

    def transform(self) -> dict[str, float]:
        return {'x': self._x, 'y': self._y, 'k': self._k}


def projection_for_view(
    center: Vec2,
    zoom: float,
    width_px: float,
    height_px: float,
    tile_size: int = TILE_SIZE,
) -> Projection:
    """
    Build a projection whose ``width_px`` x ``height_px`` viewport is centered
    on ``center`` (lon, lat) at a possibly fractional ``zoom``.
    """
    k = geo_zoom_to_scale(zoom, tile_size)
    projection = Projection(0.0, 0.0, k)
    cx, cy = projection.project(center)
    projection.set_translate((width_px / 2 - cx, height_px / 2 - cy))
    projection.set_dimensions(((0.0, 0.0), (width_px, height_px)))
    return projection
