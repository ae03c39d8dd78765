"""
Tile grid covering a map viewport.

Given a Projection (translation, scale, viewport dimensions) the Tiler picks
an integer zoom, enumerates the XYZ tiles covering the viewport plus an
optional margin, and reports each tile's world-pixel and WGS84 extents.

    At zoom 1 (whole world visible in a 512x512 viewport):

      +-------+-------+  +85.0511
      | 0,0,1 | 1,0,1 |
      +-------+-------+   0
      | 0,1,1 | 1,1,1 |
      +-------+-------+  -85.0511
    -180      0     +180

    tiler = Tiler()
    projection = Projection(256, 256, 256 / math.pi).set_dimensions(((0, 0), (512, 512)))
    result = tiler.get_tiles(projection)
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Protocol

from domain.models import TilerConfig
from geo.extent import Extent
from geo.mercator import geo_scale_to_zoom, geo_zoom_to_scale
from geo.projection import Projection
from geo.vector import Vec2, Vec3
from shared.constants import (
    NULL_ISLAND_MIN_ZOOM,
    NULL_ISLAND_SPAN_ZOOM,
    TILE_ID_SEPARATOR,
)
from tiles.geojson import tiles_to_geojson

logger = logging.getLogger(__name__)


class ViewProjection(Protocol):
    """What get_tiles needs from a projection."""

    def dimensions(self) -> tuple[Vec2, Vec2]: ...

    def translate(self) -> Vec2: ...

    def scale(self) -> float: ...


@dataclass(frozen=True)
class Tile:
    """One XYZ tile of a TileResult."""

    id: str
    xyz: Vec3
    px_extent: Extent
    wgs84_extent: Extent
    is_visible: bool


@dataclass
class TileResult:
    """Tiles covering a viewport, visible tiles first."""

    tiles: list[Tile] = field(default_factory=list)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.tiles)

    def __len__(self) -> int:
        return len(self.tiles)

    @property
    def ids(self) -> list[str]:
        return [tile.id for tile in self.tiles]

    @property
    def visible(self) -> list[Tile]:
        return [tile for tile in self.tiles if tile.is_visible]

    @property
    def margin(self) -> list[Tile]:
        return [tile for tile in self.tiles if not tile.is_visible]


def tile_id(x: int, y: int, z: int) -> str:
    """Canonical 'x,y,z' identifier used as a cache/request key."""
    return TILE_ID_SEPARATOR.join(str(v) for v in (x, y, z))


def _clamp(num: float, lo: float, hi: float) -> float:
    return max(lo, min(num, hi))


def _round_zoom(z_frac: float) -> int:
    return math.floor(z_frac + 0.5)


class Tiler:
    """
    Splits the world into rectangular XYZ tiles and finds the ones covering
    a projection's viewport.

    Defaults: 256 px tiles, zoom range 0-24, no margin, tiles around
    Null Island included. Each instance owns its configuration; changes
    apply to later get_tiles() calls only. Not safe to reconfigure while
    another thread is calling get_tiles() on the same instance.
    """

    def __init__(self, config: TilerConfig | None = None) -> None:
        self._config = config or TilerConfig()

    def __repr__(self) -> str:
        return f'Tiler({self._config!r})'

    # --- configuration

    @property
    def config(self) -> TilerConfig:
        return self._config

    @config.setter
    def config(self, value: TilerConfig) -> None:
        self._config = value

    def configure(self, **changes: Any) -> Tiler:
        """
        Apply several configuration changes at once.

        Raises ValueError (pydantic ValidationError) and keeps the previous
        configuration when the result does not validate.
        """
        self._config = TilerConfig.model_validate(
            {**self._config.model_dump(), **changes},
        )
        return self

    @property
    def tile_size(self) -> int:
        return self._config.tile_size

    @tile_size.setter
    def tile_size(self, value: int) -> None:
        self.configure(tile_size=value)

    @property
    def zoom_range(self) -> tuple[int, int]:
        return self._config.zoom_range

    @zoom_range.setter
    def zoom_range(self, value: tuple[int, int]) -> None:
        self.set_zoom_range(*value)

    def set_zoom_range(self, min_zoom: int, max_zoom: int | None = None) -> Tiler:
        """Set the inclusive zoom range; a single value pins both bounds."""
        if max_zoom is None:
            max_zoom = min_zoom
        return self.configure(zoom_min=min_zoom, zoom_max=max_zoom)

    @property
    def margin(self) -> int:
        return self._config.margin

    @margin.setter
    def margin(self, value: int) -> None:
        self.configure(margin=value)

    @property
    def skip_null_island(self) -> bool:
        return self._config.skip_null_island

    @skip_null_island.setter
    def skip_null_island(self, value: bool) -> None:
        self.configure(skip_null_island=value)

    # --- tiling

    def get_tiles(self, projection: ViewProjection) -> TileResult:
        """
        Return the tiles covering the projection's viewport plus margin.

        Works in "world" pixel coordinates, with the origin at the top left
        of the world at the projection's scale. Never raises for finite
        input; a degenerate viewport yields an empty or minimal result.
        """
        config = self._config
        tile_size = config.tile_size
        margin = config.margin

        dimensions = projection.dimensions()
        translate = projection.translate()
        scale = projection.scale()

        z_frac = geo_scale_to_zoom(scale, tile_size)
        if not math.isfinite(z_frac):
            logger.debug('Scale %r has no zoom level, using zoom_min', scale)
            z_frac = float(config.zoom_min)
        z = int(_clamp(_round_zoom(z_frac), config.zoom_min, config.zoom_max))
        min_tile = 0
        max_tile = 2**z - 1

        # pixels per grid unit at the true (fractional) scale
        k = math.pow(2, z_frac - z + math.log2(tile_size))

        origin = (scale * math.pi - translate[0], scale * math.pi - translate[1])
        view_min = (origin[0] + dimensions[0][0], origin[1] + dimensions[0][1])
        view_max = (origin[0] + dimensions[1][0], origin[1] + dimensions[1][1])
        view_extent = Extent(view_min, view_max)

        # centered at Null Island, independent of pan, to invert back to lon/lat
        world_origin = (2**z / 2) * tile_size
        world_projection = Projection(
            world_origin,
            world_origin,
            geo_zoom_to_scale(z, tile_size),
        )

        cols = range(
            int(_clamp(math.floor(view_min[0] / k) - margin, min_tile, max_tile)),
            int(_clamp(math.floor(view_max[0] / k) + margin, min_tile, max_tile)) + 1,
        )
        rows = range(
            int(_clamp(math.floor(view_min[1] / k) - margin, min_tile, max_tile)),
            int(_clamp(math.floor(view_max[1] / k) + margin, min_tile, max_tile)) + 1,
        )

        visible: list[Tile] = []
        hidden: list[Tile] = []
        skipped = 0
        for y in rows:
            for x in cols:
                if config.skip_null_island and self.is_near_null_island(x, y, z):
                    skipped += 1
                    continue

                # still world pixel coordinates
                tile_min = (x * tile_size, y * tile_size)
                tile_max = ((x + 1) * tile_size, (y + 1) * tile_size)
                px_extent = Extent(tile_min, tile_max)
                is_visible = view_extent.intersects(px_extent)

                # pixel y grows downward, latitude grows upward
                wgs84_min = world_projection.invert((tile_min[0], tile_max[1]))
                wgs84_max = world_projection.invert((tile_max[0], tile_min[1]))

                tile = Tile(
                    id=tile_id(x, y, z),
                    xyz=(x, y, z),
                    px_extent=px_extent,
                    wgs84_extent=Extent(wgs84_min, wgs84_max),
                    is_visible=is_visible,
                )
                if is_visible:
                    visible.append(tile)
                else:
                    hidden.append(tile)

        # visible tiles are prepended as they are found, margin tiles appended
        visible.reverse()

        logger.debug(
            'get_tiles: z=%d (%.3f) cols=%s rows=%s visible=%d margin=%d skipped=%d',
            z,
            z_frac,
            cols,
            rows,
            len(visible),
            len(hidden),
            skipped,
        )
        return TileResult(tiles=visible + hidden)

    def get_geojson(self, tile_result: TileResult) -> dict[str, Any]:
        """GeoJSON FeatureCollection of the tile grid, for debugging."""
        return tiles_to_geojson(tile_result)

    @staticmethod
    def is_near_null_island(x: int, y: int, z: int) -> bool:
        """
        Test whether tile x,y,z is near [0,0] (Null Island).

        Only from z7: the tiles around the center of the map within about
        2.8 degrees of [0,0], i.e. 63..64 on both axes at z7, 126..129 at z8.

            +---------+---------+
            | 63,63,7 | 64,63,7 |
            +-------[0,0]-------+
            | 63,64,7 | 64,64,7 |
            +---------+---------+
        """
        if z < NULL_ISLAND_MIN_ZOOM:
            return False
        center = 2 ** (z - 1)
        width = 2 ** (z - NULL_ISLAND_SPAN_ZOOM)
        lo = center - width // 2
        hi = center + width // 2 - 1
        return lo <= x <= hi and lo <= y <= hi
