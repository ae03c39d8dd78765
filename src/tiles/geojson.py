"""Debug GeoJSON export of a tile grid."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from tiles.tiler import TileResult

logger = logging.getLogger(__name__)


def tiles_to_geojson(tile_result: TileResult) -> dict[str, Any]:
    """FeatureCollection with one Polygon feature per tile (wgs84 extent)."""
    features = [
        {
            'type': 'Feature',
            'properties': {'id': tile.id, 'name': tile.id},
            'geometry': {
                'type': 'Polygon',
                'coordinates': [
                    [list(point) for point in tile.wgs84_extent.polygon()],
                ],
            },
        }
        for tile in tile_result.tiles
    ]
    return {'type': 'FeatureCollection', 'features': features}


def dump_geojson(tile_result: TileResult, path: Path | str) -> Path:
    """Write the tile grid as a GeoJSON file, for viewing in a GIS."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(tiles_to_geojson(tile_result), ensure_ascii=False),
        encoding='utf-8',
    )
    logger.info('Tile grid GeoJSON written: %s (%d tiles)', path, len(tile_result.tiles))
    return path
