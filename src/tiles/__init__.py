"""Tile grid computation.

This module provides:
- Tiler: finds the XYZ tiles covering a projection's viewport
- Tile / TileResult: per-tile extents and visibility, visible tiles first
- tiles_to_geojson / dump_geojson: debug export of a tile grid
"""

from tiles.geojson import dump_geojson, tiles_to_geojson
from tiles.tiler import Tile, Tiler, TileResult, tile_id

__all__ = [
    'Tile',
    'TileResult',
    'Tiler',
    'dump_geojson',
    'tile_id',
    'tiles_to_geojson',
]
