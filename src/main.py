"""Command-line entry point: list the tiles covering a map view."""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from domain.models import TilerConfig
from domain.profiles import load_profile
from geo.projection import projection_for_view
from shared.constants import LOG_FORMAT
from tiles.geojson import dump_geojson
from tiles.tiler import Tiler

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure console logging (stderr, so stdout stays machine-readable)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='tilegrid - XYZ tiles covering a map viewport',
    )
    parser.add_argument('--lon', type=float, default=0.0, help='View center longitude')
    parser.add_argument('--lat', type=float, default=0.0, help='View center latitude')
    parser.add_argument(
        '--zoom', type=float, required=True, help='View zoom (may be fractional)'
    )
    parser.add_argument('--width', type=float, required=True, help='Viewport width, px')
    parser.add_argument('--height', type=float, required=True, help='Viewport height, px')
    parser.add_argument('--profile', help='TOML profile name or path with tiler settings')
    parser.add_argument('--tile-size', type=int, help='Tile size, px')
    parser.add_argument('--margin', type=int, help='Extra tile rows/columns per side')
    parser.add_argument('--min-zoom', type=int, help='Lowest zoom to return tiles for')
    parser.add_argument('--max-zoom', type=int, help='Highest zoom to return tiles for')
    parser.add_argument(
        '--skip-null-island',
        action='store_true',
        default=None,
        help='Leave out tiles around lon/lat 0,0 (z7 and above)',
    )
    parser.add_argument('--geojson', type=Path, help='Write the tile grid as GeoJSON')
    parser.add_argument('--json', action='store_true', help='Print tiles as JSON')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    return parser


def resolve_config(args: argparse.Namespace) -> TilerConfig:
    """Profile (or defaults) overridden by explicit command-line options."""
    config = load_profile(args.profile) if args.profile else TilerConfig()
    overrides = {
        'tile_size': args.tile_size,
        'margin': args.margin,
        'zoom_min': args.min_zoom,
        'zoom_max': args.max_zoom,
        'skip_null_island': args.skip_null_island,
    }
    changes = {k: v for k, v in overrides.items() if v is not None}
    if not changes:
        return config
    return TilerConfig.model_validate({**config.model_dump(), **changes})


def main(argv: list[str] | None = None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = resolve_config(args)
    except FileNotFoundError as e:
        logger.error('%s', e)
        return 2
    except ValidationError as e:
        logger.error('Invalid tiler settings: %s', e)
        return 2

    tiler = Tiler(config)
    projection = projection_for_view(
        (args.lon, args.lat),
        args.zoom,
        args.width,
        args.height,
        config.tile_size,
    )
    result = tiler.get_tiles(projection)
    logger.info(
        'View %.5f,%.5f z%.2f %gx%g px: %d tiles (%d visible)',
        args.lon,
        args.lat,
        args.zoom,
        args.width,
        args.height,
        len(result),
        len(result.visible),
    )

    if args.geojson:
        dump_geojson(result, args.geojson)

    if args.json:
        payload = [
            {
                'id': tile.id,
                'xyz': list(tile.xyz),
                'pxExtent': tile.px_extent.rectangle(),
                'wgs84Extent': tile.wgs84_extent.rectangle(),
                'isVisible': tile.is_visible,
            }
            for tile in result
        ]
        print(json.dumps(payload))
    else:
        for tile in result:
            print(f'{tile.id}\t{"visible" if tile.is_visible else "margin"}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
