"""Geo module - Web Mercator projection, extents and vector helpers."""

from .extent import Extent
from .mercator import geo_scale_to_zoom, geo_zoom_to_scale
from .projection import Projection, projection_for_view

__all__ = [
    'Extent',
    'Projection',
    'geo_scale_to_zoom',
    'geo_zoom_to_scale',
    'projection_for_view',
]
