"""Tests for constants module."""

import math

import pytest

from shared.constants import (
    DEFAULT_MARGIN,
    DEG_TO_RAD,
    MAX_ZOOM,
    MERCATOR_MAX_LAT_DEG,
    MIN_ZOOM,
    NULL_ISLAND_MIN_ZOOM,
    NULL_ISLAND_SPAN_ZOOM,
    RAD_TO_DEG,
    TAU,
    TILE_ID_SEPARATOR,
    TILE_SIZE,
)


class TestTileDefaults:
    def test_tile_size(self):
        assert TILE_SIZE == 256

    def test_zoom_range(self):
        assert (MIN_ZOOM, MAX_ZOOM) == (0, 24)

    def test_margin(self):
        assert DEFAULT_MARGIN == 0

    def test_tile_id_separator(self):
        assert TILE_ID_SEPARATOR == ','


class TestMercatorConstants:
    def test_tau(self):
        assert TAU == 2 * math.pi

    def test_degree_conversions_are_inverse(self):
        assert DEG_TO_RAD * RAD_TO_DEG == pytest.approx(1.0)

    def test_max_latitude(self):
        """Max Mercator latitude is where the world becomes square."""
        phi = 2 * math.atan(math.exp(math.pi)) - math.pi / 2
        assert math.degrees(phi) == pytest.approx(MERCATOR_MAX_LAT_DEG)


class TestNullIslandConstants:
    def test_span_zoom_below_min_zoom(self):
        assert NULL_ISLAND_SPAN_ZOOM < NULL_ISLAND_MIN_ZOOM
