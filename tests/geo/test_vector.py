"""Tests for geo.vector module."""

import pytest

from geo.vector import (
    vec_add,
    vec_equal,
    vec_floor,
    vec_interp,
    vec_length,
    vec_max,
    vec_min,
    vec_scale,
    vec_subtract,
)


class TestVectorHelpers:
    def test_equal_exact(self):
        assert vec_equal((1, 2), (1, 2))
        assert not vec_equal((1, 2), (1, 2.0001))

    def test_equal_epsilon(self):
        assert vec_equal((1, 2), (1, 2.0001), epsilon=1e-3)

    def test_add_subtract(self):
        assert vec_add((1, 2), (3, 4)) == (4, 6)
        assert vec_subtract((1, 2), (3, 4)) == (-2, -2)

    def test_scale(self):
        assert vec_scale((1, -2), 3) == (3, -6)

    def test_floor(self):
        assert vec_floor((1.7, -0.2)) == (1, -1)

    def test_interp(self):
        assert vec_interp((0, 0), (10, 20), 0.25) == (2.5, 5)

    def test_length(self):
        assert vec_length((3, 4)) == pytest.approx(5)
        assert vec_length((4, 6), (1, 2)) == pytest.approx(5)

    def test_min_max(self):
        assert vec_min((1, 5), (3, 2)) == (1, 2)
        assert vec_max((1, 5), (3, 2)) == (3, 5)
