"""2D vector helpers over plain ``(x, y)`` tuples."""

from __future__ import annotations

import math

Vec2 = tuple[float, float]
Vec3 = tuple[int, int, int]


def vec_equal(a: Vec2, b: Vec2, epsilon: float | None = None) -> bool:
    """Compare two vectors, optionally within ``epsilon`` on each axis."""
    if epsilon:
        return abs(a[0] - b[0]) <= epsilon and abs(a[1] - b[1]) <= epsilon
    return a[0] == b[0] and a[1] == b[1]


def vec_add(a: Vec2, b: Vec2) -> Vec2:
    return a[0] + b[0], a[1] + b[1]


def vec_subtract(a: Vec2, b: Vec2) -> Vec2:
    return a[0] - b[0], a[1] - b[1]


def vec_scale(a: Vec2, n: float) -> Vec2:
    return a[0] * n, a[1] * n


def vec_floor(a: Vec2) -> Vec2:
    return math.floor(a[0]), math.floor(a[1])


def vec_interp(a: Vec2, b: Vec2, t: float) -> Vec2:
    """Linear interpolation between ``a`` (t=0) and ``b`` (t=1)."""
    return a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t


def vec_length(a: Vec2, b: Vec2 = (0.0, 0.0)) -> float:
    """Euclidean distance between two points (or the length of ``a``)."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def vec_min(a: Vec2, b: Vec2) -> Vec2:
    return min(a[0], b[0]), min(a[1], b[1])


def vec_max(a: Vec2, b: Vec2) -> Vec2:
    return max(a[0], b[0]), max(a[1], b[1])


__all__ = [
    'Vec2',
    'Vec3',
    'vec_add',
    'vec_equal',
    'vec_floor',
    'vec_interp',
    'vec_length',
    'vec_max',
    'vec_min',
    'vec_scale',
    'vec_subtract',
]
