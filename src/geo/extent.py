"""Axis-aligned bounding box in a single 2D coordinate space."""

from __future__ import annotations

from geo.vector import Vec2, vec_interp, vec_max, vec_min


class Extent:
    """
    Bounding box given by its min and max corners.

    Corners may be passed in any order: they are normalized so that
    ``min <= max`` on both axes. A single corner yields a point extent.
    Pixel and lon/lat extents use the same class, callers must not mix
    coordinate spaces in one comparison.
    """

    __slots__ = ('max', 'min')

    def __init__(self, a: Vec2 | Extent, b: Vec2 | None = None) -> None:
        if isinstance(a, Extent):
            a, b = a.min, a.max
        if b is None:
            b = a
        self.min: Vec2 = vec_min(a, b)
        self.max: Vec2 = vec_max(a, b)

    def __repr__(self) -> str:
        return f'Extent(min={self.min!r}, max={self.max!r})'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Extent):
            return NotImplemented
        return self.min == other.min and self.max == other.max

    def __hash__(self) -> int:
        return hash((self.min, self.max))

    def extend(self, other: Extent) -> Extent:
        """Return a new extent covering both this one and ``other``."""
        return Extent(vec_min(self.min, other.min), vec_max(self.max, other.max))

    def area(self) -> float:
        return (self.max[0] - self.min[0]) * (self.max[1] - self.min[1])

    def center(self) -> Vec2:
        return vec_interp(self.min, self.max, 0.5)

    def rectangle(self) -> tuple[float, float, float, float]:
        """(min_x, min_y, max_x, max_y)."""
        return self.min[0], self.min[1], self.max[0], self.max[1]

    def bbox(self) -> dict[str, float]:
        return {
            'minX': self.min[0],
            'minY': self.min[1],
            'maxX': self.max[0],
            'maxY': self.max[1],
        }

    def polygon(self) -> list[Vec2]:
        """Closed ring of the four corners, first point repeated last."""
        return [
            (self.min[0], self.min[1]),
            (self.min[0], self.max[1]),
            (self.max[0], self.max[1]),
            (self.max[0], self.min[1]),
            (self.min[0], self.min[1]),
        ]

    def contains(self, other: Extent) -> bool:
        """True if ``other`` lies entirely inside this extent (edges included)."""
        return (
            other.min[0] >= self.min[0]
            and other.min[1] >= self.min[1]
            and other.max[0] <= self.max[0]
            and other.max[1] <= self.max[1]
        )

    def intersects(self, other: Extent) -> bool:
        """True if the boxes overlap on both axes; shared edges count."""
        return (
            other.min[0] <= self.max[0]
            and other.min[1] <= self.max[1]
            and other.max[0] >= self.min[0]
            and other.max[1] >= self.min[1]
        )

    def intersection(self, other: Extent) -> Extent | None:
        if not self.intersects(other):
            return None
        return Extent(vec_max(self.min, other.min), vec_min(self.max, other.max))

    def percent_contained_in(self, other: Extent) -> float:
        """Share of this extent's area that falls inside ``other`` (0..1)."""
        area = self.area()
        if area <= 0:
            return 0.0
        overlap = self.intersection(other)
        if overlap is None:
            return 0.0
        return overlap.area() / area
