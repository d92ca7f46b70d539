"""
Integer grid primitives used for room footprints and dungeon extents.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple, Union

import numpy as np


@dataclass(frozen=True, order=True)
class Vec2I:
    """An integer (x, y) grid cell."""
    x: int
    y: int

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


PointLike = Union[Vec2I, Tuple[int, int]]


def to_vec(point: PointLike) -> Vec2I:
    """Coerce an (x, y) tuple or Vec2I into a Vec2I."""
    if isinstance(point, Vec2I):
        return point
    x, y = point
    return Vec2I(int(x), int(y))


@dataclass(frozen=True)
class Rect2I:
    """
    Axis-aligned integer rectangle.

    ``x``/``y`` is the minimum corner; ``width``/``height`` span to the
    maximum corner, so a rectangle built from extremes (0, 1)-(5, 4) has
    width 5 and height 3 and contains both extreme cells.
    """
    x: int
    y: int
    width: int
    height: int

    @classmethod
    def from_extremes(cls, min_x: int, min_y: int, max_x: int, max_y: int) -> 'Rect2I':
        return cls(min_x, min_y, max_x - min_x, max_y - min_y)

    @classmethod
    def bounding(cls, points: Iterable[PointLike]) -> 'Rect2I':
        """Smallest rectangle containing all points. Raises ValueError if empty."""
        pts = np.array([to_vec(p).as_tuple() for p in points], dtype=np.int64)
        if pts.size == 0:
            raise ValueError("Cannot compute bounds of an empty point set")
        min_x, min_y = pts.min(axis=0)
        max_x, max_y = pts.max(axis=0)
        return cls.from_extremes(int(min_x), int(min_y), int(max_x), int(max_y))

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def contains(self, point: PointLike) -> bool:
        p = to_vec(point)
        return self.x <= p.x <= self.right and self.y <= p.y <= self.bottom
