"""Geometry primitives for level previews.

This module holds the immutable data model produced by the loader
(points, polygons, canvas size, origin offset and the level itself) plus
the point transform that moves a source coordinate into screen space.

Source polygon data is written in a Y-up mathematical convention while
the preview surface is Y-down, so every point has its vertical component
negated before the origin offset is added.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import numpy as np

from .errors import EmptyPolygonError


@dataclass(frozen=True)
class Point:
    """Integer screen-space point."""

    x: int
    y: int

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


@dataclass(frozen=True)
class CanvasSize:
    """Pixel dimensions of the preview surface."""

    width: int
    height: int


@dataclass(frozen=True)
class OriginOffset:
    """Translation applied to every transformed point."""

    dx: int
    dy: int


@dataclass(frozen=True)
class Polygon:
    """Ordered outline of a collision shape.

    The order of ``points`` defines the edge sequence; an implicit
    closing edge runs from the last point back to the first.
    """

    points: Tuple[Point, ...]

    def __init__(self, points: Iterable[Point]) -> None:
        points = tuple(points)
        if not points:
            raise EmptyPolygonError("A polygon must contain at least one point.")
        object.__setattr__(self, "points", points)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def closed_points(self) -> Tuple[Point, ...]:
        """Return the points with the first point repeated at the end."""

        return self.points + (self.points[0],)

    def as_array(self) -> np.ndarray:
        """Return the points as an ``(n, 2)`` integer array."""

        return np.array([p.as_tuple() for p in self.points], dtype=np.int64)


@dataclass(frozen=True)
class Level:
    """Static collision geometry for one level."""

    polygons: Tuple[Polygon, ...]
    size: CanvasSize

    @property
    def point_count(self) -> int:
        return sum(len(polygon) for polygon in self.polygons)

    def bounds(self) -> Optional[Tuple[int, int, int, int]]:
        """Return ``(min_x, min_y, max_x, max_y)`` over all points.

        ``None`` is returned for a level without polygons.
        """

        if not self.polygons:
            return None
        coords = np.vstack([polygon.as_array() for polygon in self.polygons])
        min_x, min_y = coords.min(axis=0)
        max_x, max_y = coords.max(axis=0)
        return int(min_x), int(min_y), int(max_x), int(max_y)


def to_screen_point(x: float, y: float, offset: OriginOffset) -> Point:
    """Truncate a source coordinate toward zero and move it to screen space.

    The result is ``(trunc(x) + dx, -trunc(y) + dy)``.
    """

    return Point(math.trunc(x) + offset.dx, -math.trunc(y) + offset.dy)
