"""Boundary length of geometries with a pluggable distance function."""

from __future__ import annotations

from typing import Callable, Iterable

from .geometry import (
    Bound,
    Collection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Ring,
)

DistanceFunc = Callable[[Point, Point], float]


def _line_length(points: Iterable[Point], distance_fn: DistanceFunc) -> float:
    pts = list(points)
    return sum(distance_fn(b, a) for a, b in zip(pts, pts[1:]))


def _polygon_length(polygon: Polygon, distance_fn: DistanceFunc) -> float:
    return sum(_line_length(ring, distance_fn) for ring in polygon)


def length(g, distance_fn: DistanceFunc) -> float:
    """Return the length of the boundary of the geometry."""
    if g is None:
        return 0.0
    if isinstance(g, (Point, MultiPoint)):
        return 0.0
    if isinstance(g, (LineString, Ring)):
        return _line_length(g, distance_fn)
    if isinstance(g, MultiLineString):
        return sum(_line_length(ls, distance_fn) for ls in g)
    if isinstance(g, Polygon):
        return _polygon_length(g, distance_fn)
    if isinstance(g, MultiPolygon):
        return sum(_polygon_length(p, distance_fn) for p in g)
    if isinstance(g, Collection):
        return sum(length(c, distance_fn) for c in g)
    if isinstance(g, Bound):
        return length(g.to_ring(), distance_fn)
    raise TypeError(f"geometry type not supported: {type(g).__name__}")