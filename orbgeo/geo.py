"""Measurements on geometries whose coordinates are longitude/latitude degrees."""

from __future__ import annotations

import math
from typing import Iterator

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
from .length import length as _length

EARTH_RADIUS = 6378137.0  # meters

_METERS_PER_DEGREE_LAT = 111131.75


def _deg2rad(d: float) -> float:
    return d * math.pi / 180.0


def _rad2deg(r: float) -> float:
    return 180.0 * r / math.pi


_MIN_LATITUDE = _deg2rad(-90)
_MAX_LATITUDE = _deg2rad(90)
_MIN_LONGITUDE = _deg2rad(-180)
_MAX_LONGITUDE = _deg2rad(180)


# ---------------------------------------------------------------- area


def _ring_triples(n: int) -> Iterator[tuple[int, int, int]]:
    """Index triples over a ring of n points, wrapping to close it implicitly."""
    for i in range(n):
        if i == n - 3:
            yield n - 3, n - 2, 0
        elif i == n - 2:
            yield n - 2, 0, 0
        elif i == n - 1:
            yield 0, 0, 1
        else:
            yield i, i + 1, i + 2


def _ring_area(ring) -> float:
    if len(ring) < 3:
        return 0.0
    n = len(ring)
    if tuple(ring[0]) != tuple(ring[-1]):
        n += 1

    total = sum(
        (_deg2rad(ring[hi][0]) - _deg2rad(ring[lo][0]))
        * math.sin(_deg2rad(ring[mi][1]))
        for lo, mi, hi in _ring_triples(n)
    )
    return -total * EARTH_RADIUS * EARTH_RADIUS / 2


def _polygon_area(polygon) -> float:
    if not polygon:
        return 0.0
    outer = abs(_ring_area(polygon[0]))
    return outer - sum(abs(_ring_area(r)) for r in polygon[1:])


def area(g) -> float:
    """Return the area of the geometry on the earth in square meters."""
    if g is None:
        return 0.0
    if isinstance(g, (Point, MultiPoint, LineString, MultiLineString)):
        return 0.0
    if isinstance(g, Ring):
        return abs(_ring_area(g))
    if isinstance(g, Polygon):
        return _polygon_area(g)
    if isinstance(g, MultiPolygon):
        return sum(_polygon_area(p) for p in g)
    if isinstance(g, Collection):
        return sum(area(c) for c in g)
    if isinstance(g, Bound):
        return area(g.to_ring())
    raise TypeError(f"geometry type not supported: {type(g).__name__}")


def signed_area(ring) -> float:
    """Return the signed area of the ring; negative when clockwise.

    The ring is closed implicitly if its last point differs from its first.
    """
    return _ring_area(ring)


# ---------------------------------------------------------------- bounds


def new_bound_around_point(center, distance: float) -> Bound:
    """Return a bound around the center point reaching distance meters out."""
    rad_dist = distance / EARTH_RADIUS
    rad_lat = _deg2rad(center[1])
    rad_lon = _deg2rad(center[0])
    min_lat = rad_lat - rad_dist
    max_lat = rad_lat + rad_dist

    if min_lat > _MIN_LATITUDE and max_lat < _MAX_LATITUDE:
        delta_lon = math.asin(math.sin(rad_dist) / math.cos(rad_lat))
        min_lon = rad_lon - delta_lon
        if min_lon < _MIN_LONGITUDE:
            min_lon += 2 * math.pi
        max_lon = rad_lon + delta_lon
        if max_lon > _MAX_LONGITUDE:
            max_lon -= 2 * math.pi
    else:
        min_lat = max(min_lat, _MIN_LATITUDE)
        max_lat = min(max_lat, _MAX_LATITUDE)
        min_lon = _MIN_LONGITUDE
        max_lon = _MAX_LONGITUDE

    return Bound(
        Point(_rad2deg(min_lon), _rad2deg(min_lat)),
        Point(_rad2deg(max_lon), _rad2deg(max_lat)),
    )


def bound_pad(b: Bound, meters: float) -> Bound:
    """Return the bound expanded in every direction by the given meters."""
    dy = meters / _METERS_PER_DEGREE_LAT
    dx = dy / math.cos(_deg2rad(b.max[1]))
    dx = max(dx, dy / math.cos(_deg2rad(b.min[1])))

    return Bound(
        Point(max(b.min[0] - dx, -180), max(b.min[1] - dy, -90)),
        Point(min(b.max[0] + dx, 180), min(b.max[1] + dy, 90)),
    )


def bound_height(b: Bound) -> float:
    """Return the approximate height of the bound in meters."""
    return _METERS_PER_DEGREE_LAT * (b.max[1] - b.min[1])


def bound_width(b: Bound) -> float:
    """Return the approximate width in meters across the middle of the bound."""
    c = (b.min[1] + b.max[1]) / 2.0
    return distance(Point(b.min[0], c), Point(b.max[0], c))


# ---------------------------------------------------------------- distance


def distance(p1, p2) -> float:
    """Return the distance in meters using an equirectangular approximation."""
    d_lat = _deg2rad(p1[1] - p2[1])
    d_lon = abs(_deg2rad(p1[0] - p2[0]))
    if d_lon > math.pi:
        d_lon = 2 * math.pi - d_lon

    x = d_lon * math.cos(_deg2rad((p1[1] + p2[1]) / 2.0))
    return math.sqrt(d_lat * d_lat + x * x) * EARTH_RADIUS


def distance_haversine(p1, p2) -> float:
    """Return the distance in meters using the haversine formula."""
    d_lat = _deg2rad(p1[1] - p2[1])
    d_lon = _deg2rad(p1[0] - p2[0])

    d_lat_sin = math.sin(d_lat / 2)
    d_lon_sin = math.sin(d_lon / 2)
    a = (
        d_lat_sin * d_lat_sin
        + math.cos(_deg2rad(p2[1])) * math.cos(_deg2rad(p1[1])) * d_lon_sin * d_lon_sin
    )
    return 2.0 * EARTH_RADIUS * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def bearing(from_point, to_point) -> float:
    """Return the initial heading in degrees to travel from one point to another."""
    d_lon = _deg2rad(to_point[0] - from_point[0])
    from_lat = _deg2rad(from_point[1])
    to_lat = _deg2rad(to_point[1])

    y = math.sin(d_lon) * math.cos(to_lat)
    x = math.cos(from_lat) * math.sin(to_lat) - math.sin(from_lat) * math.cos(
        to_lat
    ) * math.cos(d_lon)
    return _rad2deg(math.atan2(y, x))


def midpoint(p, p2) -> Point:
    """Return the half-way point along the great circle between two points."""
    d_lon = _deg2rad(p2[0] - p[0])
    a_lat = _deg2rad(p[1])
    b_lat = _deg2rad(p2[1])

    x = math.cos(b_lat) * math.cos(d_lon)
    y = math.cos(b_lat) * math.sin(d_lon)

    lon = _deg2rad(p[0]) + math.atan2(y, math.cos(a_lat) + x)
    lat = math.atan2(
        math.sin(a_lat) + math.sin(b_lat),
        math.sqrt((math.cos(a_lat) + x) * (math.cos(a_lat) + x) + y * y),
    )
    return Point(_rad2deg(lon), _rad2deg(lat))


def point_at_bearing_and_distance(p, bearing: float, distance: float) -> Point:
    """Return the point reached by travelling distance meters on a bearing."""
    a_lat = _deg2rad(p[1])
    a_lon = _deg2rad(p[0])
    bearing_rad = _deg2rad(bearing)
    ratio = distance / EARTH_RADIUS

    b_lat = math.asin(
        math.sin(a_lat) * math.cos(ratio)
        + math.cos(a_lat) * math.sin(ratio) * math.cos(bearing_rad)
    )
    b_lon = a_lon + math.atan2(
        math.sin(bearing_rad) * math.sin(ratio) * math.cos(a_lat),
        math.cos(ratio) - math.sin(a_lat) * math.sin(b_lat),
    )
    return Point(_rad2deg(b_lon), _rad2deg(b_lat))


def point_at_distance_along_line(ls, distance: float) -> tuple[Point, float]:
    """Return the point distance meters along the line and the bearing there.

    Raises ValueError for an empty line.
    """
    if not ls:
        raise ValueError("empty LineString")
    if distance < 0 or len(ls) == 1:
        return Point(*ls[0]), 0.0

    travelled = 0.0
    for start, end in zip(ls, ls[1:]):
        segment = distance_haversine(start, end)
        remaining = distance - travelled
        if remaining < segment:
            heading = bearing(start, end)
            return point_at_bearing_and_distance(start, heading, remaining), heading
        travelled += segment

    return Point(*ls[-1]), bearing(ls[-2], ls[-1])


# ---------------------------------------------------------------- length


def length(g) -> float:
    """Return the boundary length in meters using the fast distance function."""
    return _length(g, distance)


def length_haversine(g) -> float:
    """Return the boundary length in meters using the haversine formula."""
    return _length(g, distance_haversine)