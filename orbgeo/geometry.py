"""Planar geometry types shared by the rest of the package."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, NamedTuple, Optional, Union


class Point(NamedTuple):
    """A point in the 2D plane, usually (longitude, latitude)."""

    x: float = 0.0
    y: float = 0.0

    def geojson_type(self) -> str:
        return "Point"

    def dimensions(self) -> int:
        return 0

    def bound(self) -> "Bound":
        return Bound(self, self)

    def equal(self, other: "Point") -> bool:
        return self[0] == other[0] and self[1] == other[1]


@dataclass(frozen=True)
class Bound:
    """An axis aligned rectangle given by its minimum and maximum corners."""

    min: Point = Point()
    max: Point = Point()

    def __post_init__(self) -> None:
        object.__setattr__(self, "min", Point(*self.min))
        object.__setattr__(self, "max", Point(*self.max))

    def geojson_type(self) -> str:
        return "Polygon"

    def dimensions(self) -> int:
        return 2

    def bound(self) -> "Bound":
        return self

    def equal(self, other: "Bound") -> bool:
        return self.min.equal(other.min) and self.max.equal(other.max)

    def extend(self, point) -> "Bound":
        """Return the smallest bound containing this bound and the point."""
        point = Point(*point)
        if self.contains(point):
            return self
        return Bound(
            Point(min(self.min[0], point[0]), min(self.min[1], point[1])),
            Point(max(self.max[0], point[0]), max(self.max[1], point[1])),
        )

    def union(self, other: "Bound") -> "Bound":
        """Return the smallest bound containing both bounds."""
        if other.is_empty():
            return self
        if self.is_empty():
            return other
        return self.extend(other.min).extend(other.max)

    def center(self) -> Point:
        return Point(
            (self.min[0] + self.max[0]) / 2.0,
            (self.min[1] + self.max[1]) / 2.0,
        )

    def contains(self, point) -> bool:
        """Report whether the point lies in the bound, edges included."""
        return (
            self.min[1] <= point[1] <= self.max[1]
            and self.min[0] <= point[0] <= self.max[0]
        )

    def is_empty(self) -> bool:
        return self.min[0] > self.max[0] or self.min[1] > self.max[1]

    def to_ring(self) -> "Ring":
        return Ring(
            [
                self.min,
                Point(self.max[0], self.min[1]),
                self.max,
                Point(self.min[0], self.max[1]),
                self.min,
            ]
        )

    def to_polygon(self) -> "Polygon":
        return Polygon([self.to_ring()])

    def top(self) -> float:
        return self.max[1]

    def bottom(self) -> float:
        return self.min[1]

    def left(self) -> float:
        return self.min[0]

    def right(self) -> float:
        return self.max[0]


_EMPTY_BOUND = Bound(Point(1, 1), Point(-1, -1))


def _points_bound(points) -> Bound:
    if not points:
        return _EMPTY_BOUND
    result = Bound(points[0], points[0])
    for p in points:
        result = result.extend(p)
    return result


def _items_equal(a, b) -> bool:
    return len(a) == len(b) and all(x.equal(y) for x, y in zip(a, b))


def _union_bound(items) -> Bound:
    if not items:
        return _EMPTY_BOUND
    result = items[0].bound()
    for item in items[1:]:
        result = result.union(item.bound())
    return result


class _PointSeries(list):
    """A list of points; the base of MultiPoint, LineString and Ring."""

    def __init__(self, points: Iterable = ()) -> None:
        super().__init__(Point(*p) for p in points)


class MultiPoint(_PointSeries):
    """A set of points."""

    def geojson_type(self) -> str:
        return "MultiPoint"

    def dimensions(self) -> int:
        return 0

    def bound(self) -> Bound:
        return _points_bound(self)

    def equal(self, other) -> bool:
        return _items_equal(self, other)

    def clone(self) -> "MultiPoint":
        return MultiPoint(self)


class LineString(_PointSeries):
    """A path of connected points."""

    def geojson_type(self) -> str:
        return "LineString"

    def dimensions(self) -> int:
        return 1

    def bound(self) -> Bound:
        return _points_bound(self)

    def equal(self, other) -> bool:
        return _items_equal(self, other)

    def clone(self) -> "LineString":
        return LineString(self)


class Ring(_PointSeries):
    """A closed path of points; the boundary of a polygon."""

    def geojson_type(self) -> str:
        return "Polygon"

    def dimensions(self) -> int:
        return 2

    def bound(self) -> Bound:
        return _points_bound(self)

    def equal(self, other) -> bool:
        return _items_equal(self, other)

    def clone(self) -> "Ring":
        return Ring(self)


class _NestedSeries(list):
    """A list whose items are geometries of a single type."""

    _item: type = list

    def __init__(self, items: Iterable = ()) -> None:
        item = self._item
        super().__init__(i if isinstance(i, item) else item(i) for i in items)


class MultiLineString(_NestedSeries):
    """A set of line strings."""

    _item = LineString

    def geojson_type(self) -> str:
        return "MultiLineString"

    def dimensions(self) -> int:
        return 1

    def bound(self) -> Bound:
        return _union_bound(self)

    def equal(self, other) -> bool:
        return _items_equal(self, other)

    def clone(self) -> "MultiLineString":
        return MultiLineString(ls.clone() for ls in self)


class Polygon(_NestedSeries):
    """An outer ring followed by any number of holes."""

    _item = Ring

    def geojson_type(self) -> str:
        return "Polygon"

    def dimensions(self) -> int:
        return 2

    def bound(self) -> Bound:
        if not self:
            return _EMPTY_BOUND
        return self[0].bound()

    def equal(self, other) -> bool:
        return _items_equal(self, other)

    def clone(self) -> "Polygon":
        return Polygon(r.clone() for r in self)


class MultiPolygon(_NestedSeries):
    """A set of polygons."""

    _item = Polygon

    def geojson_type(self) -> str:
        return "MultiPolygon"

    def dimensions(self) -> int:
        return 2

    def bound(self) -> Bound:
        return _union_bound(self)

    def equal(self, other) -> bool:
        return _items_equal(self, other)

    def clone(self) -> "MultiPolygon":
        return MultiPolygon(p.clone() for p in self)


class Collection(list):
    """A list of geometries that is itself a geometry."""

    def geojson_type(self) -> str:
        return "GeometryCollection"

    def dimensions(self) -> int:
        return max((g.dimensions() for g in self if g is not None), default=-1)

    def bound(self) -> Bound:
        bounds = [g.bound() for g in self if g is not None]
        if not bounds:
            return _EMPTY_BOUND
        result = bounds[0]
        for b in bounds[1:]:
            result = result.union(b)
        return result

    def equal(self, other) -> bool:
        return len(self) == len(other) and all(
            equal(a, b) for a, b in zip(self, other)
        )

    def clone(self) -> "Collection":
        return Collection(clone(g) for g in self)


Geometry = Union[
    Point,
    MultiPoint,
    LineString,
    MultiLineString,
    Ring,
    Polygon,
    MultiPolygon,
    Bound,
    Collection,
]

_GEOMETRY_TYPES = (
    Point,
    MultiPoint,
    LineString,
    MultiLineString,
    Ring,
    Polygon,
    MultiPolygon,
    Bound,
    Collection,
)


def _check_supported(g) -> None:
    if not isinstance(g, _GEOMETRY_TYPES):
        raise TypeError(f"geometry type not supported: {type(g).__name__}")


def equal(g1: Optional[Geometry], g2: Optional[Geometry]) -> bool:
    """Report whether two geometries are of the same type with the same values."""
    if g1 is None or g2 is None:
        return g1 is g2
    _check_supported(g1)
    if type(g1) is not type(g2):
        return False
    return g1.equal(g2)


def clone(g: Optional[Geometry]) -> Optional[Geometry]:
    """Return a deep copy of the geometry."""
    if g is None:
        return None
    _check_supported(g)
    if isinstance(g, (Point, Bound)):
        return g
    return g.clone()