import math

import pytest

from orbgeo.geometry import (
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
from orbgeo.length import length


def euclid(a, b):
    return math.hypot(a[0] - b[0], a[1] - b[1])


@pytest.mark.parametrize(
    "geom",
    [
        None,
        Point(),
        MultiPoint(),
        LineString(),
        MultiLineString(),
        Ring(),
        Polygon(),
        MultiPolygon(),
        Bound(),
        Collection(),
        Collection([Collection([Point()])]),
    ],
)
def test_length_of_empty_geometries(geom):
    assert length(geom, euclid) == 0


def test_line_string_length():
    ls = LineString([(0, 0), (3, 0), (3, 4), (0, 0)])
    assert length(ls, euclid) == 12


def test_multi_line_string_length():
    mls = MultiLineString(
        [[(0, 0), (3, 0), (3, 4), (0, 0)], [(5, 0), (5, 7)]]
    )
    assert length(mls, euclid) == 19


def test_polygon_length():
    p = Polygon([[(0, 0), (3, 0), (3, 4), (0, 0)]])
    assert length(p, euclid) == 12


def test_multi_polygon_length():
    mp = MultiPolygon(
        [
            [[(0, 0), (3, 0), (3, 4), (0, 0)]],
            [[(5, 0), (8, 0), (8, 4), (5, 0)]],
        ]
    )
    assert length(mp, euclid) == 24


def test_bound_length_is_perimeter():
    assert length(Bound(Point(0, 0), Point(2, 3)), euclid) == 10


def test_unsupported_type():
    with pytest.raises(TypeError):
        length("line", euclid)