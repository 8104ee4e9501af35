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
    clone,
    equal,
)


def all_geometries():
    return [
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
    ]


@pytest.mark.parametrize("geom", all_geometries())
def test_equal_self(geom):
    assert equal(geom, geom) is True


@pytest.mark.parametrize(
    "g1,g2",
    [
        (Ring(), LineString()),
        (Ring(), Polygon()),
        (Polygon(), Ring()),
        (Polygon(), Bound()),
        (Bound(), Polygon()),
    ],
)
def test_equal_ring_different_types(g1, g2):
    assert equal(g1, g2) is False


def test_equal_none_with_geometry():
    assert equal(None, Point()) is False
    assert equal(Point(), None) is False


def test_equal_unsupported_type():
    with pytest.raises(TypeError):
        equal("point", "point")


@pytest.mark.parametrize(
    "geom,dims",
    [
        (Point(), 0),
        (MultiPoint(), 0),
        (LineString(), 1),
        (MultiLineString(), 1),
        (Ring(), 2),
        (Polygon(), 2),
        (MultiPolygon(), 2),
        (Bound(), 2),
        (Collection([Point(), LineString()]), 1),
    ],
)
def test_geometry_dimensions(geom, dims):
    assert geom.dimensions() == dims


def test_empty_collection_dimensions():
    assert Collection().dimensions() == -1


def test_collection_bound():
    b = Collection(all_geometries()).bound()
    assert b.equal(Bound())


def test_geojson_types():
    assert Ring().geojson_type() == "Polygon"
    assert Bound().geojson_type() == "Polygon"
    assert Collection().geojson_type() == "GeometryCollection"
    assert MultiLineString().geojson_type() == "MultiLineString"


def test_multi_point_bound():
    mp = MultiPoint([(0.5, 0.2), (-1, 0), (1, 10), (1, 8)])
    expected = Bound(Point(-1, 0), Point(1, 10))
    assert mp.bound().equal(expected)
    assert MultiPoint().bound().is_empty()


def test_multi_point_equals():
    p1 = MultiPoint([(0.5, 0.2), (-1, 0), (1, 10)])
    p2 = MultiPoint([(0.5, 0.2), (-1, 0), (1, 10)])
    assert p1.equal(p2)

    p2[1] = Point(1, 0)
    assert not p1.equal(p2)

    p1[1] = Point(1, 0)
    p1.append(Point(0, 0))
    assert not p2.equal(p1)


def test_multi_point_clone():
    p1 = MultiPoint([(0, 0), (0.5, 0.2), (1, 0)])
    p2 = p1.clone()
    assert p2.equal(p1)
    p2.append(Point(0, 0))
    assert len(p1) == 3
    assert len(p2) == 4
    assert not p2.equal(p1)


def _square(lo, hi):
    return [[(lo, lo), (lo, hi), (hi, hi), (hi, lo), (lo, lo)]]


def test_multi_polygon_bound():
    mp = MultiPolygon([_square(0, 2), _square(1, 3)])
    assert mp.bound().equal(Bound(Point(0, 0), Point(3, 3)))


@pytest.mark.parametrize(
    "mp1,mp2,expected",
    [
        (
            MultiPolygon([_square(0, 2), _square(1, 3)]),
            MultiPolygon([_square(0, 2), _square(1, 3)]),
            True,
        ),
        (
            MultiPolygon([_square(0, 2), _square(1, 3)]),
            MultiPolygon([_square(0, 2)]),
            False,
        ),
        (
            MultiPolygon([_square(0, 2), _square(1, 3)]),
            MultiPolygon([_square(0, 2), _square(1, 2)]),
            False,
        ),
    ],
)
def test_multi_polygon_equal(mp1, mp2, expected):
    assert mp1.equal(mp2) is expected
    assert mp2.equal(mp1) is expected


def test_multi_polygon_clone():
    mp = MultiPolygon([_square(0, 2), _square(1, 3)])
    c = mp.clone()
    assert c.equal(MultiPolygon([_square(0, 2), _square(1, 3)]))
    c[0][0][0] = Point(9, 9)
    assert mp[0][0][0] == Point(0, 0)


def test_clone_none():
    assert clone(None) is None


def test_collection_clone_is_deep():
    c = Collection([LineString([(1, 2), (3, 4)]), Point(5, 6)])
    c2 = c.clone()
    assert c2.equal(c)
    c2[0].append(Point(7, 8))
    assert len(c[0]) == 2


def test_bound_extend_and_union():
    b = Bound(Point(0, 0), Point(1, 1))
    assert b.extend((2, -1)).equal(Bound(Point(0, -1), Point(2, 1)))
    assert b.extend((0.5, 0.5)) is b
    u = b.union(Bound(Point(3, 3), Point(4, 5)))
    assert u.equal(Bound(Point(0, 0), Point(4, 5)))
    assert b.union(MultiPoint().bound()).equal(b)


def test_bound_helpers():
    b = Bound(Point(0, 0), Point(1, 2))
    assert b.center() == Point(0.5, 1)
    assert b.contains((1, 2))
    assert not b.contains((1.1, 1))
    assert (b.top(), b.bottom(), b.left(), b.right()) == (2, 0, 0, 1)
    assert b.to_ring().equal(Ring([(0, 0), (1, 0), (1, 2), (0, 2), (0, 0)]))
    assert b.to_polygon().equal(
        Polygon([[(0, 0), (1, 0), (1, 2), (0, 2), (0, 0)]])
    )


def test_polygon_bound_uses_outer_ring():
    p = Polygon([[(0, 0), (4, 0), (4, 4), (0, 0)], [(10, 10), (11, 11)]])
    assert p.bound().equal(Bound(Point(0, 0), Point(4, 4)))
    assert Polygon().bound().is_empty()