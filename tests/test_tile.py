import pytest

from orbgeo.geometry import Bound, Point, Polygon
from orbgeo.mercator import CITIES, EPSILON
from orbgeo.tile import (
    Tile,
    TileSet,
    at,
    children_in_zoom_range,
    fraction,
    from_quadkey,
    tiles_to_feature_collection,
)


@pytest.mark.parametrize("i", range(30))
def test_quadkey_round_trip(i):
    tile = Tile(i, i, i)
    assert from_quadkey(tile.quadkey(), i) == tile


def test_valid():
    assert not Tile(10, 10, 1).valid()
    assert Tile(15, 15, 4).valid()
    assert not Tile(16, 16, 4).valid()


def test_at():
    b = at((0, 0), 28).bound()
    assert b.top() == 0
    assert b.left() == 0

    tile = at((-87.65005229999997, 41.850033), 20)
    assert (tile.x, tile.y) == (268988, 389836)

    tile = at((-87.65005229999997, 41.850033), 28)
    assert (tile.x, tile.y) == (68861112, 99798110)

    for lat, lng in CITIES:
        c = at((lng, lat), 31).center()
        assert abs(c[1] - lat) <= EPSILON
        assert abs(c[0] - lng) <= EPSILON

    assert at((0, 89.9), 30).y == 0
    assert at((0, -89.9), 30).y == (1 << 30) - 1


def test_tile_center_level_30():
    for lat, lng in CITIES:
        p = at((lng, lat), 30).center()
        assert abs(p[1] - lat) <= EPSILON
        assert abs(p[0] - lng) <= EPSILON


def test_tile_bound():
    bound = Tile(7, 8, 9).bound()
    level = 9 + 5
    factor = 5

    assert bound.contains(Tile((7 << factor) + 1, (8 << factor) + 1, level).center())
    assert not bound.contains(Tile((7 << factor) - 1, (8 << factor) - 1, level).center())
    assert bound.contains(Tile((8 << factor) - 1, (9 << factor) - 1, level).center())
    assert not bound.contains(Tile((8 << factor) + 1, (9 << factor) + 1, level).center())

    b = Tile(0, 0, 0).bound()
    assert b.min[0] == -180
    assert b.max[0] == 180
    assert b.min[1] == pytest.approx(-85.05112877980659, abs=1e-12)
    assert b.max[1] == pytest.approx(85.05112877980659, abs=1e-12)


def test_tile_bound_buffer_grows():
    tile = Tile(4, 4, 4)
    plain = tile.bound()
    buffered = tile.bound(1)
    assert buffered.min[0] < plain.min[0]
    assert buffered.max[0] > plain.max[0]
    assert buffered.contains(plain.min) and buffered.contains(plain.max)


def test_fraction():
    assert fraction((-180, 0), 30)[0] == 0
    assert fraction((180, 0), 30)[0] == 1 << 30
    assert fraction((360, 0), 30)[0] == (1 << 30) + (1 << 29)


def test_contains():
    tile = Tile(2, 2, 10)
    assert tile.contains(tile)
    for c in tile.children():
        assert tile.contains(c)
    assert not tile.contains(tile.parent())


@pytest.mark.parametrize(
    "tile, start, end, expected",
    [
        (Tile(0, 0, 0), 0, 0, [Tile(0, 0, 0)]),
        (
            Tile(0, 0, 0),
            0,
            1,
            [Tile(0, 0, 0), Tile(0, 0, 1), Tile(0, 1, 1), Tile(1, 0, 1), Tile(1, 1, 1)],
        ),
        (
            Tile(0, 0, 0),
            1,
            1,
            [Tile(0, 0, 1), Tile(0, 1, 1), Tile(1, 0, 1), Tile(1, 1, 1)],
        ),
        (
            Tile(0, 0, 0),
            2,
            2,
            [Tile(x, y, 2) for x in range(4) for y in range(4)],
        ),
    ],
)
def test_children_in_zoom_range(tile, start, end, expected):
    assert children_in_zoom_range(tile, start, end) == expected


def test_children_in_zoom_range_start_after_end():
    with pytest.raises(ValueError):
        children_in_zoom_range(Tile(0, 0, 0), 10, 8)


def test_children_in_zoom_range_tile_zoom_after_start():
    with pytest.raises(ValueError):
        children_in_zoom_range(Tile(0, 0, 10), 9, 12)


def test_zoom_range():
    lo, hi = Tile(4, 4, 5).zoom_range(3)
    assert lo == Tile(1, 1, 3)
    assert hi == Tile(1, 1, 3)

    lo, hi = Tile(4, 2, 5).zoom_range(7)
    assert lo == Tile(16, 8, 7)
    assert hi == Tile(19, 11, 7)


def test_shared_parent():
    p = (-122.2711, 37.8044)
    base = at(p, 15)
    expected = base

    one = Tile((base.x << 10) | 0x25A, (base.y << 10) | 0x14B, 25)
    two = Tile((base.x << 6) | 0x15, (base.y << 6) | 0x26, 21)

    assert one.shared_parent(two) == expected
    assert two.shared_parent(one) == expected

    children = one.children()
    assert children[1].shared_parent(children[2]) == one


def test_children():
    children = Tile(1, 1, 1).children()
    assert children == [Tile(2, 2, 2), Tile(3, 2, 2), Tile(3, 3, 2), Tile(2, 3, 2)]


def test_siblings():
    siblings = Tile(4, 7, 7).siblings()
    assert siblings == [Tile(4, 6, 7), Tile(5, 6, 7), Tile(5, 7, 7), Tile(4, 7, 7)]


def test_parent_of_root_is_root():
    assert Tile(0, 0, 0).parent() == Tile(0, 0, 0)


def test_tile_set_merge():
    s = TileSet({Tile(0, 0, 1)})
    s.merge(TileSet({Tile(1, 0, 1), Tile(0, 0, 1)}))
    assert s == {Tile(0, 0, 1), Tile(1, 0, 1)}


def test_tile_set_to_feature_collection():
    fc = TileSet({Tile(0, 0, 0)}).to_feature_collection()
    assert fc.type == "FeatureCollection"
    assert len(fc.features) == 1
    geom = fc.features[0].geometry
    assert isinstance(geom, Polygon)
    assert geom.bound().equal(Tile(0, 0, 0).bound())


def test_tiles_to_feature_collection_keeps_order():
    tiles = [Tile(0, 0, 1), Tile(1, 1, 1)]
    fc = tiles_to_feature_collection(tiles)
    bounds = [f.geometry.bound() for f in fc.features]
    assert bounds[0].equal(tiles[0].bound())
    assert bounds[1].equal(tiles[1].bound())
    assert isinstance(bounds[0], Bound)
    assert Point(*bounds[0].center()) == tiles[0].center()