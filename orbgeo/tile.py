"""Web mercator map tiles and sets of tiles."""

from __future__ import annotations

import math
from typing import Iterable, NamedTuple

from .geojson_feature import FeatureCollection, new_feature, new_feature_collection
from .geometry import Bound, Point
from .mercator import to_geo

_MASK = 0xFFFFFFFF


def _shl(value: int, shift: int) -> int:
    return (value << shift) & _MASK


class Tile(NamedTuple):
    """An x, y, z web mercator tile."""

    x: int
    y: int
    z: int

    def valid(self) -> bool:
        """Report whether x and y lie within the range for the zoom."""
        max_index = _shl(1, self.z) if self.z < 32 else 0
        return self.x < max_index and self.y < max_index

    def bound(self, tile_buffer: float = 0.0) -> Bound:
        """Return the geo bound, optionally grown by tile_buffer tiles each way."""
        x = float(self.x)
        y = float(self.y)

        miny = y - tile_buffer
        if miny < 0:
            miny = 0.0
        lon1, lat1 = to_geo(x - tile_buffer, miny, self.z)

        maxtiles = float(_shl(1, self.z))
        maxy = y + 1 + tile_buffer
        if maxy > maxtiles:
            maxy = maxtiles
        lon2, lat2 = to_geo(x + 1 + tile_buffer, maxy, self.z)

        return Bound(Point(lon1, lat2), Point(lon2, lat1))

    def center(self) -> Point:
        return self.bound(0).center()

    def contains(self, other: "Tile") -> bool:
        """Report whether the other tile lies within (or equals) this one."""
        if other.z < self.z:
            return False
        return self == other._to_zoom(self.z)

    def parent(self) -> "Tile":
        if self.z == 0:
            return self
        return Tile(self.x >> 1, self.y >> 1, self.z - 1)

    def shared_parent(self, other: "Tile") -> "Tile":
        """Return the smallest tile containing both tiles."""
        a, b = self, other
        if a.z < b.z:
            b = b._to_zoom(a.z)
        elif a.z > b.z:
            a = a._to_zoom(b.z)

        if a == b:
            return a

        shift = max((a.x ^ b.x).bit_length(), (a.y ^ b.y).bit_length())
        return Tile(a.x >> shift, a.y >> shift, a.z - shift)

    def children(self) -> list["Tile"]:
        """Return the four children, clockwise from the top left."""
        x, y, z = _shl(self.x, 1), _shl(self.y, 1), self.z + 1
        return [
            Tile(x, y, z),
            Tile((x + 1) & _MASK, y, z),
            Tile((x + 1) & _MASK, (y + 1) & _MASK, z),
            Tile(x, (y + 1) & _MASK, z),
        ]

    def siblings(self) -> list["Tile"]:
        """Return the four tiles sharing this tile's parent."""
        return self.parent().children()

    def quadkey(self) -> int:
        result = 0
        for i in range(self.z):
            result |= (self.x & (1 << i)) << i
            result |= (self.y & (1 << i)) << (i + 1)
        return result & 0xFFFFFFFFFFFFFFFF

    def zoom_range(self, zoom: int) -> tuple["Tile", "Tile"]:
        """Return the min and max tiles covering this tile at the zoom."""
        if zoom < self.z:
            t = self._to_zoom(zoom)
            return t, t
        offset = zoom - self.z
        return (
            Tile(_shl(self.x, offset), _shl(self.y, offset), zoom),
            Tile(
                (_shl(self.x + 1, offset) - 1) & _MASK,
                (_shl(self.y + 1, offset) - 1) & _MASK,
                zoom,
            ),
        )

    def _to_zoom(self, zoom: int) -> "Tile":
        if zoom > self.z:
            shift = zoom - self.z
            return Tile(_shl(self.x, shift), _shl(self.y, shift), zoom)
        shift = self.z - zoom
        return Tile(self.x >> shift, self.y >> shift, zoom)


def tiles_to_feature_collection(tiles: Iterable[Tile]) -> FeatureCollection:
    """Return a feature collection with one polygon per tile."""
    fc = new_feature_collection()
    for t in tiles:
        fc.append(new_feature(t.bound().to_polygon()))
    return fc


class TileSet(set):
    """A set of tiles."""

    def to_feature_collection(self) -> FeatureCollection:
        return tiles_to_feature_collection(self)

    def merge(self, other: Iterable[Tile]) -> None:
        """Add every tile of the other set to this one."""
        self.update(other)


def fraction(point, zoom: int) -> Point:
    """Return the precise fractional tile position of the point at the zoom."""
    maxtiles = float(_shl(1, zoom))

    x = (point[0] / 360.0 + 0.5) * maxtiles
    if point[1] < -85.0511:
        y = maxtiles - 1
    elif point[1] > 85.0511:
        y = 0.0
    else:
        siny = math.sin(point[1] * math.pi / 180.0)
        lat = 0.5 + 0.5 * math.log((1.0 + siny) / (1.0 - siny)) / (-2 * math.pi)
        y = lat * maxtiles
    return Point(x, y)


def at(point, zoom: int) -> Tile:
    """Return the tile containing the point at the zoom."""
    f = fraction(point, zoom)
    return Tile(int(f[0]) & _MASK, int(f[1]) & _MASK, zoom)


def from_quadkey(key: int, zoom: int) -> Tile:
    """Create the tile for the quadkey at the zoom."""
    x = y = 0
    for i in range(zoom):
        x |= (key & (1 << (2 * i))) >> i
        y |= (key & (1 << (2 * i + 1))) >> (i + 1)
    return Tile(x & _MASK, y & _MASK, zoom)


def children_in_zoom_range(tile: Tile, zoom_start: int, zoom_end: int) -> list[Tile]:
    """Return all descendant tiles at zooms zoom_start..zoom_end inclusive.

    Raises ValueError if zoom_start > zoom_end or tile.z > zoom_start.
    """
    if not zoom_start <= zoom_end:
        raise ValueError("zoom_start must be <= zoom_end")
    if not tile.z <= zoom_start:
        raise ValueError("tile.z must be <= zoom_start")

    result = []
    for d in range(zoom_start - tile.z, zoom_end - tile.z + 1):
        x_start = _shl(tile.x, d)
        y_start = _shl(tile.y, d)
        dim = 1 << d
        for x in range(x_start, x_start + dim):
            for y in range(y_start, y_start + dim):
                result.append(Tile(x, y, tile.z + d))
    return result