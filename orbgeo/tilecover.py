"""Tile covers for points and bounds, and merging covers up to lower zooms."""

from __future__ import annotations

from typing import Iterable

from .geometry import Bound
from .tile import Tile, TileSet, at


def point(ll, zoom: int) -> TileSet:
    """Return the cover of a point: the single tile containing it."""
    return TileSet({at(ll, zoom)})


def multi_point(mp: Iterable, zoom: int) -> TileSet:
    """Return the set of tiles containing each of the points."""
    return TileSet(at(p, zoom) for p in mp)


def bound(b: Bound, zoom: int) -> TileSet:
    """Return every tile at the zoom that intersects the bound."""
    lo = at(b.min, zoom)
    hi = at(b.max, zoom)
    return TileSet(
        Tile(x, y, zoom)
        for x in range(lo.x, hi.x + 1)
        for y in range(hi.y, lo.y + 1)
    )


def _merge(tiles: Iterable[Tile], min_zoom: int, count: int):
    current = set(tiles)
    max_zoom = next(iter(current)).z if current else 1
    if min_zoom == max_zoom:
        return tiles

    merged = TileSet()
    for z in range(max_zoom, min_zoom, -1):
        parents = TileSet()
        remaining = set(current)
        for t in current:
            if t not in remaining:
                continue
            siblings = t.siblings()
            present = [s for s in siblings if s in remaining]
            if len(present) >= count:
                remaining.difference_update(siblings)
                if z - 1 == min_zoom:
                    merged.add(t.parent())
                else:
                    parents.add(t.parent())
            else:
                merged.update(present)
                remaining.difference_update(present)

        current = parents
        if len(current) < count:
            merged.update(current)
            break

    return merged


def merge_up(tiles: Iterable[Tile], min_zoom: int):
    """Merge tiles into their parents, down to min_zoom, when all four siblings are present.

    The tiles are expected to share one zoom level. The input is not modified.
    """
    return _merge(tiles, min_zoom, 4)


def merge_up_partial(tiles: Iterable[Tile], min_zoom: int, count: int):
    """Merge tiles into their parents, down to min_zoom, when at least count siblings are present.

    The tiles are expected to share one zoom level. The input is not modified.
    """
    return _merge(tiles, min_zoom, count)