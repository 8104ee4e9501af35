# orbgeo

Plain 2D geometry types for lon/lat data, with:

- geographic calculations: distance, bearing, area, length, padding bounds;
- GeoJSON encoding and decoding (JSON and BSON) for geometries, features
  and feature collections;
- WKT encoding and decoding;
- web mercator map tiles, tile covers of points and bounds, and merging
  tile sets up to lower zooms.

BSON support comes from the `bson` module shipped with `pymongo`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Geometries

`orbgeo.geometry` provides `Point`, `MultiPoint`, `LineString`,
`MultiLineString`, `Ring`, `Polygon`, `MultiPolygon`, `Bound` and
`Collection`. Each has `geojson_type()`, `dimensions()`, `bound()` and
`equal(other)`; the list-based types also have `clone()`. `Bound` adds
`extend`, `union`, `center`, `contains`, `is_empty`, `to_ring`,
`to_polygon`, `top`, `bottom`, `left` and `right`. The module-level
`equal(g1, g2)` compares any two geometries (type and values), and
`clone(g)` makes a deep copy.

```python
from orbgeo.geometry import MultiPoint, Point

mp = MultiPoint([Point(0.5, 0.2), Point(-1, 0), Point(1, 10)])
b = mp.bound()
print(b.center(), b.contains(Point(0, 5)))
```

`orbgeo.length.length(g, distance_fn)` sums the boundary length of any
geometry with a distance function of your choosing.

## Geographic math

```python
from orbgeo import geo
from orbgeo.geometry import Point

oakland = Point(-122.270833, 37.804444)
sf = Point(-122.416667, 37.783333)
print(geo.distance(oakland, sf))             # metres
print(geo.distance_haversine(oakland, sf))
print(geo.bearing(oakland, sf))
```

Also available: `geo.area`, `geo.signed_area`, `geo.length`,
`geo.length_haversine`, `geo.midpoint`, `geo.point_at_bearing_and_distance`,
`geo.point_at_distance_along_line` (raises `ValueError` for an empty line),
`geo.new_bound_around_point`, `geo.bound_pad`, `geo.bound_height` and
`geo.bound_width`.

`orbgeo.mercator` has `to_planar(lng, lat, level)` and `to_geo(x, y, level)`
for the web mercator projection.

## GeoJSON

```python
from orbgeo.geojson_feature import (
    new_feature,
    new_feature_collection,
    unmarshal_feature_collection,
)
from orbgeo.geometry import Point

fc = new_feature_collection()
fc.append(new_feature(Point(1, 2)))
data = fc.to_json()

again = unmarshal_feature_collection(data)
print(again.features[0].geometry)
```

`Feature` and `FeatureCollection` have `to_dict()`, `to_json()` and
`to_bson()`; decode with `unmarshal_feature`, `unmarshal_feature_bson`,
`unmarshal_feature_collection` and `unmarshal_feature_collection_bson`.
Members of a feature collection other than `type`, `bbox` and `features`
are kept in `extra_members` and written back at the top level.

`orbgeo.geojson_geometry` has the `Geometry` wrapper, `new_geometry` (rings
and bounds become polygons), `geometry_from_dict`, `unmarshal_geometry` and
`unmarshal_geometry_bson`. Decoding errors raise `GeoJSONError`; a missing or
unknown geometry type raises its subclass `InvalidGeometryError`.

`orbgeo.properties` provides `Properties` with `must_bool`, `must_int`,
`must_float` and `must_string` (each takes an optional default; a missing key
with no default raises `KeyError`, a value of the wrong type raises
`TypeError`), and `BBox` with `valid()` and `bound()`, built from a bound by
`new_bbox`.

## WKT

```python
from orbgeo import wkt
from orbgeo.geometry import LineString, Point

print(wkt.marshal_string(LineString([Point(1, 2), Point(0.5, 1.5)])))
# LINESTRING(1 2,0.5 1.5)
print(wkt.unmarshal_point("POINT(1 2)"))
```

`wkt.marshal` returns bytes. `wkt.unmarshal` parses any supported type, and
`unmarshal_point`, `unmarshal_multi_point`, `unmarshal_line_string`,
`unmarshal_multi_line_string`, `unmarshal_polygon`,
`unmarshal_multi_polygon` and `unmarshal_collection` require a given type.
Errors raise `NotWKTError`, `IncorrectGeometryError` or
`UnsupportedGeometryError`, all subclasses of `WKTError`.

## Map tiles

```python
from orbgeo import tile, tilecover
from orbgeo.geometry import Point

t = tile.at(Point(-87.6500523, 41.850033), 20)
print(t, t.quadkey(), t.parent(), t.children())

cover = tilecover.point(Point(-77.15, 38.87), 6)
merged = tilecover.merge_up(cover, 1)
```

`Tile` also has `valid`, `bound`, `center`, `contains`, `shared_parent`,
`siblings` and `zoom_range`; `tile` has `from_quadkey`, `fraction`,
`children_in_zoom_range` and `tiles_to_feature_collection`. `TileSet` is a
set of tiles with `merge` and `to_feature_collection`.

`tilecover` covers single points (`point`), sets of points (`multi_point`)
and bounds (`bound`). `merge_up` and `merge_up_partial` replace sibling
tiles with their parent, down to a minimum zoom, when all four (or at least
`count`) siblings are present; the input set is not modified.

## What this package does not do

- It has no tile cover for line strings, rings, polygons, multi-polygons or
  collections; only points, multi-points and bounds can be covered.
- It has no planar geometry functions such as centroids or planar areas, and
  no spatial index.
- It provides no command-line program; it is a library only.