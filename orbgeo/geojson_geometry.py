"""GeoJSON geometry objects and their JSON and BSON encodings."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Mapping, Optional, Union

import bson
from bson.errors import BSONError

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

_COLLECTION_TYPE = "GeometryCollection"


class GeoJSONError(ValueError):
    """Raised when GeoJSON data cannot be encoded or decoded."""


class InvalidGeometryError(GeoJSONError):
    """Raised when a geometry object has a missing or unknown type."""

    def __init__(self, message: str = "geojson: invalid geometry") -> None:
        super().__init__(message)


class _OrderedDoc(dict):
    """A document whose keys are written in insertion order, not sorted."""


# ---------------------------------------------------------------- json text


def _format_float(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise GeoJSONError(f"geojson: unsupported value: {value!r}")
    magnitude = abs(value)
    if magnitude != 0 and (magnitude < 1e-6 or magnitude >= 1e21):
        mantissa, _, exponent = repr(value).partition("e")
        if len(exponent) == 3 and exponent.startswith("-0"):
            exponent = "-" + exponent[2]
        return f"{mantissa}e{exponent}"
    return format(Decimal(repr(value)).normalize(), "f")


_STRING_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _encode_string(text: str) -> str:
    encoded = json.dumps(text, ensure_ascii=False)
    for char, escape in _STRING_ESCAPES.items():
        encoded = encoded.replace(char, escape)
    return encoded


def _encode(value: Any) -> str:
    if value is None:
        return "null"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, str):
        return _encode_string(value)
    if isinstance(value, Mapping):
        keys = list(value) if isinstance(value, _OrderedDoc) else sorted(value)
        members = ",".join(
            f"{_encode_string(str(k))}:{_encode(value[k])}" for k in keys
        )
        return "{" + members + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(_encode(v) for v in value) + "]"
    raise GeoJSONError(f"geojson: unsupported value type: {type(value).__name__}")


def _dumps(value: Any) -> bytes:
    """Encode to compact JSON; plain dicts get sorted keys."""
    return _encode(value).encode("utf-8")


def _loads(data: Union[bytes, bytearray, str]) -> Any:
    """Decode JSON; every number becomes a float."""
    try:
        if isinstance(data, (bytes, bytearray, memoryview)):
            data = bytes(data).decode("utf-8")
        return json.loads(data, parse_int=float)
    except ValueError as exc:
        raise GeoJSONError(f"geojson: invalid json: {exc}") from exc


# ---------------------------------------------------------------- coordinates


def _coordinates(g) -> list:
    if isinstance(g, Point):
        return [float(g[0]), float(g[1])]
    if isinstance(g, Bound):
        return _coordinates(g.to_polygon())
    return [_coordinates(item) for item in g]


def _type_error(value: Any, target: str) -> GeoJSONError:
    return GeoJSONError(
        f"geojson: cannot unmarshal {type(value).__name__} into {target}"
    )


def _number(value: Any) -> float:
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _type_error(value, "number")
    return float(value)


def _parse_point(value: Any) -> Point:
    if value is None:
        return Point()
    if not isinstance(value, list):
        raise _type_error(value, "Point")
    xy = [_number(v) for v in value[:2]]
    xy += [0.0] * (2 - len(xy))
    return Point(*xy)


def _sequence(parse_item: Callable[[Any], Any], cls: type) -> Callable[[Any], Any]:
    def parse(value: Any):
        if value is None:
            return cls()
        if not isinstance(value, list):
            raise _type_error(value, cls.__name__)
        return cls(parse_item(v) for v in value)

    return parse


_parse_multi_point = _sequence(_parse_point, MultiPoint)
_parse_line_string = _sequence(_parse_point, LineString)
_parse_ring = _sequence(_parse_point, Ring)
_parse_multi_line_string = _sequence(_parse_line_string, MultiLineString)
_parse_polygon = _sequence(_parse_ring, Polygon)
_parse_multi_polygon = _sequence(_parse_polygon, MultiPolygon)

_PARSERS = {
    "Point": _parse_point,
    "MultiPoint": _parse_multi_point,
    "LineString": _parse_line_string,
    "MultiLineString": _parse_multi_line_string,
    "Polygon": _parse_polygon,
    "MultiPolygon": _parse_multi_polygon,
}


# ---------------------------------------------------------------- geometry


@dataclass
class Geometry:
    """A GeoJSON geometry object: either coordinates or child geometries."""

    type: str = ""
    coordinates: Any = None
    geometries: Optional[list["Geometry"]] = None

    def geometry(self):
        """Return the plain geometry; child geometries become a Collection."""
        if self.coordinates is not None:
            return self.coordinates
        return Collection(g.geometry() for g in self.geometries or ())

    def _doc(self) -> _OrderedDoc:
        coords = self.coordinates
        geometries = None
        type_name = ""
        if isinstance(coords, Ring):
            coords = Polygon([coords])
        elif isinstance(coords, Bound):
            coords = coords.to_polygon()
        elif isinstance(coords, Collection):
            geometries = [new_geometry(c) for c in coords]
            type_name = _COLLECTION_TYPE
            coords = None

        if coords is not None:
            type_name = coords.geojson_type()
        if self.geometries:
            geometries = self.geometries
            type_name = _COLLECTION_TYPE

        doc = _OrderedDoc(type=type_name)
        if coords is not None:
            doc["coordinates"] = _coordinates(coords)
        if geometries:
            doc["geometries"] = [g.to_dict() for g in geometries]
        return doc

    def to_dict(self) -> Optional[dict]:
        """Return the GeoJSON object, or None when there is nothing to hold."""
        if self.coordinates is None and not self.geometries:
            return None
        return self._doc()

    def to_json(self) -> bytes:
        """Encode as GeoJSON text; an empty geometry encodes as null."""
        return _dumps(self.to_dict())

    def to_bson(self) -> bytes:
        """Encode as a BSON document with the GeoJSON structure."""
        return bson.encode(self._doc())


def new_geometry(g) -> Geometry:
    """Wrap a geometry, turning rings and bounds into polygons."""
    result = Geometry()
    if isinstance(g, Ring):
        result.coordinates = Polygon([g])
    elif isinstance(g, Bound):
        result.coordinates = g.to_polygon()
    elif isinstance(g, Collection):
        if g:
            result.geometries = [new_geometry(c) for c in g]
        result.type = g.geojson_type()
    else:
        result.coordinates = g

    if result.coordinates is not None:
        result.type = result.coordinates.geojson_type()
    return result


def geometry_from_dict(obj: Any) -> Geometry:
    """Build a geometry from a decoded GeoJSON geometry object."""
    if obj is None:
        raise InvalidGeometryError()
    if not isinstance(obj, Mapping):
        raise _type_error(obj, "Geometry")

    type_name = obj.get("type", "")
    if type_name is None:
        type_name = ""
    if not isinstance(type_name, str):
        raise _type_error(type_name, "string")

    if type_name == _COLLECTION_TYPE:
        raw = obj.get("geometries")
        if raw is None:
            children = []
        elif isinstance(raw, list):
            children = [geometry_from_dict(item) for item in raw]
        else:
            raise _type_error(raw, "[]Geometry")
        result = Geometry(geometries=children)
    else:
        parser = _PARSERS.get(type_name)
        if parser is None:
            raise InvalidGeometryError()
        if "coordinates" not in obj:
            raise GeoJSONError("geojson: missing coordinates")
        result = Geometry(coordinates=parser(obj["coordinates"]))

    result.type = result.geometry().geojson_type()
    return result


def unmarshal_geometry(data: Union[bytes, bytearray, str]) -> Geometry:
    """Decode GeoJSON text into a geometry."""
    return geometry_from_dict(_loads(data))


def unmarshal_geometry_bson(data: bytes) -> Geometry:
    """Decode a BSON document with the GeoJSON structure into a geometry."""
    try:
        doc = bson.decode(bytes(data))
    except (BSONError, ValueError, TypeError) as exc:
        raise GeoJSONError(f"geojson: invalid bson: {exc}") from exc
    return geometry_from_dict(doc)