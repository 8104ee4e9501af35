"""Well-known text (WKT) encoding and decoding of geometries."""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Iterator, Optional

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


class WKTError(ValueError):
    """Base class for WKT decoding errors."""


class NotWKTError(WKTError):
    """Raised when the data is not valid WKT."""

    def __init__(self, message: str = "wkt: invalid data") -> None:
        super().__init__(message)


class IncorrectGeometryError(WKTError):
    """Raised when WKT decodes to a geometry of another type than requested."""

    def __init__(self, message: str = "wkt: incorrect geometry") -> None:
        super().__init__(message)


class UnsupportedGeometryError(WKTError):
    """Raised when the WKT geometry type is not supported."""

    def __init__(self, message: str = "wkt: unsupported geometry") -> None:
        super().__init__(message)


_DOUBLE_PAREN = re.compile(
    r"\)[\s|\t]*\)([\s|\t]*,[\s|\t]*)\([\s|\t]*\(", re.ASCII
)
_SINGLE_PAREN = re.compile(r"\)([\s|\t]*,[\s|\t]*)\(", re.ASCII)
_NO_PAREN = re.compile(r"([\s|\t]*,[\s|\t]*)", re.ASCII)

_NUMBER = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


# ---------------------------------------------------------------- encoding


def _format_number(value: float) -> str:
    """Format a float as the shortest %g representation."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"

    sign, digits, exponent = Decimal(repr(value)).normalize().as_tuple()
    ds = "".join(str(d) for d in digits)
    exp = exponent + len(ds) - 1
    prefix = "-" if sign else ""

    if exp < -4 or exp >= 6:
        mantissa = ds[0] + ("." + ds[1:] if len(ds) > 1 else "")
        return f"{prefix}{mantissa}e{exp:+03d}"
    if exp >= 0:
        if len(ds) <= exp + 1:
            return prefix + ds + "0" * (exp + 1 - len(ds))
        return f"{prefix}{ds[:exp + 1]}.{ds[exp + 1:]}"
    return f"{prefix}0.{'0' * (-exp - 1)}{ds}"


def _coord(p) -> str:
    return f"{_format_number(p[0])} {_format_number(p[1])}"


def _line(points) -> str:
    return "(" + ",".join(_coord(p) for p in points) + ")"


def _rings(polygon) -> str:
    return "(" + ",".join(_line(r) for r in polygon) + ")"


def _wkt(g) -> Iterator[str]:
    if isinstance(g, Point):
        yield f"POINT({_coord(g)})"
    elif isinstance(g, MultiPoint):
        if not g:
            yield "MULTIPOINT EMPTY"
            return
        yield "MULTIPOINT(" + ",".join(f"({_coord(p)})" for p in g) + ")"
    elif isinstance(g, LineString):
        if not g:
            yield "LINESTRING EMPTY"
            return
        yield "LINESTRING" + _line(g)
    elif isinstance(g, MultiLineString):
        if not g:
            yield "MULTILINESTRING EMPTY"
            return
        yield "MULTILINESTRING(" + ",".join(_line(ls) for ls in g) + ")"
    elif isinstance(g, Ring):
        yield from _wkt(Polygon([g]))
    elif isinstance(g, Polygon):
        if not g:
            yield "POLYGON EMPTY"
            return
        yield "POLYGON" + _rings(g)
    elif isinstance(g, MultiPolygon):
        if not g:
            yield "MULTIPOLYGON EMPTY"
            return
        yield "MULTIPOLYGON(" + ",".join(_rings(p) for p in g) + ")"
    elif isinstance(g, Collection):
        if not g:
            yield "GEOMETRYCOLLECTION EMPTY"
            return
        yield "GEOMETRYCOLLECTION("
        for i, child in enumerate(g):
            if i:
                yield ","
            yield from _wkt(child)
        yield ")"
    elif isinstance(g, Bound):
        yield from _wkt(g.to_polygon())
    else:
        raise TypeError("unsupported type")


def marshal_string(g) -> str:
    """Return the WKT representation of the geometry as a string."""
    return "".join(_wkt(g))


def marshal(g) -> bytes:
    """Return the WKT representation of the geometry as bytes."""
    return marshal_string(g).encode("utf-8")


# ---------------------------------------------------------------- decoding


def _trim_space_brackets(s: str) -> str:
    """Strip spaces and one pair of enclosing brackets."""
    s = s.strip(" ")
    if not s:
        return ""
    if s[0] != "(":
        raise NotWKTError()
    s = s[1:]
    if not s or s[-1] != ")":
        raise NotWKTError()
    return s[:-1].strip(" ")


def _parse_float(text: str) -> float:
    if not _NUMBER.fullmatch(text):
        raise WKTError(f"wkt: invalid number: {text!r}")
    return float(text)


def _parse_point(s: str) -> Point:
    parts = s.split(" ")
    if len(parts) != 2:
        raise NotWKTError()
    return Point(_parse_float(parts[0]), _parse_float(parts[1]))


def _split_by_regexp(s: str, pattern: re.Pattern) -> list[str]:
    """Split s at the first group of every match of the pattern."""
    result = []
    start = 0
    for match in pattern.finditer(s):
        result.append(s[start:match.start(1)])
        start = match.end(1)
    result.append(s[start:])
    return result


def _split_geometry_collection(s: str) -> list[str]:
    """Split the body of a geometry collection into its member geometries."""
    result: list[str] = []
    stack: list[str] = []
    total = len(s.encode("utf-8"))
    offset = 0
    for ch in s:
        i = offset
        offset += len(ch.encode("utf-8"))
        if "(" not in stack:
            stack.append(ch)
            continue
        if "A" <= ch < "Z":
            result.append("".join(stack)[:-1])
            stack = [ch]
            continue
        if i == total - 1:
            result.append("".join(stack))
            continue
        stack.append(ch)
    return result


def _parse_points(s: str) -> list[Point]:
    return [_parse_point(p) for p in _split_by_regexp(s, _NO_PAREN)]


def _parse_rings(s: str) -> Polygon:
    return Polygon(
        Ring(_parse_points(_trim_space_brackets(r)))
        for r in _split_by_regexp(s, _SINGLE_PAREN)
    )


def unmarshal(s: str):
    """Parse a WKT string into a geometry.

    Returns None for a geometry collection body with no recognisable members.
    """
    s = s.strip(" ").upper()

    if "GEOMETRYCOLLECTION" in s:
        if s == "GEOMETRYCOLLECTION EMPTY":
            return Collection()
        s = s.replace("GEOMETRYCOLLECTION", "")
        if not s:
            raise NotWKTError()
        parts = _split_geometry_collection(s)
        if not parts:
            return None
        return Collection(unmarshal(part) for part in parts if part)

    if "MULTIPOINT" in s:
        if s == "MULTIPOINT EMPTY":
            return MultiPoint()
        body = _trim_space_brackets(s.replace("MULTIPOINT", ""))
        return MultiPoint(
            _parse_point(_trim_space_brackets(p))
            for p in _split_by_regexp(body, _NO_PAREN)
        )

    if "POINT" in s:
        return _parse_point(_trim_space_brackets(s.replace("POINT", "")))

    if "MULTILINESTRING" in s:
        if s == "MULTILINESTRING EMPTY":
            return MultiLineString()
        body = _trim_space_brackets(s.replace("MULTILINESTRING", ""))
        return MultiLineString(
            LineString(_parse_points(_trim_space_brackets(ls)))
            for ls in _split_by_regexp(body, _SINGLE_PAREN)
        )

    if "LINESTRING" in s:
        if s == "LINESTRING EMPTY":
            return LineString()
        body = _trim_space_brackets(s.replace("LINESTRING", ""))
        return LineString(_parse_points(body))

    if "MULTIPOLYGON" in s:
        if s == "MULTIPOLYGON EMPTY":
            return MultiPolygon()
        body = _trim_space_brackets(s.replace("MULTIPOLYGON", ""))
        return MultiPolygon(
            _parse_rings(_trim_space_brackets(poly))
            for poly in _split_by_regexp(body, _DOUBLE_PAREN)
        )

    if "POLYGON" in s:
        if s == "POLYGON EMPTY":
            return Polygon()
        body = _trim_space_brackets(s.replace("POLYGON", ""))
        return _parse_rings(body)

    raise UnsupportedGeometryError()


def _unmarshal_as(s: str, cls: type):
    geom: Optional[object] = unmarshal(s)
    if type(geom) is not cls:
        raise IncorrectGeometryError()
    return geom


def unmarshal_point(s: str) -> Point:
    """Parse a WKT point."""
    return _unmarshal_as(s, Point)


def unmarshal_multi_point(s: str) -> MultiPoint:
    """Parse a WKT multi-point."""
    return _unmarshal_as(s, MultiPoint)


def unmarshal_line_string(s: str) -> LineString:
    """Parse a WKT line string."""
    return _unmarshal_as(s, LineString)


def unmarshal_multi_line_string(s: str) -> MultiLineString:
    """Parse a WKT multi-line-string."""
    return _unmarshal_as(s, MultiLineString)


def unmarshal_polygon(s: str) -> Polygon:
    """Parse a WKT polygon."""
    return _unmarshal_as(s, Polygon)


def unmarshal_multi_polygon(s: str) -> MultiPolygon:
    """Parse a WKT multi-polygon."""
    return _unmarshal_as(s, MultiPolygon)


def unmarshal_collection(s: str) -> Collection:
    """Parse a WKT geometry collection."""
    return _unmarshal_as(s, Collection)