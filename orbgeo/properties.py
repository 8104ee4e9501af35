"""GeoJSON feature properties, bounding boxes and geometry type names."""

from __future__ import annotations

from typing import Any

from .geometry import Bound, Point

TYPE_POINT = "Point"
TYPE_MULTI_POINT = "MultiPoint"
TYPE_LINE_STRING = "LineString"
TYPE_MULTI_LINE_STRING = "MultiLineString"
TYPE_POLYGON = "Polygon"
TYPE_MULTI_POLYGON = "MultiPolygon"


class Properties(dict):
    """Feature properties with typed accessors."""

    def _fallback(self, default: tuple) -> Any:
        if default:
            return default[0]
        raise KeyError("property not found")

    def must_bool(self, key: str, *args: bool) -> bool:
        """Return the bool at key, or the default if absent.

        Raises TypeError if present but not a bool, KeyError if absent with no default.
        """
        value = self.get(key)
        if isinstance(value, bool):
            return value
        if value is not None:
            raise TypeError(f"not a bool, but a {type(value).__name__}: {value}")
        return self._fallback(args)

    def must_int(self, key: str, *args: int) -> int:
        """Return the number at key as an int, truncating floats."""
        value = self.get(key)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, float):
            return int(value)
        if value is not None:
            raise TypeError(f"not a number, but a {type(value).__name__}: {value}")
        return self._fallback(args)

    def must_float(self, key: str, *args: float) -> float:
        """Return the number at key as a float."""
        value = self.get(key)
        if isinstance(value, float):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return float(value)
        if value is not None:
            raise TypeError(f"not a number, but a {type(value).__name__}: {value}")
        return self._fallback(args)

    def must_string(self, key: str, *args: str) -> str:
        """Return the string at key."""
        value = self.get(key)
        if isinstance(value, str):
            return value
        if value is not None:
            raise TypeError(f"not a string, but a {type(value).__name__}: {value}")
        return self._fallback(args)

    def clone(self) -> "Properties":
        """Return a shallow copy."""
        return Properties(self)


class BBox(list):
    """A GeoJSON bbox: all axes of the south-west corner, then of the north-east."""

    def __init__(self, values=()) -> None:
        super().__init__(float(v) for v in (values or ()))

    def valid(self) -> bool:
        """Report whether the bbox has an even number, at least four, of values."""
        return len(self) >= 4 and len(self) % 2 == 0

    def bound(self) -> Bound:
        """Return the 2D bound of the bbox, or a zero bound if it is invalid."""
        if not self.valid():
            return Bound()
        mid = len(self) // 2
        return Bound(Point(self[0], self[1]), Point(self[mid], self[mid + 1]))


def new_bbox(b: Bound) -> BBox:
    """Create a bbox from a bound."""
    return BBox([b.min[0], b.min[1], b.max[0], b.max[1]])