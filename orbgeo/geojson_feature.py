"""GeoJSON features and feature collections with JSON and BSON encodings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Union

import bson
from bson.errors import BSONError

from .geojson_geometry import (
    GeoJSONError,
    InvalidGeometryError,
    _OrderedDoc,
    _dumps,
    _loads,
    geometry_from_dict,
    new_geometry,
)
from .properties import BBox, Properties

_FEATURE = "Feature"
_FEATURE_COLLECTION = "FeatureCollection"
_COLLECTION_TYPE = "GeometryCollection"

Data = Union[bytes, bytearray, str]


def _type_error(value: Any, target: str) -> GeoJSONError:
    return GeoJSONError(
        f"geojson: cannot unmarshal {type(value).__name__} into {target}"
    )


def _parse_string(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise _type_error(value, "string")
    return value


def _parse_bbox(value: Any) -> Optional[BBox]:
    if value is None:
        return None
    if not isinstance(value, list) or any(
        isinstance(v, bool) or not isinstance(v, (int, float)) for v in value
    ):
        raise _type_error(value, "BBox")
    return BBox(value)


def _parse_properties(value: Any) -> Properties:
    if value is None:
        return Properties()
    if not isinstance(value, Mapping):
        raise _type_error(value, "Properties")
    return Properties(value)


def _decode_bson(data: bytes) -> dict:
    try:
        return bson.decode(bytes(data))
    except (BSONError, ValueError, TypeError) as exc:
        raise GeoJSONError(f"geojson: invalid bson: {exc}") from exc


@dataclass
class Feature:
    """A GeoJSON feature: a geometry with an id, a bbox and properties."""

    id: Any = None
    type: str = _FEATURE
    bbox: Optional[BBox] = None
    geometry: Any = None
    properties: Properties = field(default_factory=Properties)

    def point(self):
        """Return the center of the geometry's bound."""
        return self.geometry.bound().center()

    def _doc(self, *, keep_id: bool) -> _OrderedDoc:
        doc = _OrderedDoc()
        if keep_id or self.id is not None:
            doc["id"] = self.id
        doc["type"] = _FEATURE
        if self.bbox:
            doc["bbox"] = list(self.bbox)
        doc["geometry"] = new_geometry(self.geometry).to_dict()
        doc["properties"] = dict(self.properties) if self.properties else None
        return doc

    def to_dict(self) -> dict:
        """Return the GeoJSON object; empty properties become None."""
        return self._doc(keep_id=False)

    def to_json(self) -> bytes:
        """Encode as GeoJSON text."""
        return _dumps(self.to_dict())

    def to_bson(self) -> bytes:
        """Encode as a BSON document with the GeoJSON structure."""
        return bson.encode(self._doc(keep_id=True))


def new_feature(geometry) -> Feature:
    """Create a feature holding the geometry and no properties."""
    return Feature(geometry=geometry, properties=Properties())


def _feature_from_doc(doc: Any) -> Feature:
    if not isinstance(doc, Mapping):
        raise _type_error(doc, "Feature")

    type_name = _parse_string(doc.get("type"))
    bbox = _parse_bbox(doc.get("bbox"))
    properties = _parse_properties(doc.get("properties"))

    geometry = None
    raw = doc.get("geometry")
    if raw is not None:
        parsed = geometry_from_dict(raw)
        if (
            isinstance(raw, Mapping)
            and raw.get("type") == _COLLECTION_TYPE
            and raw.get("geometries") is None
        ):
            raise InvalidGeometryError()
        geometry = parsed.geometry()

    if type_name != _FEATURE:
        raise GeoJSONError(f"geojson: not a feature: type={type_name}")

    return Feature(
        id=doc.get("id"),
        type=type_name,
        bbox=bbox,
        geometry=geometry,
        properties=properties,
    )


def unmarshal_feature(data: Data) -> Feature:
    """Decode GeoJSON text into a feature."""
    return _feature_from_doc(_loads(data))


def unmarshal_feature_bson(data: bytes) -> Feature:
    """Decode a BSON document into a feature."""
    return _feature_from_doc(_decode_bson(data))


@dataclass
class FeatureCollection:
    """A GeoJSON feature collection.

    Members other than type, bbox and features are kept in extra_members and
    written back at the top level of the object.
    """

    type: str = _FEATURE_COLLECTION
    bbox: Optional[BBox] = None
    features: list = field(default_factory=list)
    extra_members: Properties = field(default_factory=Properties)

    def append(self, feature: Feature) -> "FeatureCollection":
        """Add a feature and return the collection."""
        self.features.append(feature)
        return self

    def _doc(self, encode: Callable[[Feature], Any]) -> dict:
        doc = dict(self.extra_members) if self.extra_members else {}
        doc["type"] = _FEATURE_COLLECTION
        doc.pop("bbox", None)
        if self.bbox is not None:
            doc["bbox"] = list(self.bbox)
        doc["features"] = [
            None if f is None else encode(f) for f in self.features or ()
        ]
        return doc

    def to_dict(self) -> dict:
        """Return the GeoJSON object."""
        return self._doc(Feature.to_dict)

    def to_json(self) -> bytes:
        """Encode as GeoJSON text."""
        return _dumps(self.to_dict())

    def to_bson(self) -> bytes:
        """Encode as a BSON document."""
        return bson.encode(self._doc(lambda f: f._doc(keep_id=True)))


def new_feature_collection() -> FeatureCollection:
    """Create an empty feature collection."""
    return FeatureCollection()


def _parse_features(value: Any) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise _type_error(value, "[]Feature")
    return [None if item is None else _feature_from_doc(item) for item in value]


def _collection_from_doc(doc: Any, *, lenient_type: bool) -> FeatureCollection:
    if not isinstance(doc, Mapping):
        raise _type_error(doc, "FeatureCollection")

    fc = FeatureCollection(type="")
    for key, value in doc.items():
        if key == "type":
            if lenient_type:
                fc.type = value if isinstance(value, str) else ""
            else:
                fc.type = _parse_string(value)
        elif key == "bbox":
            fc.bbox = _parse_bbox(value)
        elif key == "features":
            fc.features = _parse_features(value)
        else:
            fc.extra_members[key] = value

    if fc.type != _FEATURE_COLLECTION:
        raise GeoJSONError(f"geojson: not a feature collection: type={fc.type}")
    return fc


def unmarshal_feature_collection(data: Data) -> FeatureCollection:
    """Decode GeoJSON text into a feature collection."""
    return _collection_from_doc(_loads(data), lenient_type=False)


def unmarshal_feature_collection_bson(data: bytes) -> FeatureCollection:
    """Decode a BSON document into a feature collection."""
    return _collection_from_doc(_decode_bson(data), lenient_type=True)