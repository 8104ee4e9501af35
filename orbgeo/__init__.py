"""Geometry types, geographic math, GeoJSON and WKT encoding, and map tiles."""

__version__ = "0.1.0"