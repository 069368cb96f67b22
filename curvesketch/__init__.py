"""Raster primitives, polynomial plotting, cubic-spline, shape and camera helpers."""

__version__ = "0.1.0"

__all__ = [
    "bezier",
    "camera",
    "polynomial",
    "raster",
    "shapes",
]