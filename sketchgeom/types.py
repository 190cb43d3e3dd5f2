from __future__ import annotations

from typing import Tuple

Point = Tuple[float, float]
LocalPoint = Point
GlobalPoint = Point
Vector = Tuple[float, float]
Segment = Tuple[Point, Point]
Bounds = Tuple[float, float, float, float]


class SketchGeomError(RuntimeError):
    """Base class for errors raised by the geometry core."""


class UnsupportedShapeError(SketchGeomError, ValueError):
    """Raised when a shape family has no implementation for a query."""

    def __init__(self, shape_type: object, operation: str = "query") -> None:
        self.shape_type = shape_type
        self.operation = operation
        super().__init__(f"shape {shape_type!r} is not implemented for {operation}")


__all__ = [
    "Point",
    "LocalPoint",
    "GlobalPoint",
    "Vector",
    "Segment",
    "Bounds",
    "SketchGeomError",
    "UnsupportedShapeError",
]
