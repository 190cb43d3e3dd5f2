"""Hit-testing entry points: border, containment and bounds queries."""

from __future__ import annotations

import logging
from typing import Sequence

from .geometry import (
    close_polygon,
    point_in_ellipse,
    point_in_polygon,
    point_on_curve,
    point_on_ellipse,
    point_on_line_segment,
    point_on_polycurve,
    point_on_polygon,
    point_on_polyline,
)
from .shape import (
    CurveShape,
    EllipseShape,
    GeometricShape,
    LineShape,
    PolycurveShape,
    PolygonShape,
    PolylineShape,
)
from .types import Point, UnsupportedShapeError

logger = logging.getLogger(__name__)


def is_point_on_shape(point: Point, shape: GeometricShape, tolerance: float = 0.0) -> bool:
    """Return ``True`` when ``point`` lies on the border of ``shape`` within ``tolerance``."""

    if isinstance(shape, PolygonShape):
        return point_on_polygon(point, shape.points, tolerance)
    if isinstance(shape, EllipseShape):
        return point_on_ellipse(point, shape, tolerance)
    if isinstance(shape, LineShape):
        return point_on_line_segment(point, shape.segment, tolerance)
    if isinstance(shape, PolylineShape):
        return point_on_polyline(point, shape.segments, tolerance)
    if isinstance(shape, CurveShape):
        return point_on_curve(point, shape.control_points, tolerance)
    if isinstance(shape, PolycurveShape):
        return point_on_polycurve(point, shape.curves, tolerance)
    shape_type = getattr(shape, "type", type(shape).__name__)
    logger.error("Border test requested for unsupported shape %r", shape_type)
    raise UnsupportedShapeError(shape_type, "border test")


def is_point_in_shape(point: Point, shape: GeometricShape) -> bool:
    """Return ``True`` when ``point`` lies inside ``shape``.

    Lines and curves have no interior and always answer ``False``, even for
    points on the stroke. Polylines are closed into a polygon first.
    Polycurve containment is not implemented and always answers ``False``.
    """

    if isinstance(shape, PolygonShape):
        return point_in_polygon(point, shape.points)
    if isinstance(shape, LineShape):
        return False
    if isinstance(shape, CurveShape):
        return False
    if isinstance(shape, EllipseShape):
        return point_in_ellipse(point, shape)
    if isinstance(shape, PolylineShape):
        vertices = [segment[0] for segment in shape.segments]
        if shape.segments:
            vertices.append(shape.segments[-1][1])
        return point_in_polygon(point, close_polygon(vertices))
    if isinstance(shape, PolycurveShape):
        return False
    shape_type = getattr(shape, "type", type(shape).__name__)
    logger.error("Containment test requested for unsupported shape %r", shape_type)
    raise UnsupportedShapeError(shape_type, "containment test")


def is_point_in_bounds(point: Point, bounds: Sequence[Point]) -> bool:
    """Containment test against an arbitrary closed region such as a viewport."""

    return point_in_polygon(point, bounds)


__all__ = ["is_point_in_bounds", "is_point_in_shape", "is_point_on_shape"]
