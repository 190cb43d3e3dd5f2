"""Family-tagged shape descriptors built from the current element state."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar, Optional, Sequence, Tuple, Union

from .bounds import get_element_absolute_coords
from .elements import Element, ElementsMap
from .math_utils import points_equal, rotate_point
from .types import Point, Segment, UnsupportedShapeError

logger = logging.getLogger(__name__)

BOX_LIKE_TYPES = frozenset({"rectangle", "image", "embeddable", "iframe", "text", "frame"})

CubicCurve = Tuple[Point, Point, Point, Point]


@dataclass(frozen=True)
class PolygonShape:
    type: ClassVar[str] = "polygon"
    points: Tuple[Point, ...]


@dataclass(frozen=True)
class EllipseShape:
    type: ClassVar[str] = "ellipse"
    center: Point
    angle: float
    half_width: float
    half_height: float


@dataclass(frozen=True)
class LineShape:
    type: ClassVar[str] = "line"
    segment: Segment


@dataclass(frozen=True)
class PolylineShape:
    type: ClassVar[str] = "polyline"
    segments: Tuple[Segment, ...]


@dataclass(frozen=True)
class CurveShape:
    """Cubic Bézier given by its four control points."""

    type: ClassVar[str] = "curve"
    control_points: CubicCurve


@dataclass(frozen=True)
class PolycurveShape:
    type: ClassVar[str] = "polycurve"
    curves: Tuple[CubicCurve, ...]


GeometricShape = Union[
    PolygonShape, EllipseShape, LineShape, PolylineShape, CurveShape, PolycurveShape
]


def _as_point(p: Sequence[float]) -> Point:
    return float(p[0]), float(p[1])


def polyline_from_points(points: Sequence[Point]) -> Tuple[Segment, ...]:
    pts = [_as_point(p) for p in points]
    return tuple((pts[i], pts[i + 1]) for i in range(len(pts) - 1))


def get_polygon_shape(element: Element, elements_map: Optional[ElementsMap] = None) -> PolygonShape:
    """Rotated outline of a box-like or diamond element."""

    x1, y1, x2, y2, cx, cy = get_element_absolute_coords(element, elements_map)
    center = (cx, cy)
    if element.type == "diamond":
        mid_x = x1 + (x2 - x1) / 2
        mid_y = y1 + (y2 - y1) / 2
        outline = [(mid_x, y1), (x2, mid_y), (mid_x, y2), (x1, mid_y)]
    else:
        outline = [(x1, y1), (x2, y1), (x2, y2), (x1, y2)]
    return PolygonShape(tuple(rotate_point(p, center, element.angle) for p in outline))


def get_ellipse_shape(element: Element, elements_map: Optional[ElementsMap] = None) -> EllipseShape:
    x1, y1, x2, y2, cx, cy = get_element_absolute_coords(element, elements_map)
    return EllipseShape(
        center=(cx, cy),
        angle=element.angle,
        half_width=(x2 - x1) / 2,
        half_height=(y2 - y1) / 2,
    )


def get_polyline_shape(
    element: Element, elements_map: Optional[ElementsMap] = None
) -> Union[PolylineShape, PolygonShape]:
    """World-space outline of a linear element; closed lines become polygons."""

    _, _, _, _, cx, cy = get_element_absolute_coords(element, elements_map)
    world = [
        rotate_point((p[0] + element.x, p[1] + element.y), (cx, cy), element.angle)
        for p in element.points
    ]
    is_closed = (
        element.type != "arrow"
        and len(world) > 2
        and points_equal(world[0], world[-1])
    )
    if is_closed:
        return PolygonShape(tuple(world))
    return PolylineShape(polyline_from_points(world))


def get_curve_shape(p0: Point, p1: Point, p2: Point, p3: Point) -> CurveShape:
    return CurveShape((_as_point(p0), _as_point(p1), _as_point(p2), _as_point(p3)))


def get_element_shape(element: Element, elements_map: Optional[ElementsMap] = None) -> GeometricShape:
    """Build a fresh descriptor for ``element`` (never cached)."""

    if element.type in BOX_LIKE_TYPES or element.type == "diamond":
        return get_polygon_shape(element, elements_map)
    if element.type == "ellipse":
        return get_ellipse_shape(element, elements_map)
    if element.has_points:
        return get_polyline_shape(element, elements_map)
    logger.error("No shape descriptor for element %s of type %s", element.id, element.type)
    raise UnsupportedShapeError(element.type, "shape construction")


__all__ = [
    "BOX_LIKE_TYPES",
    "CubicCurve",
    "CurveShape",
    "EllipseShape",
    "GeometricShape",
    "LineShape",
    "PolycurveShape",
    "PolygonShape",
    "PolylineShape",
    "get_curve_shape",
    "get_ellipse_shape",
    "get_element_shape",
    "get_polygon_shape",
    "get_polyline_shape",
    "polyline_from_points",
]
