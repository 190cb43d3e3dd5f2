"""Shape estimation, closest-segment selection and heading resolution."""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence

from ..bounds import get_bounds_center, get_element_absolute_coords, get_element_bounds
from ..elements import Element, ElementsMap
from ..math_utils import DEFAULT_PRECISION, distance_2d, dot, point_to_vector, rotate_point, rotate_vector
from ..types import Point, Segment, Vector

logger = logging.getLogger(__name__)

ESTIMATED_BOX_TYPES = frozenset({"rectangle", "image", "embeddable", "iframe"})
ESTIMATED_RHOMBUS_TYPES = frozenset({"diamond", "ellipse"})

HEADING_RIGHT: Vector = (1.0, 0.0)
HEADING_LEFT: Vector = (-1.0, 0.0)
HEADING_DOWN: Vector = (0.0, 1.0)
HEADING_UP: Vector = (0.0, -1.0)


def estimate_shape(element: Element, elements_map: Optional[ElementsMap] = None) -> List[Segment]:
    """Approximate ``element`` with four world-space segments.

    Box-like families give their rotated outline (top, right, bottom, left).
    Ellipses and diamonds give the rhombus through their rotated cardinal
    midpoints (W-N, N-E, E-S, S-W). Other families yield no segments.
    """

    x1, y1, x2, y2, cx, cy = get_element_absolute_coords(element, elements_map)
    center = (cx, cy)
    angle = -element.angle

    if element.type in ESTIMATED_BOX_TYPES:
        nw = rotate_point((x1, y1), center, angle)
        ne = rotate_point((x2, y1), center, angle)
        se = rotate_point((x2, y2), center, angle)
        sw = rotate_point((x1, y2), center, angle)
        return [(nw, ne), (ne, se), (se, sw), (sw, nw)]

    if element.type in ESTIMATED_RHOMBUS_TYPES:
        north = rotate_point((x1 + (x2 - x1) / 2, y1), center, angle)
        west = rotate_point((x1, y1 + (y2 - y1) / 2), center, angle)
        east = rotate_point((x2, y1 + (y2 - y1) / 2), center, angle)
        south = rotate_point((x1 + (x2 - x1) / 2, y2), center, angle)
        return [(west, north), (north, east), (east, south), (south, west)]

    logger.error("Not supported shape: %s", element.type)
    return []


def approximate_segment_distance(segment: Segment, point: Point) -> float:
    """Cheap ranking metric for segments; not a true point-to-segment distance."""

    (x1, y1), (x2, y2) = segment
    px, py = point
    dx = min(x1 - px, x2 - px)
    dy = min(y1 - py, y2 - py)
    return distance_2d(dx, dy, px, py)


def get_closest_line_segment(segments: Sequence[Segment], point: Point) -> Optional[Segment]:
    if not segments:
        return None
    ranked = sorted(
        range(len(segments)),
        key=lambda idx: approximate_segment_distance(segments[idx], point),
    )
    return segments[ranked[0]]


def get_normal_vector_candidates_for_segment(
    segment: Segment, precision: int = DEFAULT_PRECISION
) -> List[Vector]:
    direction = point_to_vector(segment[0], segment[1])
    return [
        rotate_vector(direction, math.pi / 2, precision),
        rotate_vector(direction, -math.pi / 2, precision),
    ]


def get_normal_vector_for_segment(
    element: Element,
    segment: Segment,
    point: Point,
    elements_map: Optional[ElementsMap] = None,
    precision: int = DEFAULT_PRECISION,
) -> Vector:
    """Pick the perpendicular of ``segment`` that points away from ``element``.

    The shapes are convex, so the normal whose dot product with the vector
    from the bounds centre to ``point`` is non-negative points outside.
    """

    n1, n2 = get_normal_vector_candidates_for_segment(segment, precision)
    center = get_bounds_center(get_element_bounds(element, elements_map))
    center_to_point = point_to_vector(point, center)
    if dot(center_to_point, n1) >= 0:
        return n1
    return n2


def vector_to_heading(vector: Vector) -> Vector:
    """Snap ``vector`` to one of the four axis-aligned unit headings."""

    x, y = vector
    abs_x = abs(x)
    abs_y = abs(y)
    if x > abs_y:
        return HEADING_RIGHT
    if x <= -abs_y:
        return HEADING_LEFT
    if y > abs_x:
        return HEADING_DOWN
    return HEADING_UP


def get_heading_for_bind_dongle(normal: Vector) -> Vector:
    return vector_to_heading(normal)


__all__ = [
    "ESTIMATED_BOX_TYPES",
    "ESTIMATED_RHOMBUS_TYPES",
    "HEADING_DOWN",
    "HEADING_LEFT",
    "HEADING_RIGHT",
    "HEADING_UP",
    "approximate_segment_distance",
    "estimate_shape",
    "get_closest_line_segment",
    "get_heading_for_bind_dongle",
    "get_normal_vector_candidates_for_segment",
    "get_normal_vector_for_segment",
    "vector_to_heading",
]
