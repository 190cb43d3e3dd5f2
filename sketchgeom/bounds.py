"""Element geometry provider: absolute coordinates and rotated bounds."""

from __future__ import annotations

import math
from typing import List, Optional, Tuple

from .elements import Element, ElementsMap
from .math_utils import rotate_point
from .types import Bounds, Point

AbsoluteCoords = Tuple[float, float, float, float, float, float]


def get_element_absolute_coords(
    element: Element, elements_map: Optional[ElementsMap] = None
) -> AbsoluteCoords:
    """Return ``(x1, y1, x2, y2, cx, cy)`` of the unrotated element in world space.

    ``elements_map`` is part of the provider interface; the shape families
    handled here never need to look at other elements.
    """

    if element.has_points and element.points:
        xs = [p[0] for p in element.points]
        ys = [p[1] for p in element.points]
        x1 = min(xs) + element.x
        y1 = min(ys) + element.y
        x2 = max(xs) + element.x
        y2 = max(ys) + element.y
        return x1, y1, x2, y2, (x1 + x2) / 2, (y1 + y2) / 2

    x1 = element.x
    y1 = element.y
    x2 = element.x + element.width
    y2 = element.y + element.height
    return x1, y1, x2, y2, (x1 + x2) / 2, (y1 + y2) / 2


def _bounds_of(points: List[Point]) -> Bounds:
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    return min(xs), min(ys), max(xs), max(ys)


def get_element_bounds(element: Element, elements_map: Optional[ElementsMap] = None) -> Bounds:
    """Axis-aligned world bounds of ``element`` after applying its rotation."""

    x1, y1, x2, y2, cx, cy = get_element_absolute_coords(element, elements_map)
    center = (cx, cy)

    if element.has_points and element.points:
        world = [
            rotate_point((p[0] + element.x, p[1] + element.y), center, element.angle)
            for p in element.points
        ]
        return _bounds_of(world)

    if element.type == "ellipse":
        half_w = (x2 - x1) / 2
        half_h = (y2 - y1) / 2
        cos_a = math.cos(element.angle)
        sin_a = math.sin(element.angle)
        ww = math.hypot(half_w * cos_a, half_h * sin_a)
        hh = math.hypot(half_h * cos_a, half_w * sin_a)
        return cx - ww, cy - hh, cx + ww, cy + hh

    if element.type == "diamond":
        mid_x = x1 + (x2 - x1) / 2
        mid_y = y1 + (y2 - y1) / 2
        corners = [(mid_x, y1), (x2, mid_y), (mid_x, y2), (x1, mid_y)]
    else:
        corners = [(x1, y1), (x2, y1), (x2, y2), (x1, y2)]
    return _bounds_of([rotate_point(p, center, element.angle) for p in corners])


def get_bounds_center(bounds: Bounds) -> Point:
    min_x, min_y, max_x, max_y = bounds
    return (min_x + max_x) / 2, (min_y + max_y) / 2


__all__ = [
    "AbsoluteCoords",
    "get_bounds_center",
    "get_element_absolute_coords",
    "get_element_bounds",
]
