"""Vector and trigonometry primitives shared by routing and collision code."""

from __future__ import annotations

import math

from .types import Point, Vector

DEFAULT_PRECISION = 9


def cutoff(value: float, precision: int = DEFAULT_PRECISION) -> float:
    """Round ``value`` half-up to ``precision`` decimals to suppress float jitter."""

    scale = 10.0 ** precision
    return math.floor(value * scale + 0.5) / scale


def point_to_vector(p: Point, origin: Point = (0.0, 0.0)) -> Vector:
    return p[0] - origin[0], p[1] - origin[1]


def add_vectors(a: Vector, b: Vector) -> Vector:
    return a[0] + b[0], a[1] + b[1]


def scale_vector(v: Vector, scalar: float) -> Vector:
    return v[0] * scalar, v[1] * scalar


def dot(a: Vector, b: Vector) -> float:
    return a[0] * b[0] + a[1] * b[1]


def cross(a: Vector, b: Vector) -> float:
    return a[0] * b[1] - a[1] * b[0]


def magnitude(v: Vector) -> float:
    return math.hypot(v[0], v[1])


def normalize(v: Vector) -> Vector:
    """Return the unit vector of ``v``; a zero vector raises ``ZeroDivisionError``."""

    length = magnitude(v)
    if length == 0.0:
        raise ZeroDivisionError("cannot normalize a zero-length vector")
    return v[0] / length, v[1] / length


def distance_2d(x1: float, y1: float, x2: float, y2: float) -> float:
    return math.hypot(x2 - x1, y2 - y1)


def rotate_point(point: Point, center: Point, angle: float) -> Point:
    """Rotate ``point`` around ``center`` by ``angle`` radians."""

    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    dx = point[0] - center[0]
    dy = point[1] - center[1]
    return (
        dx * cos_a - dy * sin_a + center[0],
        dx * sin_a + dy * cos_a + center[1],
    )


def rotate_vector(vector: Vector, angle: float, precision: int = DEFAULT_PRECISION) -> Vector:
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return (
        cutoff(vector[0] * cos_a - vector[1] * sin_a, precision),
        cutoff(vector[0] * sin_a + vector[1] * cos_a, precision),
    )


def points_equal(a: Point, b: Point, precision: int = DEFAULT_PRECISION) -> bool:
    return cutoff(a[0], precision) == cutoff(b[0], precision) and cutoff(
        a[1], precision
    ) == cutoff(b[1], precision)


__all__ = [
    "DEFAULT_PRECISION",
    "add_vectors",
    "cross",
    "cutoff",
    "distance_2d",
    "dot",
    "magnitude",
    "normalize",
    "point_to_vector",
    "points_equal",
    "rotate_point",
    "rotate_vector",
    "scale_vector",
]
