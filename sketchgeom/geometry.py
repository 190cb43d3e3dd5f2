"""Family-specific point-in and point-on predicates."""

from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np
from scipy.optimize import minimize_scalar

from .math_utils import DEFAULT_PRECISION, cutoff, distance_2d, points_equal, rotate_point
from .shape import CubicCurve, EllipseShape
from .types import Point, Segment

DEFAULT_CURVE_SAMPLES = 10

_ELLIPSE_ITERATIONS = 3
_NEWTON_STEPS = 6
_REFINE_XATOL = 1e-12


def _within(distance: float, tolerance: float, precision: int = DEFAULT_PRECISION) -> bool:
    return cutoff(distance, precision) == 0.0 or distance <= tolerance


def close_polygon(points: Sequence[Point]) -> Tuple[Point, ...]:
    """Return ``points`` with the first vertex repeated at the end if needed."""

    pts = tuple((float(p[0]), float(p[1])) for p in points)
    if not pts:
        return pts
    if points_equal(pts[0], pts[-1]):
        return pts
    return pts + (pts[0],)


def _segments_array(segments: Sequence[Segment]) -> np.ndarray:
    return np.asarray(segments, dtype=float).reshape(-1, 2, 2)


def distances_to_segments(point: Point, segments: Sequence[Segment]) -> np.ndarray:
    """Euclidean distance from ``point`` to each segment (clamped projection)."""

    if len(segments) == 0:
        return np.empty(0, dtype=float)
    arr = _segments_array(segments)
    a = arr[:, 0, :]
    b = arr[:, 1, :]
    p = np.asarray(point, dtype=float)
    ab = b - a
    length_sq = np.einsum("ij,ij->i", ab, ab)
    with np.errstate(divide="ignore", invalid="ignore"):
        t = np.einsum("ij,ij->i", p - a, ab) / length_sq
    t = np.where(length_sq > 0.0, np.clip(t, 0.0, 1.0), 0.0)
    closest = a + ab * t[:, None]
    return np.hypot(closest[:, 0] - p[0], closest[:, 1] - p[1])


def distance_to_segment(point: Point, segment: Segment) -> float:
    return float(distances_to_segments(point, [segment])[0])


def point_on_line_segment(point: Point, segment: Segment, tolerance: float = 0.0) -> bool:
    return _within(distance_to_segment(point, segment), tolerance)


def point_on_polyline(point: Point, segments: Sequence[Segment], tolerance: float = 0.0) -> bool:
    distances = distances_to_segments(point, segments)
    return any(_within(float(d), tolerance) for d in distances)


def point_on_polygon(point: Point, polygon: Sequence[Point], tolerance: float = 0.0) -> bool:
    closed = close_polygon(polygon)
    edges = [(closed[i], closed[i + 1]) for i in range(len(closed) - 1)]
    return point_on_polyline(point, edges, tolerance)


def point_in_polygon(point: Point, polygon: Sequence[Point]) -> bool:
    """Even-odd ray casting against an open or closed ``polygon``."""

    if len(polygon) < 3:
        return False
    pts = np.asarray(polygon, dtype=float)
    xi = pts[:, 0]
    yi = pts[:, 1]
    xj = np.roll(xi, 1)
    yj = np.roll(yi, 1)
    x, y = float(point[0]), float(point[1])
    straddles = (yi > y) != (yj > y)
    with np.errstate(divide="ignore", invalid="ignore"):
        crossing_x = (xj - xi) * (y - yi) / (yj - yi) + xi
    crossings = straddles & (x < crossing_x)
    return bool(np.count_nonzero(crossings) % 2)


def _to_ellipse_frame(point: Point, ellipse: EllipseShape) -> Point:
    translated = (point[0] - ellipse.center[0], point[1] - ellipse.center[1])
    return rotate_point(translated, (0.0, 0.0), -ellipse.angle)


def point_in_ellipse(point: Point, ellipse: EllipseShape) -> bool:
    x, y = _to_ellipse_frame(point, ellipse)
    a = ellipse.half_width
    b = ellipse.half_height
    if a == 0.0 or b == 0.0:
        return False
    return (x / a) ** 2 + (y / b) ** 2 <= 1.0


def distance_to_ellipse(point: Point, ellipse: EllipseShape) -> float:
    """Distance to the ellipse outline.

    Works on the first quadrant of the ellipse frame. A fixed-count
    closest-point iteration and a bounded search over the parametric angle
    both seed Newton steps, and the smallest resulting distance wins.
    """

    rx, ry = _to_ellipse_frame(point, ellipse)
    a = abs(ellipse.half_width)
    b = abs(ellipse.half_height)
    if a == 0.0 or b == 0.0:
        return distance_to_segment((rx, ry), ((-a, -b), (a, b)))

    px = abs(rx)
    py = abs(ry)
    tx = 0.707
    ty = 0.707
    for _ in range(_ELLIPSE_ITERATIONS):
        x = a * tx
        y = b * ty
        ex = (a * a - b * b) * tx ** 3 / a
        ey = (b * b - a * a) * ty ** 3 / b
        r = math.hypot(x - ex, y - ey)
        qx = px - ex
        qy = py - ey
        q = math.hypot(qx, qy)
        if q == 0.0:
            break
        tx = min(1.0, max(0.0, (qx * r / q + ex) / a))
        ty = min(1.0, max(0.0, (qy * r / q + ey) / b))
        t = math.hypot(tx, ty)
        tx /= t
        ty /= t

    def _offset_sq(theta: float) -> float:
        return (a * math.cos(theta) - px) ** 2 + (b * math.sin(theta) - py) ** 2

    refined = minimize_scalar(
        _offset_sq, bounds=(0.0, math.pi / 2), method="bounded", options={"xatol": _REFINE_XATOL}
    )
    candidates = [math.atan2(ty, tx), float(refined.x)]
    candidates += [_polish_ellipse_angle(a, b, px, py, theta) for theta in candidates]
    return min(
        distance_2d(px, py, a * math.cos(theta), b * math.sin(theta)) for theta in candidates
    )


def _polish_ellipse_angle(a: float, b: float, px: float, py: float, theta: float) -> float:
    """Newton steps on the derivative of the squared distance over the first quadrant."""

    for _ in range(_NEWTON_STEPS):
        sin_t = math.sin(theta)
        cos_t = math.cos(theta)
        slope = (b * b - a * a) * sin_t * cos_t + a * px * sin_t - b * py * cos_t
        curvature = (b * b - a * a) * math.cos(2 * theta) + a * px * cos_t + b * py * sin_t
        if curvature <= 0.0:
            break
        next_theta = min(math.pi / 2, max(0.0, theta - slope / curvature))
        if next_theta == theta:
            break
        theta = next_theta
    return theta


def point_on_ellipse(point: Point, ellipse: EllipseShape, tolerance: float = 0.0) -> bool:
    return _within(distance_to_ellipse(point, ellipse), tolerance)


def _bezier(curve: CubicCurve, t: np.ndarray) -> np.ndarray:
    p0, p1, p2, p3 = (np.asarray(p, dtype=float) for p in curve)
    t = np.asarray(t, dtype=float)[:, None]
    mt = 1.0 - t
    return mt ** 3 * p0 + 3 * mt ** 2 * t * p1 + 3 * mt * t ** 2 * p2 + t ** 3 * p3


def _bezier_derivative(curve: CubicCurve, t: np.ndarray) -> np.ndarray:
    p0, p1, p2, p3 = (np.asarray(p, dtype=float) for p in curve)
    t = np.asarray(t, dtype=float)[:, None]
    mt = 1.0 - t
    return 3 * mt ** 2 * (p1 - p0) + 6 * mt * t * (p2 - p1) + 3 * t ** 2 * (p3 - p2)


def _bezier_second_derivative(curve: CubicCurve, t: np.ndarray) -> np.ndarray:
    p0, p1, p2, p3 = (np.asarray(p, dtype=float) for p in curve)
    t = np.asarray(t, dtype=float)[:, None]
    return 6 * (1.0 - t) * (p2 - 2 * p1 + p0) + 6 * t * (p3 - 2 * p2 + p1)


def cubic_bezier_points(curve: CubicCurve, samples: int = DEFAULT_CURVE_SAMPLES) -> np.ndarray:
    """Sample ``samples + 1`` evenly spaced parameter values along ``curve``."""

    return _bezier(curve, np.linspace(0.0, 1.0, max(1, samples) + 1))


def distance_to_curve(
    point: Point, curve: CubicCurve, samples: int = DEFAULT_CURVE_SAMPLES
) -> float:
    """Coarse sampling followed by a bounded scalar refinement.

    Every local minimum of the sampled distances is refined on the squared
    distance between its neighbouring samples and then polished with Newton
    steps on ``(B(t) - p) . B'(t) = 0``.
    """

    samples = max(1, samples)
    ts = np.linspace(0.0, 1.0, samples + 1)
    sampled = _bezier(curve, ts)
    p = np.asarray(point, dtype=float)
    coarse = np.hypot(sampled[:, 0] - p[0], sampled[:, 1] - p[1])
    padded = np.concatenate(([np.inf], coarse, [np.inf]))
    minima = np.flatnonzero((coarse <= padded[:-2]) & (coarse <= padded[2:]))

    def _offset_sq(t: float) -> float:
        q = _bezier(curve, np.array([t]))[0]
        return float((q[0] - p[0]) ** 2 + (q[1] - p[1]) ** 2)

    best = float(coarse.min())
    for idx in minima:
        lo = ts[max(idx - 1, 0)]
        hi = ts[min(idx + 1, samples)]
        refined = minimize_scalar(
            _offset_sq, bounds=(lo, hi), method="bounded", options={"xatol": _REFINE_XATOL}
        )
        polished = _polish_curve_parameter(curve, p, float(refined.x))
        best = min(best, math.sqrt(float(refined.fun)), math.sqrt(_offset_sq(polished)))
    return best


def _polish_curve_parameter(curve: CubicCurve, p: np.ndarray, t: float) -> float:
    for _ in range(_NEWTON_STEPS):
        arr = np.array([t])
        offset = _bezier(curve, arr)[0] - p
        first = _bezier_derivative(curve, arr)[0]
        second = _bezier_second_derivative(curve, arr)[0]
        slope = float(offset @ first)
        curvature = float(first @ first + offset @ second)
        if curvature <= 0.0:
            break
        next_t = min(1.0, max(0.0, t - slope / curvature))
        if next_t == t:
            break
        t = next_t
    return t


def point_on_curve(
    point: Point, curve: CubicCurve, tolerance: float = 0.0, samples: int = DEFAULT_CURVE_SAMPLES
) -> bool:
    return _within(distance_to_curve(point, curve, samples), tolerance)


def point_on_polycurve(
    point: Point,
    curves: Sequence[CubicCurve],
    tolerance: float = 0.0,
    samples: int = DEFAULT_CURVE_SAMPLES,
) -> bool:
    return any(point_on_curve(point, curve, tolerance, samples) for curve in curves)


__all__ = [
    "DEFAULT_CURVE_SAMPLES",
    "close_polygon",
    "cubic_bezier_points",
    "distance_to_curve",
    "distance_to_ellipse",
    "distance_to_segment",
    "distances_to_segments",
    "point_in_ellipse",
    "point_in_polygon",
    "point_on_curve",
    "point_on_ellipse",
    "point_on_line_segment",
    "point_on_polycurve",
    "point_on_polygon",
    "point_on_polyline",
]
