"""Ray-marching path kernel producing axis-aligned elbow routes."""

from __future__ import annotations

import logging
import math
from typing import Callable, List, Optional, Sequence

from ..math_utils import (
    DEFAULT_PRECISION,
    cutoff,
    dot,
    normalize,
    point_to_vector,
    points_equal,
    rotate_vector,
)
from ..types import Bounds, Point, Vector
from .config import RoutingConfig, resolve_config

logger = logging.getLogger(__name__)

DEFAULT_START_VECTOR: Vector = (1.0, 0.0)
DEFAULT_END_VECTOR: Vector = (-1.0, 0.0)
_WORLD_RIGHT: Vector = (1.0, 0.0)

Kernel = Callable[[Sequence[Point], Sequence[Point], Sequence[Bounds], int], Point]


def _direction(to: Point, frm: Point, default: Vector, precision: int) -> Vector:
    if points_equal(to, frm, precision):
        return default
    return normalize(point_to_vector(to, frm))


def _axis_step(start: Point, end: Point, vertical: bool) -> Point:
    return (start[0], end[1]) if vertical else (end[0], start[1])


def elbow_kernel(
    points: Sequence[Point],
    target: Sequence[Point],
    bounding_boxes: Sequence[Bounds],
    precision: int = DEFAULT_PRECISION,
) -> Point:
    """Return the next elbow point from ``points[-1]`` toward ``target[0]``.

    After a horizontal segment the kernel steps vertically and vice versa.
    When the candidate would approach the target head-on against its
    incoming direction, only half of the distance is covered so another
    elbow gets inserted. ``bounding_boxes`` are accepted for kernels that
    avoid obstacles and are not consulted here.
    """

    start = points[-1]
    end = target[0]
    if len(points) < 2:
        start_vector = DEFAULT_START_VECTOR
    else:
        start_vector = _direction(start, points[-2], DEFAULT_START_VECTOR, precision)
    if len(target) < 2:
        end_vector = DEFAULT_END_VECTOR
    else:
        end_vector = _direction(target[1], end, DEFAULT_END_VECTOR, precision)

    right_start_normal_dot = cutoff(
        dot(_WORLD_RIGHT, rotate_vector(start_vector, math.pi / 2, precision)), precision
    )
    vertical = right_start_normal_dot == 0
    candidate = _axis_step(start, end, vertical)
    if points_equal(candidate, start, precision):
        # already aligned with the target on this axis
        vertical = not vertical
        candidate = _axis_step(start, end, vertical)

    if points_equal(candidate, end, precision):
        return candidate

    next_vector = normalize(point_to_vector(candidate, end))
    if cutoff(dot(next_vector, end_vector), precision) == 1:
        if vertical:
            return start[0], start[1] + (end[1] - start[1]) / 2
        return start[0] + (end[0] - start[0]) / 2, start[1]

    return candidate


def calculate_segment(
    start: Sequence[Point],
    end: Sequence[Point],
    bounding_boxes: Sequence[Bounds] = (),
    config: Optional[RoutingConfig] = None,
    kernel: Kernel = elbow_kernel,
) -> List[Point]:
    """March from ``start`` toward ``end`` and return the full world-space path.

    The result starts with ``start`` and ends with ``end``. At most
    ``config.max_steps`` intermediate points are produced; hitting the cap
    truncates the march silently.
    """

    if not start or not end:
        raise ValueError("calculate_segment requires non-empty start and end point lists")

    cfg = resolve_config(config)
    points: List[Point] = [(float(p[0]), float(p[1])) for p in start]
    targets: List[Point] = [(float(p[0]), float(p[1])) for p in end]

    for step in range(cfg.max_steps):
        next_point = kernel(points, targets, bounding_boxes, cfg.precision)
        if points_equal(targets[0], next_point, cfg.precision):
            logger.debug("Kernel reached target after %d step(s)", step)
            break
        logger.debug("Kernel step %d -> (%.3f, %.3f)", step, next_point[0], next_point[1])
        points.append(next_point)
    else:
        logger.debug("Kernel stopped at the %d step cap before reaching %s", cfg.max_steps, targets[0])

    return points + targets


__all__ = [
    "DEFAULT_END_VECTOR",
    "DEFAULT_START_VECTOR",
    "Kernel",
    "calculate_segment",
    "elbow_kernel",
]
