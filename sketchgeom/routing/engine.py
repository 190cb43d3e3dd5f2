"""Top-level route computation for bound connectors."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ..bounds import get_element_bounds
from ..elements import Element, ElementsMap, Scene, to_local_space, to_world_space
from ..logging_utils import apply_debug_logging
from ..math_utils import DEFAULT_PRECISION, add_vectors, points_equal, scale_vector
from ..types import Bounds, LocalPoint, Point, Vector
from .config import RoutingConfig, resolve_config
from .estimate import (
    estimate_shape,
    get_closest_line_segment,
    get_heading_for_bind_dongle,
    get_normal_vector_for_segment,
)
from .kernel import Kernel, calculate_segment, elbow_kernel

logger = logging.getLogger(__name__)


def get_start_end_elements(
    arrow: Element, scene: Optional[Scene]
) -> Tuple[Optional[Element], Optional[Element]]:
    """Resolve the bound elements of ``arrow``; unresolvable ends become ``None``."""

    bindings = (arrow.start_binding, arrow.end_binding)
    if scene is None:
        if any(bindings):
            logger.warning("No scene available for arrow %s; routing it as unbound", arrow.id)
        return None, None

    elements_map = scene.get_non_deleted_elements_map()
    resolved: List[Optional[Element]] = []
    for label, binding in zip(("start", "end"), bindings):
        if binding is None:
            resolved.append(None)
            continue
        element = elements_map.get(binding.element_id)
        if element is None:
            logger.warning(
                "Arrow %s %s binding targets missing element %s; treating end as unbound",
                arrow.id,
                label,
                binding.element_id,
            )
        resolved.append(element)
    return resolved[0], resolved[1]


def get_start_end_bounds(
    arrow: Element,
    scene: Optional[Scene],
    elements: Optional[Tuple[Optional[Element], Optional[Element]]] = None,
) -> Tuple[Optional[Bounds], Optional[Bounds]]:
    """World bounds of the start and end elements; ``None`` for unbound ends.

    ``elements`` takes ends already resolved with :func:`get_start_end_elements`.
    """

    if elements is None:
        elements = get_start_end_elements(arrow, scene)
    start_element, end_element = elements
    elements_map = scene.get_non_deleted_elements_map() if scene is not None else None
    return (
        get_element_bounds(start_element, elements_map) if start_element else None,
        get_element_bounds(end_element, elements_map) if end_element else None,
    )


def resolve_bind_heading(
    element: Optional[Element],
    point: Point,
    elements_map: Optional[ElementsMap] = None,
    precision: int = DEFAULT_PRECISION,
) -> Optional[Vector]:
    """Heading pointing away from ``element`` at the world-space ``point``."""

    if element is None:
        return None
    segments = estimate_shape(element, elements_map)
    segment = get_closest_line_segment(segments, point)
    if segment is None:
        return None
    normal = get_normal_vector_for_segment(element, segment, point, elements_map, precision)
    if points_equal(normal, (0.0, 0.0), precision):
        logger.debug("Degenerate segment on element %s; no bind dongle", element.id)
        return None
    return get_heading_for_bind_dongle(normal)


def calculate_points(
    arrow: Element,
    scene: Optional[Scene] = None,
    config: Optional[RoutingConfig] = None,
    kernel: Kernel = elbow_kernel,
) -> List[LocalPoint]:
    """Compute the elbow route of ``arrow`` in the arrow's local frame.

    Arrows with fewer than two points are still being drawn and come back
    unchanged. Each bound end gets a stand-off dongle ``dongle_length`` away
    from its shape along the quantised outward normal.
    """

    if len(arrow.points) < 2:
        return list(arrow.points)

    cfg = resolve_config(config)
    first_point = arrow.points[0]
    target = arrow.points[-1]

    start_element, end_element = get_start_end_elements(arrow, scene)
    elements_map = scene.get_non_deleted_elements_map() if scene is not None else None
    bounding_boxes = [
        b
        for b in get_start_end_bounds(arrow, scene, (start_element, end_element))
        if b is not None
    ]

    start_heading = resolve_bind_heading(
        start_element, to_world_space(arrow, first_point), elements_map, cfg.precision
    )
    end_heading = resolve_bind_heading(
        end_element, to_world_space(arrow, target), elements_map, cfg.precision
    )

    points: List[Point] = [to_world_space(arrow, first_point)]
    if start_heading is not None:
        local_dongle = add_vectors(first_point, scale_vector(start_heading, cfg.dongle_length))
        points.append(to_world_space(arrow, local_dongle))

    end_points: List[Point] = []
    if end_heading is not None:
        local_dongle = add_vectors(target, scale_vector(end_heading, cfg.dongle_length))
        end_points.append(to_world_space(arrow, local_dongle))
    end_points.append(to_world_space(arrow, target))

    route = calculate_segment(points, end_points, bounding_boxes, config=cfg, kernel=kernel)
    logger.info(
        "Routed arrow %s with %d point(s) (start heading=%s, end heading=%s)",
        arrow.id,
        len(route),
        start_heading,
        end_heading,
    )
    return [to_local_space(arrow, point) for point in route]


apply_debug_logging(globals(), logger=logger)


__all__ = [
    "calculate_points",
    "get_start_end_bounds",
    "get_start_end_elements",
    "resolve_bind_heading",
]
