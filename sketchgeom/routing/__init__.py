"""Elbow routing for connectors bound to shapes."""

from __future__ import annotations

from .config import RoutingConfig, get_routing_config, set_routing_config
from .engine import (
    calculate_points,
    get_start_end_bounds,
    get_start_end_elements,
    resolve_bind_heading,
)
from .estimate import (
    approximate_segment_distance,
    estimate_shape,
    get_closest_line_segment,
    get_heading_for_bind_dongle,
    get_normal_vector_candidates_for_segment,
    get_normal_vector_for_segment,
    vector_to_heading,
)
from .kernel import Kernel, calculate_segment, elbow_kernel

__all__ = [
    "Kernel",
    "RoutingConfig",
    "approximate_segment_distance",
    "calculate_points",
    "calculate_segment",
    "elbow_kernel",
    "estimate_shape",
    "get_closest_line_segment",
    "get_heading_for_bind_dongle",
    "get_normal_vector_candidates_for_segment",
    "get_normal_vector_for_segment",
    "get_routing_config",
    "get_start_end_bounds",
    "get_start_end_elements",
    "resolve_bind_heading",
    "set_routing_config",
    "vector_to_heading",
]
