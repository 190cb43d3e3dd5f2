from .types import Bounds, LocalPoint, Point, Segment, SketchGeomError, UnsupportedShapeError, Vector
from .elements import Binding, Element, Scene, to_local_space, to_world_space
from .bounds import get_element_absolute_coords, get_element_bounds
from .shape import (
    CurveShape,
    EllipseShape,
    GeometricShape,
    LineShape,
    PolycurveShape,
    PolygonShape,
    PolylineShape,
    get_curve_shape,
    get_element_shape,
)
from .collision import is_point_in_bounds, is_point_in_shape, is_point_on_shape
from .routing import (
    RoutingConfig,
    calculate_points,
    calculate_segment,
    estimate_shape,
    get_routing_config,
    set_routing_config,
    vector_to_heading,
)

__all__ = [
    'Binding',
    'Bounds',
    'CurveShape',
    'Element',
    'EllipseShape',
    'GeometricShape',
    'LineShape',
    'LocalPoint',
    'Point',
    'PolycurveShape',
    'PolygonShape',
    'PolylineShape',
    'RoutingConfig',
    'Scene',
    'Segment',
    'SketchGeomError',
    'UnsupportedShapeError',
    'Vector',
    'calculate_points',
    'calculate_segment',
    'estimate_shape',
    'get_curve_shape',
    'get_element_absolute_coords',
    'get_element_bounds',
    'get_element_shape',
    'get_routing_config',
    'is_point_in_bounds',
    'is_point_in_shape',
    'is_point_on_shape',
    'set_routing_config',
    'to_local_space',
    'to_world_space',
    'vector_to_heading',
]
