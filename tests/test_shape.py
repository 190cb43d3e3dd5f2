import dataclasses

import pytest

from sketchgeom import (
    Element,
    EllipseShape,
    PolygonShape,
    PolylineShape,
    UnsupportedShapeError,
    get_curve_shape,
    get_element_shape,
)


def test_rectangle_descriptor_is_polygon_of_corners():
    shape = get_element_shape(Element("r", "rectangle", width=100, height=50))

    assert isinstance(shape, PolygonShape)
    assert shape.type == "polygon"
    assert [pytest.approx(p) for p in shape.points] == [(0, 0), (100, 0), (100, 50), (0, 50)]


def test_diamond_descriptor_uses_midpoints():
    shape = get_element_shape(Element("d", "diamond", width=100, height=100))

    assert [pytest.approx(p) for p in shape.points] == [(50, 0), (100, 50), (50, 100), (0, 50)]


def test_ellipse_descriptor():
    shape = get_element_shape(Element("e", "ellipse", x=0, y=0, width=100, height=50, angle=0.3))

    assert shape == EllipseShape(center=(50.0, 25.0), angle=0.3, half_width=50.0, half_height=25.0)


def test_arrow_descriptor_is_world_space_polyline():
    arrow = Element("a", "arrow", x=10, y=10, points=((0, 0), (100, 0), (100, 40)))
    shape = get_element_shape(arrow)

    assert isinstance(shape, PolylineShape)
    assert shape.segments == (((10.0, 10.0), (110.0, 10.0)), ((110.0, 10.0), (110.0, 50.0)))


def test_closed_line_becomes_polygon():
    line = Element("l", "line", points=((0, 0), (100, 0), (100, 100), (0, 0)))

    assert isinstance(get_element_shape(line), PolygonShape)


def test_descriptor_tracks_latest_element_state():
    element = Element("r", "rectangle", width=10, height=10)
    moved = dataclasses.replace(element, x=50)

    assert get_element_shape(element) != get_element_shape(moved)
    assert get_element_shape(moved).points[0] == pytest.approx((50.0, 0.0))


def test_unknown_family_raises_typed_error():
    with pytest.raises(UnsupportedShapeError) as exc:
        get_element_shape(Element("x", "blob"))
    assert exc.value.shape_type == "blob"


def test_curve_shape_coerces_points():
    curve = get_curve_shape((0, 0), (1, 2), (3, 4), (5, 6))

    assert curve.type == "curve"
    assert curve.control_points == ((0.0, 0.0), (1.0, 2.0), (3.0, 4.0), (5.0, 6.0))
