import math

import pytest

from sketchgeom import Element, get_element_absolute_coords, get_element_bounds


def test_absolute_coords_of_box():
    element = Element("r", "rectangle", x=10, y=20, width=100, height=50)

    assert get_element_absolute_coords(element) == (10.0, 20.0, 110.0, 70.0, 60.0, 45.0)


def test_absolute_coords_of_linear_element_use_points():
    element = Element("a", "arrow", x=10, y=10, points=((0, 0), (100, 50)))

    assert get_element_absolute_coords(element) == (10.0, 10.0, 110.0, 60.0, 60.0, 35.0)


def test_bounds_of_rotated_rectangle_swap_extents():
    element = Element("r", "rectangle", x=10, y=20, width=100, height=50, angle=math.pi / 2)

    assert get_element_bounds(element) == pytest.approx((35.0, -5.0, 85.0, 95.0))


def test_bounds_of_rotated_circle_are_unchanged():
    element = Element("e", "ellipse", width=100, height=100, angle=math.pi / 4)

    assert get_element_bounds(element) == pytest.approx((0.0, 0.0, 100.0, 100.0))


def test_bounds_of_diamond_follow_midpoints():
    element = Element("d", "diamond", width=100, height=60, angle=math.pi / 2)

    # rotated by a quarter turn around (50, 30): half extents swap
    assert get_element_bounds(element) == pytest.approx((20.0, -20.0, 80.0, 80.0))
