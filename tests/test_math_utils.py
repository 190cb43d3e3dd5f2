import math

import pytest

from sketchgeom.math_utils import (
    add_vectors,
    cutoff,
    dot,
    normalize,
    point_to_vector,
    points_equal,
    rotate_point,
    rotate_vector,
    scale_vector,
)


def test_cutoff_suppresses_float_jitter():
    assert cutoff(0.1 + 0.2) == 0.3
    assert cutoff(-1.0000000004) == -1.0
    assert cutoff(2.5e-10) == 0.0
    assert cutoff(1.23456, precision=2) == 1.23


def test_point_to_vector_is_point_minus_origin():
    assert point_to_vector((5.0, 7.0), (2.0, 3.0)) == (3.0, 4.0)
    assert point_to_vector((5.0, 7.0)) == (5.0, 7.0)


def test_vector_arithmetic():
    assert add_vectors((1.0, 2.0), (3.0, -4.0)) == (4.0, -2.0)
    assert scale_vector((1.5, -2.0), -40) == (-60.0, 80.0)
    assert dot((1.0, 2.0), (3.0, 4.0)) == 11.0


def test_normalize_unit_length():
    x, y = normalize((3.0, 4.0))
    assert math.isclose(x, 0.6)
    assert math.isclose(y, 0.8)


def test_normalize_rejects_zero_vector():
    with pytest.raises(ZeroDivisionError):
        normalize((0.0, 0.0))


def test_rotate_vector_quarter_turn_is_exact_after_cutoff():
    assert rotate_vector((1.0, 0.0), math.pi / 2) == (0.0, 1.0)
    assert rotate_vector((0.0, 1.0), -math.pi / 2) == (1.0, 0.0)


def test_rotate_point_around_center():
    x, y = rotate_point((2.0, 1.0), (1.0, 1.0), math.pi)
    assert math.isclose(x, 0.0, abs_tol=1e-12)
    assert math.isclose(y, 1.0, abs_tol=1e-12)


def test_points_equal_uses_nine_decimals():
    assert points_equal((1.0000000001, 2.0), (1.0, 2.0))
    assert not points_equal((1.001, 2.0), (1.0, 2.0))
