import math

import numpy as np
import pytest

from sketchgeom import Element
from sketchgeom.routing import (
    approximate_segment_distance,
    estimate_shape,
    get_closest_line_segment,
    get_heading_for_bind_dongle,
    get_normal_vector_candidates_for_segment,
    get_normal_vector_for_segment,
    vector_to_heading,
)

HEADINGS = {(1.0, 0.0), (-1.0, 0.0), (0.0, 1.0), (0.0, -1.0)}


def _flatten(segments):
    return [coord for segment in segments for point in segment for coord in point]


def _square():
    return Element("box", "rectangle", x=0, y=0, width=100, height=100)


def test_estimate_rectangle_yields_exact_square():
    segments = estimate_shape(_square())

    expected = [
        ((0, 0), (100, 0)),
        ((100, 0), (100, 100)),
        ((100, 100), (0, 100)),
        ((0, 100), (0, 0)),
    ]
    assert _flatten(segments) == pytest.approx(_flatten(expected))


def test_estimate_ellipse_yields_rhombus_of_midpoints():
    segments = estimate_shape(Element("e", "ellipse", width=100, height=50))

    west, north, east, south = (0, 25), (50, 0), (100, 25), (50, 50)
    expected = [(west, north), (north, east), (east, south), (south, west)]
    assert _flatten(segments) == pytest.approx(_flatten(expected))


def test_estimate_rotated_rectangle_keeps_side_lengths():
    element = Element("r", "rectangle", width=100, height=50, angle=math.pi / 3)
    segments = estimate_shape(element)

    lengths = [math.dist(a, b) for a, b in segments]
    assert lengths == pytest.approx([100, 50, 100, 50])
    # the polygon is closed: each segment starts where the previous ends
    for (_, end), (start, _) in zip(segments, segments[1:] + segments[:1]):
        assert end == pytest.approx(start)


@pytest.mark.parametrize('element_type', ['rectangle', 'image', 'iframe', 'embeddable', 'diamond', 'ellipse'])
def test_estimate_supported_families_have_four_segments(element_type):
    element = Element("el", element_type, x=5, y=-7, width=30, height=20, angle=0.4)

    assert len(estimate_shape(element)) == 4


@pytest.mark.parametrize('element_type', ['text', 'arrow', 'line', 'freedraw', 'frame'])
def test_estimate_other_families_are_reported_and_empty(element_type, caplog):
    element = Element("el", element_type, width=30, height=20, points=((0, 0), (10, 10)))

    assert estimate_shape(element) == []
    assert f"Not supported shape: {element_type}" in caplog.text


def test_approximate_distance_pins_endpoint_delta_heuristic():
    assert approximate_segment_distance(((10, 0), (20, 0)), (0, 0)) == pytest.approx(10.0)
    assert approximate_segment_distance(((0, 10), (0, 20)), (5, 5)) == pytest.approx(10.0)


def test_closest_segment_follows_heuristic_not_true_distance():
    segments = estimate_shape(_square())

    # (50, 0) lies on the top edge but the heuristic ranks the right edge first
    closest = get_closest_line_segment(segments, (50, 0))
    assert closest == segments[1]


def test_closest_segment_empty_and_ties():
    assert get_closest_line_segment([], (0, 0)) is None

    first = ((0.0, 0.0), (1.0, 0.0))
    second = ((0.0, 0.0), (1.0, 0.0))
    assert get_closest_line_segment([first, second], (5, 5)) is first


def test_normal_candidates_are_perpendicular():
    n1, n2 = get_normal_vector_candidates_for_segment(((0, 0), (100, 0)))

    assert n1 == (0.0, -100.0)
    assert n2 == (0.0, 100.0)


@pytest.mark.parametrize(
    'segment, point, expected',
    [
        (((0, 0), (100, 0)), (50, 0), (0.0, -100.0)),
        (((100, 100), (0, 100)), (50, 100), (0.0, 100.0)),
        (((0, 100), (0, 0)), (0, 50), (-100.0, 0.0)),
        (((100, 0), (100, 100)), (100, 50), (100.0, 0.0)),
    ],
)
def test_normal_points_away_from_center(segment, point, expected):
    assert get_normal_vector_for_segment(_square(), segment, point) == expected


def test_normal_uses_second_candidate_on_the_far_side():
    assert get_normal_vector_for_segment(_square(), ((0, 0), (100, 0)), (50, 100)) == (0.0, 100.0)


@pytest.mark.parametrize(
    'vector, heading',
    [
        ((5, 1), (1.0, 0.0)),
        ((-5, 1), (-1.0, 0.0)),
        ((1, 5), (0.0, 1.0)),
        ((1, -5), (0.0, -1.0)),
        ((1, 1), (0.0, -1.0)),
        ((-1, -1), (-1.0, 0.0)),
        ((0, 0), (-1.0, 0.0)),
    ],
)
def test_vector_to_heading(vector, heading):
    assert vector_to_heading(vector) == heading


def test_vector_to_heading_never_diagonal():
    rng = np.random.default_rng(1234)
    for x, y in rng.normal(scale=50.0, size=(500, 2)):
        assert vector_to_heading((float(x), float(y))) in HEADINGS


def test_bind_dongle_heading_quantizes_normal():
    assert get_heading_for_bind_dongle((100.0, 0.0)) == (1.0, 0.0)
    assert get_heading_for_bind_dongle((0.0, -100.0)) == (0.0, -1.0)
