import math

import pytest

from chartmath.polar import PolarFrame, hex_position, hexagon_vertices, polar_to_cartesian, to_degrees
from chartmath.types import PolarPoint


def test_zero_angle_points_straight_up():
    x, y = polar_to_cartesian(0, 10, 50, 50, start_angle=90, direction='clockwise')
    assert x == pytest.approx(50)
    assert y == pytest.approx(40)


@pytest.mark.parametrize("direction,expected", [
    ('clockwise', (60, 50)),
    ('counterclockwise', (40, 50)),
])
def test_winding_direction(direction, expected):
    x, y = polar_to_cartesian(90, 10, 50, 50, 90, direction)
    assert x == pytest.approx(expected[0])
    assert y == pytest.approx(expected[1])


def test_unknown_direction_raises():
    with pytest.raises(ValueError):
        polar_to_cartesian(0, 1, 0, 0, 90, 'widdershins')
    with pytest.raises(ValueError):
        PolarFrame(0, 0, direction='sideways')


def test_frame_converts_radians():
    frame = PolarFrame(50, 50, angle_unit='radians')
    x, y = frame.to_cartesian(math.pi / 2, 10)
    assert x == pytest.approx(60)
    assert y == pytest.approx(50)


def test_frame_projects_with_radius_scale():
    frame = PolarFrame(100, 100)
    projected = frame.project([PolarPoint(0, 1), PolarPoint(180, 2)], radius_scale=lambda r: r * 10)
    assert projected[0] == pytest.approx((100, 90))
    assert projected[1] == pytest.approx((100, 120))


def test_to_degrees():
    assert to_degrees(math.pi, 'radians') == pytest.approx(180)
    assert to_degrees(45) == 45
    with pytest.raises(ValueError):
        to_degrees(1, 'gradians')


def test_hex_positions_use_flat_top_spacing():
    r = 10
    assert hex_position(0, 0, r) == (0, 0)
    x, y = hex_position(1, 0, r)
    assert x == pytest.approx(15)
    assert y == pytest.approx(math.sqrt(3) * r / 2)
    x, y = hex_position(2, 1, r)
    assert x == pytest.approx(30)
    assert y == pytest.approx(math.sqrt(3) * r)


def test_hexagon_vertices():
    vertices = hexagon_vertices(5, 5, 2)
    assert len(vertices) == 6
    assert vertices[0] == pytest.approx((7, 5))
    assert vertices[3] == pytest.approx((3, 5))
    shrunk = hexagon_vertices(5, 5, 2, gap=0.5)
    assert shrunk[0] == pytest.approx((6, 5))
