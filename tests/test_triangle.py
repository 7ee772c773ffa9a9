import math
import warnings

import pytest

from plotclock import InvalidAngle, TriangleDoesNotExist
from plotclock.plotclock_triangle import (
    angle_from_three_sides,
    atan2_deg,
    cos_deg,
    side_from_two_sides_and_angle,
    sin_deg,
    triangle_exists,
)


@pytest.mark.parametrize('a, b, c', [
    (3.0, 4.0, 5.0),
    (1.0, 1.0, 1.0),
    (2.0, 3.0, 4.0),
    (45.0, 45.0, 10.0),
    (54.927, 35.0, 20.0),
    (25.6, 35.0, 59.0),
])
def test_angles_sum_to_180(a, b, c):
    total = (angle_from_three_sides(a, b, c)
             + angle_from_three_sides(b, c, a)
             + angle_from_three_sides(c, a, b))
    assert total == pytest.approx(180.0, abs=1e-9)


def test_right_triangle():
    assert angle_from_three_sides(3.0, 4.0, 5.0) == pytest.approx(90.0)
    assert side_from_two_sides_and_angle(3.0, 4.0, 90.0) == pytest.approx(5.0)


@pytest.mark.parametrize('a, b', [(1.0, 1.0), (3.0, 7.5), (25.6, 35.0), (45.0, 13.2)])
def test_side_at_straight_and_zero_angle(a, b):
    assert side_from_two_sides_and_angle(a, b, 0) == pytest.approx(abs(a - b), abs=1e-9)
    assert side_from_two_sides_and_angle(a, b, 180) == pytest.approx(a + b, abs=1e-9)


def test_triangle_does_not_exist():
    with pytest.raises(TriangleDoesNotExist) as excinfo:
        angle_from_three_sides(1, 1, 3)
    assert excinfo.value.sides == (1, 1, 3)
    assert isinstance(excinfo.value, ValueError)


def test_zero_adjacent_side_is_degenerate():
    with pytest.raises(TriangleDoesNotExist):
        angle_from_three_sides(0.0, 1.0, 1.0)


@pytest.mark.parametrize('angle', [-1, 181, -0.001, 180.001])
def test_invalid_angle(angle):
    with pytest.raises(InvalidAngle) as excinfo:
        side_from_two_sides_and_angle(2.0, 3.0, angle)
    assert excinfo.value.angle_deg == angle


def test_collinear_triangles():
    assert angle_from_three_sides(1.0, 2.0, 3.0) == pytest.approx(180.0)
    assert angle_from_three_sides(2.0, 1.0, 1.0) == pytest.approx(0.0)


def test_rounding_overshoot_is_clamped_silently():
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        angle = angle_from_three_sides(1.0, 1.0, 2.0 + 4e-10)
    assert not math.isnan(angle)
    assert angle == pytest.approx(180.0)


def test_large_overshoot_warns_and_clamps():
    with pytest.warns(UserWarning, match='clipped'):
        angle = angle_from_three_sides(1.0, 1.0, 2.0 + 9e-10)
    assert angle == pytest.approx(180.0)


def test_triangle_exists():
    assert triangle_exists(3.0, 4.0, 5.0)
    assert triangle_exists(1.0, 2.0, 3.0)
    assert not triangle_exists(1.0, 1.0, 3.0)
    assert not triangle_exists(5.0, 1.0, 1.0)


def test_degree_helpers():
    assert cos_deg(60.0) == pytest.approx(0.5)
    assert sin_deg(30.0) == pytest.approx(0.5)
    assert atan2_deg(1.0, 1.0) == pytest.approx(45.0)
    assert atan2_deg(1.0, 0.0) == pytest.approx(90.0)
