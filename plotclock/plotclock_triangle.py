#!/usr/bin/env python3
"""
Plotclock Triangle Module

Law-of-cosines primitives used by both solvers.

Every degree/radian conversion of the package happens here; callers pass
and receive degrees only.
"""

import math
import warnings

import numpy as np

from plotclock_config import limits as limits_config
from .plotclock_errors import InvalidAngle, TriangleDoesNotExist

TRIANGLE_TOLERANCE = limits_config.TRIANGLE_INEQUALITY_TOLERANCE
ACOS_TOLERANCE = limits_config.ACOS_CLAMP_TOLERANCE


def triangle_exists(a: float, b: float, c: float) -> bool:
    """
    Check whether three side lengths close into a triangle.

    Degenerate (collinear) triangles count as existing, up to
    TRIANGLE_TOLERANCE of rounding slack.
    """
    return not (
        (a + b) < c - TRIANGLE_TOLERANCE
        or (a + c) < b - TRIANGLE_TOLERANCE
        or (b + c) < a - TRIANGLE_TOLERANCE
    )


def side_from_two_sides_and_angle(a: float, b: float, angle_deg: float) -> float:
    """
    Get the third side of a triangle from two sides and the angle between them.

    Args:
        a, b: Side lengths enclosing the angle
        angle_deg: Included angle in degrees, must be in [0, 180]

    Returns:
        Length of the side opposite the angle

    Raises:
        InvalidAngle: If angle_deg is outside [0, 180]
    """
    if angle_deg < 0 or angle_deg > 180:
        raise InvalidAngle(angle_deg)

    angle_rad = math.radians(angle_deg)
    # max() absorbs a tiny negative from rounding at 0°
    return math.sqrt(max(a * a + b * b - 2.0 * a * b * math.cos(angle_rad), 0.0))


def angle_from_three_sides(a: float, b: float, c: float) -> float:
    """
    Get the angle between sides 'a' and 'b' (opposite side 'c').

    Args:
        a, b: Side lengths enclosing the requested angle
        c: Side length opposite the requested angle

    Returns:
        Angle in degrees, in [0, 180]

    Raises:
        TriangleDoesNotExist: If the sides violate the triangle inequality,
            or 'a' / 'b' is zero so the angle is undefined
    """
    if not triangle_exists(a, b, c) or a <= 0 or b <= 0:
        raise TriangleDoesNotExist(a, b, c)

    cos_value = (a * a + b * b - c * c) / (2.0 * a * b)

    overshoot = abs(cos_value) - 1.0
    if overshoot > ACOS_TOLERANCE:
        warnings.warn(
            f"Cosine {cos_value!r} clipped to [-1, 1] for triangle "
            f"a={a}, b={b}, c={c}."
        )

    return math.degrees(math.acos(np.clip(cos_value, -1.0, 1.0)))


def cos_deg(angle_deg: float) -> float:
    """Cosine of an angle given in degrees."""
    return math.cos(math.radians(angle_deg))


def sin_deg(angle_deg: float) -> float:
    """Sine of an angle given in degrees."""
    return math.sin(math.radians(angle_deg))


def atan2_deg(y: float, x: float) -> float:
    """Polar angle of (x, y) in degrees."""
    return math.degrees(math.atan2(y, x))
