#!/usr/bin/env python3
"""
Plotclock Error Module

Exceptions for malformed geometry or configuration.

An unreachable pose is not an error: the solvers return None for it.
"""


class PlotclockError(Exception):
    """Base class for plotclock kinematics errors."""


class InvalidAngle(PlotclockError, ValueError):
    """Angle argument outside [0, 180] degrees."""

    def __init__(self, angle_deg: float):
        self.angle_deg = angle_deg
        super().__init__(
            f"Incorrect angle: {angle_deg}. "
            f"Angle of triangle must be in range [0, 180]"
        )


class TriangleDoesNotExist(PlotclockError, ValueError):
    """Three side lengths that cannot close into a triangle."""

    def __init__(self, a: float, b: float, c: float):
        self.sides = (a, b, c)
        super().__init__(f"Triangle a={a}, b={b}, c={c} doesn't exist")


class LinkageConfigError(PlotclockError, ValueError):
    """Malformed linkage constants (non-positive lengths, negative OL)."""
