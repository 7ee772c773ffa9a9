#!/usr/bin/env python3
"""
Plotclock Types Module

Plain value types exchanged between the forward and inverse solvers.
"""

from typing import NamedTuple


class Point2D(NamedTuple):
    """Marker position in plane units."""

    x: float
    y: float


class JointAngles(NamedTuple):
    """Servo angles in degrees, each in [0, 180]."""

    servo1: float
    servo2: float
