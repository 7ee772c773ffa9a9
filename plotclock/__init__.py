"""
Plotclock Kinematics Module

Closed-form forward and inverse kinematics for the two-servo plotclock
drawing arm.

Modules:
    - plotclock_linkage: Immutable linkage constants (use this to describe the mechanism)
    - plotclock_forward: Servo angles -> marker position
    - plotclock_inverse: Marker position -> servo angles
    - plotclock_triangle: Law-of-cosines primitives, degrees in and out
    - plotclock_types: Point2D and JointAngles value types
    - plotclock_errors: InvalidAngle, TriangleDoesNotExist, LinkageConfigError
    - plotclock_workspace: Servo grid enumeration and forward/inverse agreement check
    - plotclock_cli: plotclock_workspace console tool
"""

from .plotclock_errors import (
    PlotclockError,
    InvalidAngle,
    TriangleDoesNotExist,
    LinkageConfigError,
)
from .plotclock_types import Point2D, JointAngles
from .plotclock_triangle import side_from_two_sides_and_angle, angle_from_three_sides, triangle_exists
from .plotclock_linkage import LinkageConfig
from .plotclock_forward import ForwardKinematics
from .plotclock_inverse import InverseKinematics
from .plotclock_workspace import enumerate_workspace, workspace_bounds, check_round_trip

__all__ = [
    'PlotclockError',
    'InvalidAngle',
    'TriangleDoesNotExist',
    'LinkageConfigError',
    'Point2D',
    'JointAngles',
    'side_from_two_sides_and_angle',
    'angle_from_three_sides',
    'triangle_exists',
    'LinkageConfig',
    'ForwardKinematics',
    'InverseKinematics',
    'enumerate_workspace',
    'workspace_bounds',
    'check_round_trip'
]
