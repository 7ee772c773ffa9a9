#!/usr/bin/env python3
"""
Plotclock Workspace Module

Bulk evaluation of the forward solver over the servo grid.

Used by the workspace plot and by the forward/inverse agreement check.
"""

import logging
from typing import Dict

import numpy as np

from plotclock_config import limits as limits_config
from .plotclock_forward import ForwardKinematics
from .plotclock_inverse import InverseKinematics

logger = logging.getLogger(__name__)


def servo_sweep(step: int = limits_config.WORKSPACE_STEP) -> range:
    """Servo angles from SERVO_MAX_ANGLE down to SERVO_MIN_ANGLE."""
    if step < 1:
        raise ValueError(f"Sweep step must be a positive integer, got {step}")
    return range(int(limits_config.SERVO_MAX_ANGLE), int(limits_config.SERVO_MIN_ANGLE) - 1, -step)


def enumerate_workspace(forward: ForwardKinematics,
                        step: int = limits_config.WORKSPACE_STEP) -> Dict:
    """
    Evaluate the forward solver for every (servo1, servo2) grid pair.

    Args:
        forward: Forward solver of the linkage
        step: Servo angle increment in degrees (default 1)

    Returns:
        Dictionary containing:
            - 'servo_angles': np.ndarray (N, 2) - reachable [servo1, servo2] pairs
            - 'points': np.ndarray (N, 2) - marker [x, y] for each pair
            - 'reachable_count': int - N
            - 'checked_count': int - number of grid pairs evaluated
    """
    angles = []
    points = []
    checked = 0

    for servo1 in servo_sweep(step):
        for servo2 in servo_sweep(step):
            checked += 1
            position = forward.solve(servo1, servo2)
            if position is not None:
                angles.append((servo1, servo2))
                points.append(position)

    servo_angles = np.array(angles, dtype=np.float64).reshape(-1, 2)
    marker_points = np.array(points, dtype=np.float64).reshape(-1, 2)

    logger.info(f'Workspace: {len(points)} of {checked} poses reachable (step {step} deg)')

    return {
        'servo_angles': servo_angles,
        'points': marker_points,
        'reachable_count': len(points),
        'checked_count': checked
    }


def workspace_bounds(points: np.ndarray) -> Dict:
    """
    Bounding box of a set of marker positions.

    Args:
        points: Array of shape (N, 2)

    Returns:
        Dictionary with 'min_x', 'max_x', 'min_y', 'max_y'
    """
    points = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    if len(points) == 0:
        raise ValueError("Workspace is empty: no reachable points")

    return {
        'min_x': float(points[:, 0].min()),
        'max_x': float(points[:, 0].max()),
        'min_y': float(points[:, 1].min()),
        'max_y': float(points[:, 1].max())
    }


def check_round_trip(forward: ForwardKinematics,
                     inverse: InverseKinematics,
                     tolerance: float = limits_config.ROUND_TRIP_TOLERANCE,
                     step: int = limits_config.WORKSPACE_STEP) -> Dict:
    """
    Feed every reachable marker position back through the inverse solver.

    Args:
        forward: Forward solver
        inverse: Inverse solver built on the same LinkageConfig
        tolerance: Allowed servo angle difference in degrees
        step: Servo angle increment in degrees

    Returns:
        Dictionary containing:
            - 'checked': int - reachable poses tested
            - 'matched': int - poses recovered within tolerance
            - 'mismatched': list of (servo1, servo2, solved) where solved is
              the JointAngles returned by the inverse solver, or None
    """
    workspace = enumerate_workspace(forward, step)
    matched = 0
    mismatched = []

    for (servo1, servo2), (x, y) in zip(workspace['servo_angles'], workspace['points']):
        solved = inverse.solve(float(x), float(y))
        if (solved is not None
                and abs(solved.servo1 - servo1) <= tolerance
                and abs(solved.servo2 - servo2) <= tolerance):
            matched += 1
        else:
            mismatched.append((int(servo1), int(servo2), solved))

    logger.info(f'Round trip: {matched} of {workspace["reachable_count"]} poses within {tolerance} deg')

    return {
        'checked': workspace['reachable_count'],
        'matched': matched,
        'mismatched': mismatched
    }
