#!/usr/bin/env python3
"""
Plotclock Forward Kinematics Module

Servo angles -> marker position.

The linkage is walked as a chain of triangles: shafts A/B with elbow G,
then A/F/G, then the coupler F/C/G, then A/F/C, and finally the fixed
marker offset A/C/D. Every joint-limit check is a feasibility gate: a
failing pose returns None.
"""

import logging
from typing import Optional

from plotclock_config import limits as limits_config
from .plotclock_linkage import LinkageConfig
from .plotclock_triangle import (
    angle_from_three_sides,
    cos_deg,
    side_from_two_sides_and_angle,
    sin_deg,
    triangle_exists,
)
from .plotclock_types import Point2D

logger = logging.getLogger(__name__)

SERVO_MIN = limits_config.SERVO_MIN_ANGLE
SERVO_MAX = limits_config.SERVO_MAX_ANGLE


class ForwardKinematics:
    """Marker position solver for one linkage."""

    def __init__(self, config: LinkageConfig):
        """
        Initialize forward solver.

        Args:
            config: Linkage constants, shared with the inverse solver
        """
        self.config = config

    def solve(self, servo1: float, servo2: float) -> Optional[Point2D]:
        """
        Get marker position relative to the origin.

        Args:
            servo1: Angle of servo1 (shaft A) in degrees
            servo2: Angle of servo2 (shaft B) in degrees

        Returns:
            Point2D, or None if the pose is unreachable
        """
        cfg = self.config

        if not (SERVO_MIN <= servo1 <= SERVO_MAX and SERVO_MIN <= servo2 <= SERVO_MAX):
            return self._reject('servo range', servo1, servo2)

        # Triangle A-B-G
        ABG = 180 - servo2
        AG = side_from_two_sides_and_angle(cfg.AB, cfg.BG, ABG)
        GAB = angle_from_three_sides(AG, cfg.AB, cfg.BG)

        # Arm A-F must have swept past A-G
        FAG = servo1 - GAB
        if FAG < 0:
            return self._reject('FAG < 0', servo1, servo2)

        # Triangle A-F-G, then coupler F-C-G
        FG = side_from_two_sides_and_angle(cfg.AF, AG, FAG)
        if FG < limits_config.MIN_JOINT_SEPARATION:
            return self._reject('F on G', servo1, servo2)
        if not triangle_exists(cfg.FC, cfg.CG, FG):
            return self._reject('F-C-G does not close', servo1, servo2)
        if angle_from_three_sides(cfg.FC, cfg.CG, FG) > cfg.max_FCG:
            return self._reject('FCG > max_FCG', servo1, servo2)

        AFG = angle_from_three_sides(FG, cfg.AF, AG)
        FB = side_from_two_sides_and_angle(cfg.AF, cfg.AB, servo1)

        if angle_from_three_sides(FB, cfg.AB, cfg.AF) > ABG or GAB > servo1:
            return self._reject('F outside A-B-G', servo1, servo2)

        FGB = angle_from_three_sides(FG, cfg.BG, FB)

        CFG = angle_from_three_sides(cfg.FC, FG, cfg.CG)
        CGF = angle_from_three_sides(cfg.CG, FG, cfg.FC)
        CFA = CFG + AFG
        CGB = CGF + FGB

        if CFA > cfg.max_CFA:
            return self._reject('CFA > max_CFA', servo1, servo2)
        if CGB > cfg.max_CGB:
            return self._reject('CGB > max_CGB', servo1, servo2)

        # Triangle A-F-C
        CA = side_from_two_sides_and_angle(cfg.FC, cfg.AF, CFA)
        FCA = angle_from_three_sides(cfg.FC, CA, cfg.AF)
        FAC = 180 - (CFA + FCA)

        # Marker offset: D crosses line C-A once DCF + FCA passes a straight angle
        left_DCA = cfg.DCF + FCA
        wrapped = left_DCA > 180
        DCA = 360 - left_DCA if wrapped else left_DCA

        DA = side_from_two_sides_and_angle(cfg.CD, CA, DCA)
        DAC = angle_from_three_sides(DA, CA, cfg.CD)
        FAD = FAC + DAC if wrapped else FAC - DAC

        # Angle of A-D measured from the baseline towards the origin side
        LAF = 180 - servo1
        LAD = LAF + FAD

        x = cfg.LA - DA * cos_deg(LAD)
        y = DA * sin_deg(LAD) + cfg.OL

        return Point2D(x, y)

    @staticmethod
    def _reject(gate: str, servo1: float, servo2: float) -> None:
        logger.debug(f'FK unreachable ({gate}): servo1={servo1} servo2={servo2}')
        return None
