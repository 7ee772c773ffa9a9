#!/usr/bin/env python3
"""
Plotclock Inverse Kinematics Module

Marker position -> servo angles.

Rebuilds the forward triangle chain backwards from the marker: first the
fixed offset A/F/D, then A/F/C, then the second shaft through C/B/G. The
two branch decisions mirror the forward solver. Targets the linkage cannot
reach return None; this includes points too far from or too close to shaft
A for any triangle to close.
"""

import logging
import math
from typing import Optional

from .plotclock_linkage import LinkageConfig
from .plotclock_triangle import (
    angle_from_three_sides,
    atan2_deg,
    side_from_two_sides_and_angle,
    triangle_exists,
)
from .plotclock_types import JointAngles

logger = logging.getLogger(__name__)


class InverseKinematics:
    """Servo angle solver for one linkage."""

    def __init__(self, config: LinkageConfig):
        """
        Initialize inverse solver.

        Args:
            config: Linkage constants, shared with the forward solver
        """
        self.config = config

    def solve(self, x: float, y: float) -> Optional[JointAngles]:
        """
        Get servo angles for the specified marker position.

        Args:
            x, y: Marker position in plane units

        Returns:
            JointAngles in degrees, or None if the position is unreachable
        """
        cfg = self.config

        if not (math.isfinite(x) and math.isfinite(y)):
            return self._reject('non-finite target', x, y)

        DN = y - cfg.OL
        if DN < 0:
            return self._reject('below baseline', x, y)

        NA = abs(cfg.LA - x)
        AD = math.hypot(DN, NA)
        NAD = atan2_deg(DN, NA)

        # Triangle A-F-D
        if not triangle_exists(cfg.FD, cfg.AF, AD):
            return self._reject('A-F-D does not close', x, y)
        DFA = angle_from_three_sides(cfg.FD, cfg.AF, AD)
        CFA = DFA - cfg.DFC

        if CFA < 0:
            return self._reject('CFA < 0', x, y)
        if CFA > cfg.max_CFA:
            return self._reject('CFA > max_CFA', x, y)

        # Triangle A-F-C
        CA = side_from_two_sides_and_angle(cfg.FC, cfg.AF, CFA)
        if CA <= 0:
            return self._reject('C on shaft A', x, y)
        FAC = angle_from_three_sides(cfg.AF, CA, cfg.FC)
        FCA = 180 - CFA - FAC

        # Triangle A-C-D, same wrap rule as the forward solver
        if AD <= 0 or not triangle_exists(AD, CA, cfg.CD):
            return self._reject('A-C-D does not close', x, y)
        DAC = angle_from_three_sides(AD, CA, cfg.CD)
        FAD = FAC - DAC if cfg.DCF + FCA <= 180 else FAC + DAC

        # Marker left or right of shaft A
        FAB = FAD + (180 - NAD) if x < cfg.LA else FAD + NAD
        if FAB > 180:
            return self._reject('FAB > 180', x, y)
        if FAB < 0:
            return self._reject('FAB < 0', x, y)

        # Triangle A-B-C, then B-C-G
        CAB = FAB - FAC
        if not 0 <= CAB <= 180:
            return self._reject('CAB outside [0, 180]', x, y)
        CB = side_from_two_sides_and_angle(CA, cfg.AB, CAB)
        if CB <= 0 or not triangle_exists(CB, cfg.BG, cfg.CG):
            return self._reject('B-C-G does not close', x, y)
        ABC = angle_from_three_sides(cfg.AB, CB, CA)
        CBG = angle_from_three_sides(CB, cfg.BG, cfg.CG)
        CGB = angle_from_three_sides(cfg.CG, cfg.BG, CB)
        if CGB > cfg.max_CGB:
            return self._reject('CGB > max_CGB', x, y)

        ABG = ABC + CBG
        if ABG > 180:
            return self._reject('ABG > 180', x, y)

        ACB = 180 - CAB - ABC
        BCG = 180 - CBG - CGB
        FCG = FCA + ACB + BCG
        if FCG > cfg.max_FCG:
            return self._reject('FCG > max_FCG', x, y)

        return JointAngles(servo1=FAB, servo2=180 - ABG)

    @staticmethod
    def _reject(gate: str, x: float, y: float) -> None:
        logger.debug(f'IK unreachable ({gate}): x={x} y={y}')
        return None
