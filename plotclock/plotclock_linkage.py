#!/usr/bin/env python3
"""
Plotclock Linkage Module

Immutable physical constants of one plotclock mechanism.

Both solvers read the same LinkageConfig instance; nothing mutates it
after construction.
"""

import logging
import math
from dataclasses import dataclass, field

from plotclock_config import physical as phys_config
from plotclock_config import limits as limits_config
from .plotclock_errors import InvalidAngle, LinkageConfigError
from .plotclock_triangle import angle_from_three_sides, side_from_two_sides_and_angle
from .plotclock_types import Point2D

logger = logging.getLogger(__name__)

LINK_NAMES = ('AB', 'AF', 'BG', 'FC', 'CG', 'CD')
ANGLE_NAMES = ('DCF', 'max_FCG', 'max_CFA', 'max_CGB')


@dataclass(frozen=True)
class LinkageConfig:
    """
    Link lengths, fixed coupler angle, origin offsets and joint limits.

    Derived on construction (never recomputed):
        FD:  Side F-D of the fixed coupler triangle F-C-D
        LA:  Horizontal offset of shaft A from the origin (LK + AF)
        DFC: Fixed angle at F between F-D and F-C
    """

    AB: float
    AF: float
    BG: float
    FC: float
    CG: float
    CD: float
    DCF: float
    LK: float = 0.0
    OL: float = 0.0
    max_FCG: float = limits_config.MAX_FCG
    max_CFA: float = limits_config.MAX_CFA
    max_CGB: float = limits_config.MAX_CGB

    FD: float = field(init=False)
    LA: float = field(init=False)
    DFC: float = field(init=False)

    def __post_init__(self):
        for name in LINK_NAMES:
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise LinkageConfigError(f"Link {name} must be a positive length, got {value}")

        if not math.isfinite(self.LK):
            raise LinkageConfigError(f"Offset LK must be finite, got {self.LK}")
        if not math.isfinite(self.OL) or self.OL < 0:
            raise LinkageConfigError(f"Offset OL must be >= 0, got {self.OL}")

        for name in ANGLE_NAMES:
            value = getattr(self, name)
            if not 0 <= value <= 180:
                raise InvalidAngle(value)

        fd = side_from_two_sides_and_angle(self.CD, self.FC, self.DCF)
        # Frozen dataclass: derived fields are written once, here
        object.__setattr__(self, 'FD', fd)
        object.__setattr__(self, 'LA', self.LK + self.AF)
        object.__setattr__(self, 'DFC', angle_from_three_sides(fd, self.FC, self.CD))

        logger.debug(f'LinkageConfig derived FD={self.FD:.4f} LA={self.LA:.4f} DFC={self.DFC:.4f}')

    @classmethod
    def from_config(cls, **overrides) -> 'LinkageConfig':
        """
        Build the reference mechanism from plotclock_config.

        Args:
            **overrides: Replacement values for individual constants,
                e.g. from_config(CD=15.0, OL=5.0)

        Returns:
            LinkageConfig instance
        """
        values = {
            'AB': phys_config.AB,
            'AF': phys_config.AF,
            'BG': phys_config.BG,
            'FC': phys_config.FC,
            'CG': phys_config.CG,
            'CD': phys_config.CD,
            'DCF': phys_config.DCF,
            'LK': phys_config.LK,
            'OL': phys_config.OL,
            'max_FCG': limits_config.MAX_FCG,
            'max_CFA': limits_config.MAX_CFA,
            'max_CGB': limits_config.MAX_CGB,
        }
        unknown = set(overrides) - set(values)
        if unknown:
            raise LinkageConfigError(f"Unknown linkage constants: {sorted(unknown)}")
        values.update(overrides)
        return cls(**values)

    @property
    def servo1_shaft(self) -> Point2D:
        """Position of shaft A in plane coordinates."""
        return Point2D(self.LA, self.OL)

    @property
    def servo2_shaft(self) -> Point2D:
        """Position of shaft B in plane coordinates."""
        return Point2D(self.LA + self.AB, self.OL)
