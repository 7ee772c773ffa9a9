"""
Plotclock Configuration Package
===============================

Centralized configuration for the plotclock drawing arm.
All parameters are organized into logical modules:

- physical: Link lengths, fixed coupler angle, coordinate origin offsets
- limits: Servo travel, joint-limit angles, numeric tolerances
- visualization: Workspace plot scale, paddings, colors, sizes

Usage:
    from plotclock_config import physical, limits, visualization

    # Or import specific values
    from plotclock_config.physical import AB, AF, DCF
    from plotclock_config.limits import MAX_FCG
    from plotclock_config.visualization import POINT_COLOR

The kinematics package reads these through plotclock.LinkageConfig.from_config().
"""

# Import all submodules for convenient access
from . import physical
from . import limits
from . import visualization

__version__ = '1.0.0'
__all__ = ['physical', 'limits', 'visualization']
