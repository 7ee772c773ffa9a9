"""
Visualization Parameters
========================
Parameters for the workspace scatter plot: scale, paddings, colors, sizes.
"""

# =============================================================================
# FIGURE
# =============================================================================

UNITS_PER_INCH = 20.0
"""Plane units drawn per inch of figure size"""

PADDING_HORIZONTAL = 5.0
"""Horizontal padding around the workspace (plane units)"""

PADDING_VERTICAL = 5.0
"""Vertical padding around the workspace (plane units)"""

GRID_STEP = 10.0
"""Spacing of the major grid marks (plane units)"""

GRID_COLOR = 'lightgray'
"""Grid line color"""

# =============================================================================
# MARKERS
# =============================================================================

POINT_COLOR = 'red'
"""Reachable marker position color"""

POINT_SIZE = 4.0
"""Reachable marker position size (points²)"""

SHAFT_COLOR = 'black'
"""Servo shaft marker color"""

SHAFT_SIZE = 40.0
"""Servo shaft marker size (points²)"""
