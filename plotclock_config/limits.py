"""
Plotclock Limit Parameters
==========================
Servo travel, joint-limit angles and numeric tolerances used by the
forward and inverse solvers.
"""

# =============================================================================
# SERVO TRAVEL (degrees)
# =============================================================================

SERVO_MIN_ANGLE = 0.0
"""Lowest commandable servo angle"""

SERVO_MAX_ANGLE = 180.0
"""Highest commandable servo angle"""

# =============================================================================
# JOINT LIMITS (degrees)
# =============================================================================

MAX_FCG = 150.0
"""Maximum opening of the coupler joint C between the two forearms"""

MAX_CFA = 170.0
"""Maximum angle at elbow F between forearm F-C and servo arm F-A"""

MAX_CGB = 170.0
"""Maximum angle at elbow G between forearm G-C and servo arm G-B"""

# =============================================================================
# NUMERIC TOLERANCES
# =============================================================================

ACOS_CLAMP_TOLERANCE = 1e-9
"""Cosine overshoot past [-1, 1] accepted silently before a warning is raised"""

TRIANGLE_INEQUALITY_TOLERANCE = 1e-9
"""Slack on a + b >= c so collinear triangles survive floating-point rounding"""

MIN_JOINT_SEPARATION = 1e-5
"""Distance (plane units) below which elbows F and G count as coincident"""

ROUND_TRIP_TOLERANCE = 1e-3
"""Servo angle agreement (degrees) expected from inverse(forward(angles))"""

# =============================================================================
# WORKSPACE SWEEP
# =============================================================================

WORKSPACE_STEP = 1
"""Servo angle increment (degrees) for workspace enumeration"""
