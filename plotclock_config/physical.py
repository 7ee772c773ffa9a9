"""
Plotclock Physical Parameters
=============================
Link lengths and fixed angles of the two-servo plotclock linkage.

This is the MASTER SOURCE for the reference mechanism.
LinkageConfig.from_config() reads from here; pass keyword overrides
to describe a different physical build.

Named points:
    A, B - servo shafts (A = servo1, B = servo2), both on the baseline
    F, G - elbow joints at the end of the servo arms
    C    - coupler joint where the two forearms meet
    D    - marker (pen tip), rigidly offset from C on the F-C link
    K, L - reference points placing the coordinate origin relative to A
"""

# =============================================================================
# SERVO ARMS (plane units)
# =============================================================================

AB = 25.6
"""Distance between the two servo shafts A and B"""

AF = 35.0
"""Servo1 arm length, shaft A to elbow F"""

BG = 35.0
"""Servo2 arm length, shaft B to elbow G"""

# =============================================================================
# FOREARMS AND MARKER OFFSET (plane units)
# =============================================================================

FC = 45.0
"""Left forearm length, elbow F to coupler C"""

CG = 45.0
"""Right forearm length, coupler C to elbow G"""

CD = 13.2
"""Marker offset, coupler C to marker D"""

# =============================================================================
# FIXED ANGLES (degrees)
# =============================================================================

DCF = 133.5
"""Fixed angle between the marker offset C-D and the forearm C-F"""

# =============================================================================
# COORDINATE ORIGIN OFFSETS (plane units)
# =============================================================================

LK = 0.0
"""Horizontal offset of the origin; any value"""

OL = 0.0
"""Vertical offset of the baseline above the origin; must be >= 0"""
