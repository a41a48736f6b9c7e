"""
Configuration & Defaults
========================
This module serves as the central registry for default parameters and
numerical constants.

Why is this file needed?
------------------------
1. Single source: The visualizers, the verification check and the CLI all
   start from the same default values instead of repeating literals.
2. Reproducibility: The shipped verification run is fully described by the
   VERIFY_* constants below.

Units are SI throughout (m, s, m/s, m/s²); angles are in degrees.
"""

# Free fall visualizer
FREE_FALL_HEIGHT: float = 100.0  # m
FREE_FALL_GRAVITY: float = 9.81  # m/s²

# Projectile visualizer
PROJECTILE_VELOCITY: float = 50.0  # m/s
PROJECTILE_ANGLE: float = 45.0  # deg
PROJECTILE_GRAVITY: float = 9.8  # m/s²
PROJECTILE_HEIGHT: float = 0.0  # m

# Time between samples of the drawn trajectory
TRAJECTORY_STEP: float = 0.05  # s

# Shipped analytical-vs-numerical check
VERIFY_VELOCITY: float = 50.0  # m/s
VERIFY_ANGLE: float = 45.0  # deg
VERIFY_GRAVITY: float = 9.82  # m/s²
VERIFY_HEIGHT: float = 0.0  # m
VERIFY_TIME_STEP: float = 0.002  # s
VERIFY_DRAG: float = 0.0  # 1/m, quadratic drag coefficient
VERIFY_TOLERANCE: float = 0.001  # relative error on range
VERIFY_MAX_TIME: float = 100.0  # s, guard against non-terminating runs

# Analytical values below this are treated as zero when computing relative errors
ZERO_TOLERANCE: float = 1e-12
