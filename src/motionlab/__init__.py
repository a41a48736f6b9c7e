"""
motionlab
=========
Kinematics core for the free fall and projectile motion visualizers, plus a
closed-form vs. numerical integration accuracy check.
"""
from motionlab.errors import InvalidDomainError, NonConvergenceError
from motionlab.model import (
    FlightStats,
    FreeFallModel,
    FreeFallState,
    ProjectileModel,
    ProjectileState,
    advance_time,
    velocity_components,
)
from motionlab.controller import IntegrationVerifier, VerificationResult, verify_projectile

__version__ = "0.1.0"
