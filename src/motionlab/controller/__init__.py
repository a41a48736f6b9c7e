"""
Verification Engine
===================
Numerical cross-check of the closed-form projectile model.

Note: This module should be pure Python/NumPy and is never called per frame.
"""
from motionlab.controller.verification import (
    IntegrationVerifier,
    SimulatedFlight,
    VerificationResult,
    relative_error,
    verify_projectile,
)
