"""
Error Types
===========
Exceptions raised by the kinematics models and the integration verifier.

Both are raised to the caller and never clamped away: a failure means the
parameters have to be fixed before calling again.
"""


class InvalidDomainError(ValueError):
    """Parameters outside the domain of the closed-form equations (g <= 0, negative height, NaN...)."""


class NonConvergenceError(RuntimeError):
    """The integration loop hit its time guard before the trajectory crossed the ground."""
