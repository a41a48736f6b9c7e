from __future__ import annotations

import math

from motionlab.errors import InvalidDomainError


def deg_to_rad(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * math.pi / 180

def require_finite(name: str, value: float) -> float:
    """
    Check that a parameter is a finite real number.

    Args:
        name: Parameter name used in the error message.
        value: Value to check.

    Raises:
        InvalidDomainError: If `value` is NaN or infinite.

    Returns:
        The value as a float.
    """
    value = float(value)
    if not math.isfinite(value):
        raise InvalidDomainError(f"'{name}' must be finite, got {value}.")
    return value

def require_positive(name: str, value: float) -> float:
    """Check that a parameter is finite and strictly positive."""
    value = require_finite(name, value)
    if value <= 0:
        raise InvalidDomainError(f"'{name}' must be > 0, got {value}.")
    return value

def require_non_negative(name: str, value: float) -> float:
    """Check that a parameter is finite and >= 0."""
    value = require_finite(name, value)
    if value < 0:
        raise InvalidDomainError(f"'{name}' must be >= 0, got {value}.")
    return value
