"""
Playback Clock
==============
Time bookkeeping for a host that animates the models.

The host keeps its own timer and playback flags; this only advances a time
value by a frame interval and stops it at the end of the motion (impact time
for free fall, time of flight for a projectile).
"""
from __future__ import annotations

from motionlab.utils import require_non_negative


def advance_time(t: float, dt: float, end_time: float) -> tuple[float, bool]:
    """
    Advance the playback time by one frame.

    Args:
        t: Current time in seconds.
        dt: Elapsed wall time since the previous frame in seconds.
        end_time: Time at which the motion ends in seconds.

    Raises:
        InvalidDomainError: If any argument is negative or not finite.

    Returns:
        A tuple (new_time, finished). `new_time` never exceeds `end_time`.
    """
    t = require_non_negative("t", t)
    dt = require_non_negative("dt", dt)
    end_time = require_non_negative("end_time", end_time)

    new_time = t + dt
    if new_time >= end_time:
        return end_time, True
    return new_time, False
