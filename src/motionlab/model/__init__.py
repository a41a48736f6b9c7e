"""
The MODEL layer contains the closed-form kinematics.
It has NO knowledge of drawing, input handling or animation timers.
Every function is a pure evaluation of the launch parameters and a time value.
"""
from motionlab.model.free_fall import (
    FreeFallModel,
    FreeFallState,
    impact_time,
    impact_velocity,
    position_at,
    velocity_at,
)
from motionlab.model.playback import advance_time
from motionlab.model.projectile import FlightStats, ProjectileModel, ProjectileState, velocity_components
