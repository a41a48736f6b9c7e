"""
Projectile Motion
=================
Closed-form 2D motion of a projectile launched at speed `v0` and angle
`theta` (degrees above horizontal) from height `h0`, without drag.

State at a given time and the aggregate flight statistics are pure functions
of the launch parameters and are recomputed on every call.
"""
from __future__ import annotations

from dataclasses import dataclass
import math
from typing import TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt

from motionlab import config
from motionlab.errors import InvalidDomainError
from motionlab.utils import deg_to_rad, require_finite, require_non_negative, require_positive

if TYPE_CHECKING:
    import numpy.typing as npt


def velocity_components(v0: float, theta: float) -> tuple[float, float]:
    """
    Split the launch speed into horizontal and vertical components.

    Args:
        v0: Launch speed in m/s.
        theta: Launch angle in degrees.

    Returns:
        A tuple (vx0, vy0) in m/s.
    """
    rad = deg_to_rad(theta)
    return v0 * math.cos(rad), v0 * math.sin(rad)


@dataclass(frozen=True)
class ProjectileState:
    t: float  # s
    x: float  # m
    y: float  # m
    vx: float  # m/s
    vy: float  # m/s
    speed: float  # m/s


@dataclass(frozen=True)
class FlightStats:
    time_of_flight: float  # s
    apex_height: float  # m
    range: float  # m


@dataclass(frozen=True)
class ProjectileModel:
    """
    Launch parameters of a drag-free projectile.

    Only finiteness and v0 >= 0 are checked here. Gravity and launch height are
    checked by the operations that need them, so that `state_at` stays usable
    for any finite `g`.
    """
    v0: float = config.PROJECTILE_VELOCITY  # m/s
    theta: float = config.PROJECTILE_ANGLE  # deg
    g: float = config.PROJECTILE_GRAVITY  # m/s²
    h0: float = config.PROJECTILE_HEIGHT  # m

    def __post_init__(self) -> None:
        require_non_negative("v0", self.v0)
        require_finite("theta", self.theta)
        require_finite("g", self.g)
        require_finite("h0", self.h0)

    @property
    def initial_velocity(self) -> tuple[float, float]:
        return velocity_components(self.v0, self.theta)

    def state_at(self, t: float) -> ProjectileState:
        """
        Position and velocity at time `t` after launch.

        The parabola is evaluated as is; the host decides what to show once
        the projectile has landed.

        Raises:
            InvalidDomainError: If `t` is negative or not finite.
        """
        t = require_non_negative("t", t)
        vx0, vy0 = self.initial_velocity

        x = vx0 * t
        y = self.h0 + vy0 * t - 0.5 * self.g * t * t

        vx = vx0
        vy = vy0 - self.g * t
        speed = math.sqrt(vx * vx + vy * vy)

        return ProjectileState(t=t, x=x, y=y, vx=vx, vy=vy, speed=speed)

    def flight_stats(self) -> FlightStats:
        """
        Time of flight, apex height and range of the trajectory.

        Time of flight is the positive root of -0.5*g*t² + vy0*t + h0 = 0.

        Raises:
            InvalidDomainError: If g <= 0, or if h0 < 0 (launch below the ground
                datum is outside the closed form).
        """
        g = require_positive("g", self.g)
        if self.h0 < 0:
            raise InvalidDomainError(
                f"'h0' must be >= 0 for the time-of-flight solution, got {self.h0}."
            )
        vx0, vy0 = self.initial_velocity

        t_peak = vy0 / g
        if t_peak < 0:
            # Launched downwards, the launch point is the highest point
            apex_height = self.h0
        else:
            apex_height = self.h0 + vy0 * t_peak - 0.5 * g * t_peak * t_peak

        discriminant = math.sqrt(vy0 * vy0 + 2 * g * self.h0)
        time_of_flight = (vy0 + discriminant) / g

        return FlightStats(
            time_of_flight=time_of_flight,
            apex_height=apex_height,
            range=vx0 * time_of_flight,
        )

    def trajectory(
        self,
        step: float = config.TRAJECTORY_STEP,
    ) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64], npt.NDArray[np.float64]]:
        """
        Sample the flight path from launch to landing.

        Args:
            step: Time between samples in seconds.

        Returns:
            Arrays (t, x, y). Samples are `step` apart and the last one is
            always exactly at the time of flight.
        """
        step = require_positive("step", step)
        t_flight = self.flight_stats().time_of_flight
        vx0, vy0 = self.initial_velocity

        t = np.arange(0.0, t_flight, step)
        t = np.append(t, t_flight)

        x = vx0 * t
        y = self.h0 + vy0 * t - 0.5 * self.g * t ** 2
        return t, x, y

    def plot(self) -> None:
        """
        Plot the trajectory with its apex and landing point.
        """
        stats = self.flight_stats()
        _, x, y = self.trajectory()
        vx0, vy0 = self.initial_velocity
        t_apex = max(vy0 / self.g, 0.0)

        plt.rcParams["figure.constrained_layout.use"] = True
        fig = plt.figure(figsize=(7, 5))

        plt.plot(x, y, 'b--', lw=2)
        plt.plot(vx0 * t_apex, stats.apex_height, 'r^', label=f"Apex {stats.apex_height:.2f} m")
        plt.plot(stats.range, 0.0, 'ko', label=f"Range {stats.range:.2f} m")

        plt.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
        plt.minorticks_on()
        plt.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)

        plt.title(f"Projectile, v0 = {self.v0:g} m/s, θ = {self.theta:g}°")
        plt.xlabel("Distance (m)")
        plt.ylabel("Height (m)")
        plt.legend()
        plt.axis("equal")
        plt.show()
