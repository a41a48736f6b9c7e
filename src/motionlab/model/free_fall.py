"""
Free Fall
=========
Closed-form vertical drop of a point mass from rest under constant gravity.

Every query is an independent evaluation of (h0, g, t); nothing is stepped or
cached between calls. The host owns the clock and calls these once per frame.

Once the body reaches the ground the position stays at 0 and the velocity
stays at the impact speed sqrt(2*g*h0) instead of growing as g*t.
"""
from __future__ import annotations

from dataclasses import dataclass
import math
from typing import TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt

from motionlab import config
from motionlab.utils import require_non_negative, require_positive

if TYPE_CHECKING:
    import numpy.typing as npt


def _check_domain(h0: float, g: float, t: float) -> tuple[float, float, float]:
    return (
        require_non_negative("h0", h0),
        require_positive("g", g),
        require_non_negative("t", t),
    )


def impact_time(h0: float, g: float) -> float:
    """
    Time at which a body dropped from rest at `h0` reaches the ground.

    Args:
        h0: Initial height in meters.
        g: Gravitational acceleration in m/s².

    Returns:
        Time in seconds.
    """
    h0 = require_non_negative("h0", h0)
    g = require_positive("g", g)
    return math.sqrt(2 * h0 / g)


def impact_velocity(h0: float, g: float) -> float:
    """Speed in m/s at the moment of impact, g*sqrt(2*h0/g)."""
    h0 = require_non_negative("h0", h0)
    g = require_positive("g", g)
    return g * math.sqrt(2 * h0 / g)


def position_at(h0: float, g: float, t: float) -> float:
    """
    Height above ground at time `t`, clamped at 0 after impact.

    Raises:
        InvalidDomainError: If g <= 0, h0 < 0, t < 0 or any input is not finite.
    """
    h0, g, t = _check_domain(h0, g, t)
    return max(0.0, h0 - 0.5 * g * t * t)


def velocity_at(h0: float, g: float, t: float) -> float:
    """
    Downward speed at time `t`.

    Returns g*t while airborne and the constant impact speed once the body
    is on the ground.

    Raises:
        InvalidDomainError: If g <= 0, h0 < 0, t < 0 or any input is not finite.
    """
    h0, g, t = _check_domain(h0, g, t)
    if h0 - 0.5 * g * t * t <= 0:
        return g * math.sqrt(2 * h0 / g)
    return g * t


@dataclass(frozen=True)
class FreeFallState:
    """Snapshot of the falling body at one instant."""
    h0: float  # m
    g: float  # m/s²
    t: float  # s
    y: float  # m
    v: float  # m/s
    impacted: bool


@dataclass(frozen=True)
class FreeFallModel:
    """
    Free fall from rest at height `h0` under gravity `g`.
    """
    h0: float = config.FREE_FALL_HEIGHT  # m
    g: float = config.FREE_FALL_GRAVITY  # m/s²

    def __post_init__(self) -> None:
        require_non_negative("h0", self.h0)
        require_positive("g", self.g)

    @property
    def impact_time(self) -> float:
        return impact_time(self.h0, self.g)

    @property
    def impact_velocity(self) -> float:
        return impact_velocity(self.h0, self.g)

    def position_at(self, t: float) -> float:
        return position_at(self.h0, self.g, t)

    def velocity_at(self, t: float) -> float:
        return velocity_at(self.h0, self.g, t)

    def is_impacted(self, t: float) -> bool:
        require_non_negative("t", t)
        return self.h0 - 0.5 * self.g * t * t <= 0

    def state_at(self, t: float) -> FreeFallState:
        """
        Evaluate the full state at time `t`.

        Args:
            t: Elapsed time in seconds since release.

        Returns:
            A FreeFallState derived from (h0, g, t).
        """
        return FreeFallState(
            h0=self.h0,
            g=self.g,
            t=float(t),
            y=self.position_at(t),
            v=self.velocity_at(t),
            impacted=self.is_impacted(t),
        )

    def sample(
        self,
        times: list[float] | npt.NDArray[np.float64],
    ) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
        """
        Vectorised evaluation of height and speed, e.g. over the frame times of a trail.

        Args:
            times: Times in seconds, all >= 0.

        Raises:
            InvalidDomainError: If any time is negative or not finite.

        Returns:
            A tuple (y, v) of arrays with the same shape as `times`.
        """
        t = np.asarray(times, dtype=np.float64)
        if not np.all(np.isfinite(t)) or np.any(t < 0):
            # Reuse the scalar check to produce the error message
            for value in t.ravel():
                require_non_negative("t", value)

        raw = self.h0 - 0.5 * self.g * t ** 2
        impacted = raw <= 0
        y = np.where(impacted, 0.0, raw)
        v = np.where(impacted, self.impact_velocity, self.g * t)
        return y, v

    def plot(self) -> None:
        """
        Plot height and speed from release until shortly after impact.
        """
        t_end = self.impact_time * 1.1 or 1.0
        times = np.linspace(0.0, t_end, 500)
        y, v = self.sample(times)

        plt.rcParams["figure.constrained_layout.use"] = True
        fig, ax_y = plt.subplots(figsize=(7, 5))
        ax_v = ax_y.twinx()

        ax_y.plot(times, y, 'b', lw=2, label="Height")
        ax_v.plot(times, v, 'r--', lw=2, label="Speed")
        ax_y.axvline(self.impact_time, color='gray', lw=1, linestyle=':')

        ax_y.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
        ax_y.minorticks_on()
        ax_y.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)

        ax_y.set_title(f"Free fall from {self.h0:g} m (g = {self.g:g} m/s²)")
        ax_y.set_xlabel("Time (s)")
        ax_y.set_ylabel("Height (m)")
        ax_v.set_ylabel("Speed (m/s)")

        plt.show()
