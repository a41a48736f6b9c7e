"""
Integration Verifier
====================
Re-derives time of flight, apex height and range of a projectile by explicit
fixed-step integration and compares them with the closed-form results.

Why is this file needed?
------------------------
1. Accuracy check: It confirms that the closed-form statistics shown by the
   visualizer agree with a stepwise simulation of the same launch.
2. Drag: The integrator accepts a quadratic drag coefficient, which the closed
   form cannot model. The shipped check runs without drag.

The landing point and time are refined by linear interpolation across the
ground crossing. The apex is the highest sample and is not refined, so the
apex estimate is coarser than the range and time estimates.

The loop runs O(max_time / dt) iterations; do not call it from a per-frame
draw callback.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import TYPE_CHECKING, Optional

import numpy as np
import matplotlib.pyplot as plt

from motionlab import config
from motionlab.errors import NonConvergenceError
from motionlab.model.projectile import FlightStats, ProjectileModel
from motionlab.utils import require_non_negative, require_positive

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def relative_error(simulated: float, analytical: float) -> float:
    """
    |simulated - analytical| / |analytical|.

    Falls back to the absolute difference when the analytical value is
    (numerically) zero.
    """
    difference = abs(simulated - analytical)
    if abs(analytical) < config.ZERO_TOLERANCE:
        return difference
    return difference / abs(analytical)


@dataclass(frozen=True)
class SimulatedFlight:
    """Outcome of one integration run."""
    time_of_flight: float  # s, interpolated
    apex_height: float  # m, highest sample
    range: float  # m, interpolated
    steps: int
    # Sampled path (x, y), only filled when the verifier records it
    path: Optional[npt.NDArray[np.float64]] = field(default=None, repr=False, compare=False)


@dataclass(frozen=True)
class VerificationResult:
    analytical_range: float
    analytical_apex: float
    analytical_time: float
    simulated_range: float
    simulated_apex: float
    simulated_time: float
    relative_error: float  # on range, decides `passed`
    apex_relative_error: float
    time_relative_error: float
    tolerance: float
    passed: bool
    steps: int
    model: Optional[ProjectileModel] = field(default=None, repr=False, compare=False)
    path: Optional[npt.NDArray[np.float64]] = field(default=None, repr=False, compare=False)

    def plot(self) -> None:
        """
        Overlay the simulated path on the closed-form trajectory.
        """
        plt.rcParams["figure.constrained_layout.use"] = True
        fig = plt.figure(figsize=(7, 5))

        if self.model is not None:
            _, x, y = self.model.trajectory()
            plt.plot(x, y, 'b', lw=2, label="Closed form")
        if self.path is not None:
            plt.plot(self.path[:, 0], self.path[:, 1], 'r--', lw=1, label="Integrated")

        plt.plot(self.analytical_range, 0.0, 'bo')
        plt.plot(self.simulated_range, 0.0, 'rx')

        plt.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
        plt.minorticks_on()
        plt.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)

        status = "PASSED" if self.passed else "FAILED"
        plt.title(f"Range error {self.relative_error * 100:.4f} % ({status})")
        plt.xlabel("Distance (m)")
        plt.ylabel("Height (m)")
        plt.legend()
        plt.show()


class IntegrationVerifier:
    """
    Class for checking the closed-form projectile statistics against a
    fixed-step integration.
    """

    def __init__(
        self,
        model: ProjectileModel,
        max_time: float = config.VERIFY_MAX_TIME,
        record_path: bool = False,
    ) -> None:
        """
        Args:
            model: Launch parameters to verify.
            max_time: Time guard of the integration loop in seconds.
            record_path: Keep every integrated (x, y) sample for plotting.
        """
        self.model = model
        self.max_time = require_positive("max_time", max_time)
        self.record_path = record_path

    def simulate(
        self,
        dt: float = config.VERIFY_TIME_STEP,
        drag_coefficient: float = config.VERIFY_DRAG,
    ) -> SimulatedFlight:
        """
        Integrate the flight until the projectile crosses the ground.

        Velocity is updated first, then the position advances with the new
        velocity. Drag acts against the velocity: a = -k*|v|*v - g*e_y.

        Args:
            dt: Time step in seconds.
            drag_coefficient: Quadratic drag coefficient k in 1/m (0 = no drag).

        Raises:
            InvalidDomainError: If g <= 0, h0 < 0, dt <= 0 or k < 0.
            NonConvergenceError: If `max_time` is reached before landing.

        Returns:
            The interpolated landing time and range and the sampled apex.
        """
        g = require_positive("g", self.model.g)
        h0 = require_non_negative("h0", self.model.h0)
        dt = require_positive("dt", dt)
        k = require_non_negative("drag_coefficient", drag_coefficient)

        vx, vy = self.model.initial_velocity
        t = 0.0
        x = 0.0
        y = h0
        max_y = y
        steps = 0
        landed = False
        path = [(x, y)] if self.record_path else None

        while y >= 0 and t < self.max_time:
            prev_x, prev_y, prev_t = x, y, t

            v = math.sqrt(vx * vx + vy * vy)
            ax = -(k * v * vx)
            ay = -g - (k * v * vy)

            vx += ax * dt
            vy += ay * dt

            x += vx * dt
            y += vy * dt
            t += dt
            steps += 1

            if y > max_y:
                max_y = y

            if y < 0:
                # Linear interpolation back to the ground crossing
                fraction = (0 - prev_y) / (y - prev_y)
                x = prev_x + (x - prev_x) * fraction
                t = prev_t + dt * fraction
                y = 0.0
                landed = True

            if path is not None:
                path.append((x, y))

            if landed:
                break

        if not landed:
            raise NonConvergenceError(
                f"No ground crossing within {self.max_time:.2f} s "
                f"(dt={dt}, steps={steps}, y={y:.4f} m)."
            )

        return SimulatedFlight(
            time_of_flight=t,
            apex_height=max_y,
            range=x,
            steps=steps,
            path=np.array(path, dtype=np.float64) if path is not None else None,
        )

    def run(
        self,
        dt: float = config.VERIFY_TIME_STEP,
        drag_coefficient: float = config.VERIFY_DRAG,
        tolerance: float = config.VERIFY_TOLERANCE,
    ) -> VerificationResult:
        """
        Simulate the flight and compare it with the closed-form statistics.

        Args:
            dt: Time step in seconds.
            drag_coefficient: Quadratic drag coefficient in 1/m.
            tolerance: Maximum accepted relative error on the range.

        Raises:
            InvalidDomainError: For invalid launch or integration parameters.
            NonConvergenceError: If the simulation does not land in time.

        Returns:
            The comparison of analytical and simulated values.
        """
        tolerance = require_positive("tolerance", tolerance)
        logger.debug(
            f"Verifying v0={self.model.v0} m/s, theta={self.model.theta} deg, g={self.model.g} m/s², "
            f"h0={self.model.h0} m with dt={dt} s, k={drag_coefficient}, tolerance={tolerance}"
        )

        analytical: FlightStats = self.model.flight_stats()
        simulated = self.simulate(dt=dt, drag_coefficient=drag_coefficient)

        range_error = relative_error(simulated.range, analytical.range)
        result = VerificationResult(
            analytical_range=analytical.range,
            analytical_apex=analytical.apex_height,
            analytical_time=analytical.time_of_flight,
            simulated_range=simulated.range,
            simulated_apex=simulated.apex_height,
            simulated_time=simulated.time_of_flight,
            relative_error=range_error,
            apex_relative_error=relative_error(simulated.apex_height, analytical.apex_height),
            time_relative_error=relative_error(simulated.time_of_flight, analytical.time_of_flight),
            tolerance=tolerance,
            passed=range_error < tolerance,
            steps=simulated.steps,
            model=self.model,
            path=simulated.path,
        )

        logger.info(
            f"Range: expected {result.analytical_range:.4f} m, simulated {result.simulated_range:.4f} m "
            f"({result.relative_error * 100:.4f} %) after {result.steps} steps"
        )
        logger.debug(
            f"Apex: expected {result.analytical_apex:.4f} m, simulated {result.simulated_apex:.4f} m "
            f"({result.apex_relative_error * 100:.4f} %)"
        )
        logger.debug(
            f"Time: expected {result.analytical_time:.4f} s, simulated {result.simulated_time:.4f} s "
            f"({result.time_relative_error * 100:.4f} %)"
        )
        return result


def verify_projectile(
    v0: float = config.VERIFY_VELOCITY,
    theta: float = config.VERIFY_ANGLE,
    g: float = config.VERIFY_GRAVITY,
    dt: float = config.VERIFY_TIME_STEP,
    drag_coefficient: float = config.VERIFY_DRAG,
    tolerance: float = config.VERIFY_TOLERANCE,
    h0: float = config.VERIFY_HEIGHT,
    max_time: float = config.VERIFY_MAX_TIME,
) -> VerificationResult:
    """
    Run the analytical-vs-numerical check for one launch.

    With the defaults this is the shipped check: v0=50 m/s, 45°, g=9.82 m/s²,
    dt=0.002 s, no drag, 0.1 % tolerance on the range.
    """
    model = ProjectileModel(v0=v0, theta=theta, g=g, h0=h0)
    verifier = IntegrationVerifier(model, max_time=max_time)
    return verifier.run(dt=dt, drag_coefficient=drag_coefficient, tolerance=tolerance)
