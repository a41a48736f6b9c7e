"""Command-line interface."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from motionlab import config
from motionlab.controller.verification import IntegrationVerifier
from motionlab.errors import InvalidDomainError, NonConvergenceError
from motionlab.logging_config import setup_logging
from motionlab.model.free_fall import FreeFallModel
from motionlab.model.projectile import ProjectileModel

logger = logging.getLogger("motionlab.__main__")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="motionlab",
        description="Free fall and projectile kinematics with a numerical accuracy check.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG logging.")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    verify = subparsers.add_parser("verify", help="Compare closed-form and integrated projectile flight.")
    verify.add_argument("--v0", type=float, default=config.VERIFY_VELOCITY, help="Launch speed (m/s).")
    verify.add_argument("--angle", type=float, default=config.VERIFY_ANGLE, help="Launch angle (deg).")
    verify.add_argument("--gravity", type=float, default=config.VERIFY_GRAVITY, help="Gravity (m/s²).")
    verify.add_argument("--height", type=float, default=config.VERIFY_HEIGHT, help="Launch height (m).")
    verify.add_argument("--dt", type=float, default=config.VERIFY_TIME_STEP, help="Time step (s).")
    verify.add_argument("--drag", type=float, default=config.VERIFY_DRAG, help="Quadratic drag coefficient (1/m).")
    verify.add_argument("--tolerance", type=float, default=config.VERIFY_TOLERANCE, help="Relative error limit on range.")
    verify.add_argument("--max-time", type=float, default=config.VERIFY_MAX_TIME, help="Integration time guard (s).")
    verify.add_argument("--plot", action="store_true", help="Show the comparison plot.")

    freefall = subparsers.add_parser("freefall", help="Free fall from rest.")
    freefall.add_argument("--height", type=float, default=config.FREE_FALL_HEIGHT, help="Initial height (m).")
    freefall.add_argument("--gravity", type=float, default=config.FREE_FALL_GRAVITY, help="Gravity (m/s²).")
    freefall.add_argument("--time", type=float, default=None, help="Print the state at this time (s).")
    freefall.add_argument("--plot", action="store_true", help="Show height and speed over time.")

    projectile = subparsers.add_parser("projectile", help="Projectile flight statistics.")
    projectile.add_argument("--v0", type=float, default=config.PROJECTILE_VELOCITY, help="Launch speed (m/s).")
    projectile.add_argument("--angle", type=float, default=config.PROJECTILE_ANGLE, help="Launch angle (deg).")
    projectile.add_argument("--gravity", type=float, default=config.PROJECTILE_GRAVITY, help="Gravity (m/s²).")
    projectile.add_argument("--height", type=float, default=config.PROJECTILE_HEIGHT, help="Launch height (m).")
    projectile.add_argument("--time", type=float, default=None, help="Print the state at this time (s).")
    projectile.add_argument("--plot", action="store_true", help="Show the trajectory.")

    return parser


def run_verify(args: argparse.Namespace) -> int:
    model = ProjectileModel(v0=args.v0, theta=args.angle, g=args.gravity, h0=args.height)
    verifier = IntegrationVerifier(model, max_time=args.max_time, record_path=args.plot)
    result = verifier.run(dt=args.dt, drag_coefficient=args.drag, tolerance=args.tolerance)

    print(f"Expected Range: {result.analytical_range:.4f}")
    print(f"Expected Height: {result.analytical_apex:.4f}")
    print(f"Expected Time: {result.analytical_time:.4f}")
    print(f"Simulated Range: {result.simulated_range:.4f}")
    print(f"Simulated Height: {result.simulated_apex:.4f}")
    print(f"Simulated Time: {result.simulated_time:.4f}")
    print(f"Range Error: {result.relative_error * 100:.4f} %")
    print(f"Height Error: {result.apex_relative_error * 100:.4f} %")
    print("PASSED" if result.passed else "FAILED")

    if args.plot:
        result.plot()
    return 0 if result.passed else 1


def run_freefall(args: argparse.Namespace) -> int:
    model = FreeFallModel(h0=args.height, g=args.gravity)
    print(f"Impact Time: {model.impact_time:.2f} s")
    print(f"Impact Velocity: {model.impact_velocity:.2f} m/s")

    if args.time is not None:
        state = model.state_at(args.time)
        print(f"t = {state.t:.2f} s: y = {state.y:.2f} m, v = {state.v:.2f} m/s, impacted = {state.impacted}")

    if args.plot:
        model.plot()
    return 0


def run_projectile(args: argparse.Namespace) -> int:
    model = ProjectileModel(v0=args.v0, theta=args.angle, g=args.gravity, h0=args.height)
    stats = model.flight_stats()
    print(f"Time of Flight: {stats.time_of_flight:.2f} s")
    print(f"Apex Height: {stats.apex_height:.2f} m")
    print(f"Range: {stats.range:.2f} m")

    if args.time is not None:
        state = model.state_at(args.time)
        print(
            f"t = {state.t:.2f} s: x = {state.x:.2f} m, y = {max(0.0, state.y):.2f} m, "
            f"v = {state.speed:.2f} m/s, vx = {state.vx:.2f} m/s, vy = {state.vy:.2f} m/s"
        )

    if args.plot:
        model.plot()
    return 0


COMMANDS = {
    "verify": run_verify,
    "freefall": run_freefall,
    "projectile": run_projectile,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO, log_file=args.log_file)

    try:
        return COMMANDS[args.command](args)
    except (InvalidDomainError, NonConvergenceError) as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
