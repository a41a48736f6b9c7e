import math

import numpy as np
import pytest

from motionlab.errors import InvalidDomainError
from motionlab.model.projectile import ProjectileModel, velocity_components


def test_velocity_components():
    vx, vy = velocity_components(10.0, 90.0)
    assert vx == pytest.approx(0.0, abs=1e-12)
    assert vy == pytest.approx(10.0)

    vx, vy = velocity_components(50.0, 30.0)
    assert vx == pytest.approx(50.0 * math.sqrt(3) / 2)
    assert vy == pytest.approx(25.0)


def test_flight_stats_reference_launch():
    stats = ProjectileModel(v0=50.0, theta=45.0, g=9.8, h0=0.0).flight_stats()
    assert stats.time_of_flight == pytest.approx(7.2154, abs=1e-3)
    assert stats.apex_height == pytest.approx(63.776, abs=1e-3)
    assert stats.range == pytest.approx(255.10, abs=1e-2)


def test_flight_stats_match_level_ground_formulas():
    v0, theta, g = 30.0, 60.0, 9.81
    rad = math.radians(theta)
    stats = ProjectileModel(v0=v0, theta=theta, g=g).flight_stats()
    assert stats.range == pytest.approx(v0 * v0 * math.sin(2 * rad) / g)
    assert stats.apex_height == pytest.approx((v0 * math.sin(rad)) ** 2 / (2 * g))
    assert stats.time_of_flight == pytest.approx(2 * v0 * math.sin(rad) / g)


def test_horizontal_launch_from_height():
    stats = ProjectileModel(v0=10.0, theta=0.0, g=9.8, h0=20.0).flight_stats()
    t = math.sqrt(2 * 20.0 / 9.8)
    assert stats.time_of_flight == pytest.approx(t)
    assert stats.range == pytest.approx(10.0 * t)
    assert stats.apex_height == pytest.approx(20.0)


def test_downward_launch_apex_is_launch_height():
    model = ProjectileModel(v0=15.0, theta=-30.0, g=9.81, h0=40.0)
    stats = model.flight_stats()
    assert stats.apex_height == 40.0
    assert model.state_at(stats.time_of_flight).y == pytest.approx(0.0, abs=1e-9)


@pytest.mark.parametrize("v0, theta", [(50.0, 45.0), (20.0, 75.0), (5.0, 10.0)])
def test_apex_at_half_flight_on_level_ground(v0, theta):
    model = ProjectileModel(v0=v0, theta=theta, g=9.8, h0=0.0)
    stats = model.flight_stats()
    assert model.state_at(stats.time_of_flight / 2).y == pytest.approx(stats.apex_height)


@pytest.mark.parametrize("g", [9.8, 1.62, 0.0, -3.0])
def test_state_at_zero_is_launch_state(g):
    model = ProjectileModel(v0=40.0, theta=35.0, g=g, h0=12.0)
    state = model.state_at(0.0)
    rad = math.radians(35.0)
    assert state.x == 0.0
    assert state.y == 12.0
    assert state.vx == pytest.approx(40.0 * math.cos(rad))
    assert state.vy == pytest.approx(40.0 * math.sin(rad))
    assert state.speed == pytest.approx(40.0)


def test_state_at_time():
    model = ProjectileModel(v0=50.0, theta=45.0, g=9.8, h0=0.0)
    vx0, vy0 = model.initial_velocity
    state = model.state_at(2.0)
    assert state.x == pytest.approx(vx0 * 2.0)
    assert state.y == pytest.approx(vy0 * 2.0 - 0.5 * 9.8 * 4.0)
    assert state.vx == pytest.approx(vx0)
    assert state.vy == pytest.approx(vy0 - 9.8 * 2.0)
    assert state.speed == pytest.approx(math.hypot(state.vx, state.vy))


def test_landing_state_is_on_ground_at_range():
    model = ProjectileModel(v0=25.0, theta=50.0, g=9.81, h0=5.0)
    stats = model.flight_stats()
    state = model.state_at(stats.time_of_flight)
    assert state.y == pytest.approx(0.0, abs=1e-9)
    assert state.x == pytest.approx(stats.range)


@pytest.mark.parametrize("g", [0.0, -9.8])
def test_flight_stats_require_positive_gravity(g):
    with pytest.raises(InvalidDomainError):
        ProjectileModel(v0=50.0, theta=45.0, g=g).flight_stats()


def test_flight_stats_reject_launch_below_ground():
    with pytest.raises(InvalidDomainError):
        ProjectileModel(v0=50.0, theta=45.0, g=9.8, h0=-1.0).flight_stats()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"v0": -1.0},
        {"v0": float("nan")},
        {"theta": float("inf")},
        {"g": float("nan")},
        {"h0": float("-inf")},
    ],
)
def test_model_rejects_invalid_parameters(kwargs):
    with pytest.raises(InvalidDomainError):
        ProjectileModel(**kwargs)


def test_state_at_rejects_negative_time():
    with pytest.raises(InvalidDomainError):
        ProjectileModel().state_at(-0.5)


def test_trajectory_ends_exactly_at_landing():
    model = ProjectileModel(v0=50.0, theta=45.0, g=9.8)
    stats = model.flight_stats()
    t, x, y = model.trajectory(step=0.05)

    assert t[0] == 0.0
    assert t[-1] == stats.time_of_flight
    assert x[-1] == pytest.approx(stats.range)
    assert y[-1] == pytest.approx(0.0, abs=1e-9)
    assert np.allclose(np.diff(t[:-1]), 0.05)
    assert np.all(y[:-1] >= 0.0)


def test_trajectory_of_degenerate_launch():
    t, x, y = ProjectileModel(v0=0.0, theta=45.0, g=9.8).trajectory()
    assert list(t) == [0.0]
    assert list(x) == [0.0]
    assert list(y) == [0.0]


def test_plot(no_show):
    ProjectileModel(v0=30.0, theta=40.0, g=9.8, h0=10.0).plot()
