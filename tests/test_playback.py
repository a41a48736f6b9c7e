import pytest

from motionlab.errors import InvalidDomainError
from motionlab.model import FreeFallModel, ProjectileModel, advance_time


def test_advance_within_motion():
    t, finished = advance_time(0.0, 0.016, 1.0)
    assert t == pytest.approx(0.016)
    assert not finished


def test_advance_clamps_at_end():
    assert advance_time(0.99, 0.05, 1.0) == (1.0, True)
    assert advance_time(1.0, 0.0, 1.0) == (1.0, True)


def test_zero_length_motion_finishes_immediately():
    end = FreeFallModel(h0=0.0, g=9.81).impact_time
    assert advance_time(0.0, 0.016, end) == (0.0, True)


def test_playing_a_projectile_to_the_end():
    model = ProjectileModel(v0=20.0, theta=60.0, g=9.8)
    end = model.flight_stats().time_of_flight

    t, finished, frames = 0.0, False, 0
    while not finished:
        t, finished = advance_time(t, 1 / 60, end)
        frames += 1

    assert t == end
    assert frames == pytest.approx(end * 60, abs=2)
    assert model.state_at(t).y == pytest.approx(0.0, abs=1e-9)


@pytest.mark.parametrize("args", [(-1.0, 0.1, 1.0), (0.0, -0.1, 1.0), (0.0, 0.1, float("nan"))])
def test_invalid_arguments(args):
    with pytest.raises(InvalidDomainError):
        advance_time(*args)
