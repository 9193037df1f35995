import numpy as np
import pytest

from physics_lab.core.invariants import energy_drift, estimate_period
from physics_lab.formulas import mechanics
from physics_lab.simulations import PendulumMotion


def _run(sim, dt, steps):
    """Step a running pendulum, returning full (unbounded) series."""
    times, angles, totals = [0.0], [sim.angle], [sim.data.latest.total_energy]
    for _ in range(steps):
        sim.step(dt)
        s = sim.data.latest
        times.append(s.time)
        angles.append(s.angle)
        totals.append(s.total_energy)
    return np.array(times), np.array(angles), np.array(totals)


def test_reset_seeds_initial_sample():
    """
    theta0 = 30 deg, omega0 = 0:
      U = m g L (1 - cos theta0), K = 0
    """
    sim = PendulumMotion()
    assert len(sim.data) == 1

    s = sim.data[0]
    assert s.time == 0.0
    assert s.angle == pytest.approx(np.pi / 6)
    assert s.angular_velocity == 0.0
    assert s.kinetic_energy == 0.0
    assert s.potential_energy == pytest.approx(9.8 * 1.0 * (1 - np.cos(np.pi / 6)))
    assert s.total_energy == s.potential_energy


def test_single_euler_step():
    """
    Semi-implicit Euler:
      omega1 = omega0 + (-(g/L) sin theta0 - b omega0) dt
      theta1 = theta0 + omega1 dt
    """
    g, L, dt = 9.8, 2.0, 0.01
    sim = PendulumMotion({"length": L, "initialAngle": 20.0})
    theta0 = np.radians(20.0)
    sim.play()
    sim.step(dt)

    omega1 = -(g / L) * np.sin(theta0) * dt
    assert sim.angular_velocity == pytest.approx(omega1)
    assert sim.angle == pytest.approx(theta0 + omega1 * dt)
    assert sim.current_time == pytest.approx(dt)
    assert len(sim.data) == 2


def test_speed_multiplies_the_euler_step():
    """
    At speed 2 a 0.01 s frame advances the pendulum by dt = 0.02 s:
      omega1 = -(g/L) sin theta0 * 0.02, theta1 = theta0 + omega1 * 0.02
    """
    g, L = 9.8, 1.0
    sim = PendulumMotion({"length": L, "dampingFactor": 0.0}, speed=2)
    theta0 = np.radians(30.0)
    sim.play()
    sim.step(0.01)

    dt = 0.02
    omega1 = -(g / L) * np.sin(theta0) * dt
    assert sim.current_time == pytest.approx(dt)
    assert sim.data.latest.time == pytest.approx(dt)
    assert sim.angular_velocity == pytest.approx(omega1)
    assert sim.angle == pytest.approx(theta0 + omega1 * dt)


def test_energy_conserved_without_damping():
    """
    With b = 0 semi-implicit Euler keeps the energy error bounded at
    O(omega dt), well under 1% here.
    """
    sim = PendulumMotion({"dampingFactor": 0.0, "initialAngle": 10.0, "gravity": 9.81})
    sim.play()
    _, _, totals = _run(sim, 0.001, 3000)

    drift = energy_drift(totals)
    print("euler energy drift", drift)
    assert drift < 1e-2


def test_rk4_energy_conservation_is_tighter():
    sim = PendulumMotion({"dampingFactor": 0.0, "initialAngle": 45.0}, integrator="rk4")
    sim.play()
    _, _, totals = _run(sim, 0.001, 3000)

    drift = energy_drift(totals)
    print("rk4 energy drift", drift)
    assert drift < 1e-6


def test_damping_dissipates_energy():
    sim = PendulumMotion({"dampingFactor": 0.5})
    sim.play()
    _, _, totals = _run(sim, 0.005, 600)

    assert totals[-1] < 0.5 * totals[0]


def test_small_angle_period():
    """
    Small-angle analytic period:
      T = 2 pi sqrt(L / g)
    Measured from zero crossings over several oscillations.
    """
    L, g = 1.0, 9.81
    sim = PendulumMotion({"length": L, "gravity": g, "initialAngle": 5.0, "dampingFactor": 0.0})
    sim.play()
    times, angles, _ = _run(sim, 0.001, 10000)

    T_sim = estimate_period(times, angles)
    T_exp = mechanics.pendulum_period(L, g)
    err = abs(T_sim - T_exp) / T_exp
    print("period", T_sim, "exp", T_exp, "relerr", err)
    assert err <= 0.02


def test_bob_position_follows_angle():
    sim = PendulumMotion({"length": 2.0, "initialAngle": 90.0})
    x, y = sim.bob_position
    assert x == pytest.approx(2.0)
    assert y == pytest.approx(0.0, abs=1e-12)

    state = sim.state_dict()
    assert state["bob_x"] == pytest.approx(2.0)


def test_history_capped_at_500():
    sim = PendulumMotion()
    sim.play()
    for _ in range(700):
        sim.step(0.01)

    assert len(sim.data) == 500
    assert sim.data[0].time == pytest.approx(2.01)


def test_unknown_integrator():
    with pytest.raises(ValueError):
        PendulumMotion(integrator="leapfrog")
