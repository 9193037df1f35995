# MIT License (see LICENSE)
"""
Single-step integrators for a second-order scalar ODE.

The pendulum is written as a first-order system in (θ, ω):
    dθ/dt = ω
    dω/dt = α(θ, ω)

where α is supplied by the caller (see formulas.mechanics for the pendulum
right-hand side). Each integrator returns the new (θ, ω) pair and leaves
bookkeeping such as time and history to the simulation.

Available integrators:
- euler_step: Semi-implicit (symplectic) Euler. One α evaluation per step and
  bounded energy error for undamped motion.
- rk4_step: Classical 4th-order Runge-Kutta. Four α evaluations, O(dt⁵) local
  error.

Reference:
    Semi-implicit Euler: https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
    Runge-Kutta methods: https://en.wikipedia.org/wiki/Runge-Kutta_methods
"""
from __future__ import annotations

from typing import Callable

AccelFn = Callable[[float, float], float]


def euler_step(theta: float, omega: float, accel: AccelFn, dt: float) -> tuple[float, float]:
    """
    Advance (θ, ω) by dt with semi-implicit Euler.

    Velocity is updated first and the new velocity moves the angle:
        ω₁ = ω₀ + α(θ₀, ω₀)·dt
        θ₁ = θ₀ + ω₁·dt
    """
    omega_new = omega + accel(theta, omega) * dt
    theta_new = theta + omega_new * dt
    return theta_new, omega_new


def rk4_step(theta: float, omega: float, accel: AccelFn, dt: float) -> tuple[float, float]:
    """
    Advance (θ, ω) by dt using classical 4th-order Runge-Kutta.

    Stages are combined with weights (1, 2, 2, 1)/6.
    """
    k1_th, k1_w = omega, accel(theta, omega)

    th2, w2 = theta + 0.5 * dt * k1_th, omega + 0.5 * dt * k1_w
    k2_th, k2_w = w2, accel(th2, w2)

    th3, w3 = theta + 0.5 * dt * k2_th, omega + 0.5 * dt * k2_w
    k3_th, k3_w = w3, accel(th3, w3)

    th4, w4 = theta + dt * k3_th, omega + dt * k3_w
    k4_th, k4_w = w4, accel(th4, w4)

    theta_new = theta + (dt / 6.0) * (k1_th + 2 * k2_th + 2 * k3_th + k4_th)
    omega_new = omega + (dt / 6.0) * (k1_w + 2 * k2_w + 2 * k3_w + k4_w)
    return theta_new, omega_new


INTEGRATORS: dict[str, Callable[[float, float, AccelFn, float], tuple[float, float]]] = {
    "euler": euler_step,
    "rk4": rk4_step,
}
