# MIT License (see LICENSE)
"""
Numerical core shared by the simulations.

This subpackage provides:
    - Integrators: semi-implicit Euler and RK4 for a second-order angular ODE.
    - Invariants: energy drift and oscillation period estimates used to
      verify simulations.

Typical usage:
    from physics_lab.core import euler_step

    theta, omega = euler_step(theta, omega, accel, dt=0.01)
"""
from .integrators import INTEGRATORS, euler_step, rk4_step
from .invariants import energy_drift, estimate_period, max_abs_error

__all__ = [
    # Integrators
    "INTEGRATORS",
    "euler_step",
    "rk4_step",
    # Invariants
    "energy_drift",
    "estimate_period",
    "max_abs_error",
]
