# MIT License (see LICENSE)
"""
Kinematics, energy and oscillation formulas.

Uniformly accelerated motion along one axis:
    x(t) = x0 + v0·t + ½·a·t²
    v(t) = v0 + a·t

Simple pendulum (angle θ from the vertical, damping b):
    θ'' = −(g/L)·sin θ − b·θ'
    T ≈ 2π·√(L/g)   for small amplitude, b = 0

Reference: https://en.wikipedia.org/wiki/Equations_of_motion
"""
from __future__ import annotations

import numpy as np

from ..constants import GRAVITY


def position(x0, v0, a, t):
    """Position under constant acceleration a after time t."""
    return x0 + v0 * t + 0.5 * a * t * t


def velocity(v0, a, t):
    """Velocity under constant acceleration a after time t."""
    return v0 + a * t


def kinetic_energy(m, v):
    """K = ½·m·v² (J)."""
    return 0.5 * m * v * v


def potential_energy(m, h, g=GRAVITY):
    """Gravitational potential energy U = m·g·h (J), h measured from the reference level."""
    return m * g * h


def spring_energy(k, x):
    """Elastic energy ½·k·x² of a spring with constant k displaced by x."""
    return 0.5 * k * x * x


def angular_frequency(k, m):
    """ω = √(k/m) of a mass-spring oscillator (rad/s)."""
    return np.sqrt(k / m)


def pendulum_period(length, g=GRAVITY):
    """Small-angle period T = 2π·√(L/g) (s)."""
    return 2.0 * np.pi * np.sqrt(length / g)


def pendulum_angular_acceleration(theta, omega, g, length, damping=0.0):
    """
    Right-hand side of the damped pendulum equation.

    Args:
        theta: Angle from the vertical (rad).
        omega: Angular velocity (rad/s).
        g: Gravitational acceleration (m/s²).
        length: Rod length (m).
        damping: Linear damping coefficient b (1/s).

    Returns:
        θ'' = −(g/L)·sin θ − b·ω  (rad/s²)
    """
    return -(g / length) * np.sin(theta) - damping * omega


# -----------------------------------------------------------------------------
# Projectile helpers (launch from height h0, flat ground at y = 0)
# -----------------------------------------------------------------------------

def projectile_flight_time(speed, angle, g=GRAVITY, h0=0.0):
    """
    Time until the projectile returns to y = 0.

    Positive root of h0 + v0y·t − ½·g·t² = 0:
        t = (v0y + √(v0y² + 2·g·h0)) / g

    Args:
        speed: Launch speed (m/s).
        angle: Launch angle above the horizontal (rad).
        g: Gravitational acceleration (m/s²).
        h0: Launch height (m).
    """
    v0y = speed * np.sin(angle)
    return (v0y + np.sqrt(v0y * v0y + 2.0 * g * h0)) / g


def projectile_max_height(speed, angle, g=GRAVITY, h0=0.0):
    """Apex height h0 + v0y²/(2g). For a downward launch this is just h0."""
    v0y = np.maximum(speed * np.sin(angle), 0.0)
    return h0 + v0y * v0y / (2.0 * g)


def projectile_range(speed, angle, g=GRAVITY, h0=0.0):
    """Horizontal distance travelled before hitting y = 0."""
    return speed * np.cos(angle) * projectile_flight_time(speed, angle, g, h0)
