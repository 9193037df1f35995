# MIT License (see LICENSE)
"""
Point-charge electrostatics and the magnetic part of the Lorentz force.

Sign convention for coulomb_force: positive means repulsion.
"""
from __future__ import annotations

import numpy as np

from ..constants import K_COULOMB, PLANCK_CONSTANT


def coulomb_force(q1, q2, r, k=K_COULOMB):
    """F = k·q1·q2 / r² (N)."""
    return k * q1 * q2 / (r * r)


def electric_field(q, r, k=K_COULOMB):
    """Field strength k·q / r² of a point charge (N/C)."""
    return k * q / (r * r)


def electric_potential(q, r, k=K_COULOMB):
    """Potential k·q / r of a point charge (V)."""
    return k * q / r


def lorentz_force(q, v, B, theta):
    """Magnitude |q|·v·B·sin θ of the magnetic force on a moving charge (N)."""
    return np.abs(q) * v * B * np.sin(theta)


def photon_energy(frequency, h=PLANCK_CONSTANT):
    """E = h·f (J)."""
    return h * frequency
