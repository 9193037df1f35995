# MIT License (see LICENSE)
"""
Ideal gas, Boltzmann statistics and calorimetry.
"""
from __future__ import annotations

import numpy as np

from ..constants import BOLTZMANN_CONSTANT, GAS_CONSTANT


class InsufficientParametersError(ValueError):
    """Raised when an equation cannot be solved from the given inputs."""


def ideal_gas_law(
    p: float | None = None,
    V: float | None = None,
    n: float | None = None,
    T: float | None = None,
    R: float = GAS_CONSTANT,
) -> float:
    """
    Solve pV = nRT for whichever of p, V, n, T is None.

    Exactly one of the four state variables must be omitted.

    Args:
        p: Pressure (Pa).
        V: Volume (m³).
        n: Amount of substance (mol).
        T: Temperature (K).
        R: Gas constant (J/(mol·K)).

    Returns:
        The missing quantity in SI units.

    Raises:
        InsufficientParametersError: If zero or more than one variable is missing.
    """
    given = {"p": p, "V": V, "n": n, "T": T}
    missing = [k for k, v in given.items() if v is None]
    if len(missing) != 1:
        raise InsufficientParametersError(
            "ideal_gas_law needs exactly one unknown among p, V, n, T; "
            f"got missing={missing or 'none'}"
        )
    unknown = missing[0]
    if unknown == "p":
        return n * R * T / V
    if unknown == "V":
        return n * R * T / p
    if unknown == "n":
        return p * V / (R * T)
    return p * V / (n * R)


def boltzmann_factor(E, T, k=BOLTZMANN_CONSTANT):
    """Relative occupation exp(−E/(k·T)) of a state with energy E at temperature T."""
    return np.exp(-E / (k * T))


def heat_energy(m, c, delta_T):
    """Q = m·c·ΔT (J)."""
    return m * c * delta_T
