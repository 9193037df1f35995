# MIT License (see LICENSE)
"""Matter waves and the photoelectric effect."""
from __future__ import annotations

import numpy as np

from ..constants import PLANCK_CONSTANT


def de_broglie_wavelength(momentum, h=PLANCK_CONSTANT):
    """λ = h / p (m)."""
    return h / momentum


def photoelectric_max_kinetic_energy(frequency, work_function, h=PLANCK_CONSTANT):
    """
    Einstein's photoelectric equation K_max = h·f − W.

    Below the threshold frequency no electron is emitted, so the result is
    floored at zero.
    """
    return np.maximum(h * frequency - work_function, 0.0)
