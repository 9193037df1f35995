# MIT License (see LICENSE)
"""
Small numeric helpers shared by the simulations.

Angles are stored in radians internally; parameters exposed to users are in
degrees, so conversions live here next to the float64 coercion helper.
"""
from __future__ import annotations
import os

import numpy as np

from .constants import DEG_TO_RAD


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Lets callers pass tuples or lists for series and vectors.
    """
    return np.array(x, dtype=np.float64)


def clamp(value: float, lo: float, hi: float) -> float:
    """Limit value to the closed interval [lo, hi]."""
    return max(lo, min(hi, value))


def deg_to_rad(deg: float) -> float:
    return deg * DEG_TO_RAD


def env_float(name: str, default: float | None = None) -> float | None:
    """
    Read a float from the environment.

    Returns default when the variable is unset or empty.

    Raises:
        ValueError: If the variable is set but not a number.
    """
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
