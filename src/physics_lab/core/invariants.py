# MIT License (see LICENSE)
"""
Checks on conserved quantities and periodicity.

Used to verify simulation correctness: without damping the total mechanical
energy should stay constant (within integration error), and a small-angle
pendulum should swing with period 2π·√(L/g).
"""
from __future__ import annotations

import numpy as np

from ..util import f64


def energy_drift(totals) -> float:
    """
    Largest relative deviation of a total-energy series from its first value.

        drift = max |E_i − E_0| / |E_0|

    Falls back to the absolute deviation when E_0 is zero.

    Args:
        totals: Sequence of total energies, oldest first.
    """
    e = f64(totals)
    if e.size == 0:
        return 0.0
    dev = float(np.max(np.abs(e - e[0])))
    ref = abs(float(e[0]))
    return dev / ref if ref > 0 else dev


def estimate_period(times, values) -> float:
    """
    Estimate the oscillation period from downward zero crossings.

    Crossing times are refined by linear interpolation between the two
    samples that bracket the sign change, and the period is the mean spacing
    between consecutive crossings.

    Args:
        times: Sample times (s), increasing.
        values: Oscillating signal, e.g. pendulum angle.

    Returns:
        Mean period in seconds.

    Raises:
        ValueError: If fewer than two downward crossings are found.
    """
    t = f64(times)
    y = f64(values)
    if t.shape != y.shape:
        raise ValueError("times and values must have the same length")

    idx = np.nonzero((y[:-1] > 0.0) & (y[1:] <= 0.0))[0]
    if idx.size < 2:
        raise ValueError("Need at least two downward zero crossings to estimate a period")

    y0, y1 = y[idx], y[idx + 1]
    frac = y0 / (y0 - y1)
    crossings = t[idx] + frac * (t[idx + 1] - t[idx])
    return float(np.mean(np.diff(crossings)))


def max_abs_error(simulated, expected) -> float:
    """Maximum absolute difference between two equally shaped series."""
    return float(np.max(np.abs(f64(simulated) - f64(expected))))
