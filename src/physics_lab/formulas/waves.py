# MIT License (see LICENSE)
"""Wave kinematics and the moving-source Doppler shift."""
from __future__ import annotations

import numpy as np


def wave_speed(frequency, wavelength):
    """v = f·λ (m/s)."""
    return frequency * wavelength


def string_fundamental_frequency(length, tension, linear_density):
    """f1 = (1 / 2L)·√(T/μ) for a string fixed at both ends (Hz)."""
    return (1.0 / (2.0 * length)) * np.sqrt(tension / linear_density)


def doppler_shift(f0, source_speed, wave_speed):
    """
    Observed frequency for a moving source and a stationary observer.

    source_speed is positive when the source approaches the observer.
    """
    return f0 * (wave_speed / (wave_speed - source_speed))
