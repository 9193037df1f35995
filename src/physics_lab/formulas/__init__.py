# MIT License (see LICENSE)
"""
Closed-form physics formulas grouped by field.

Every function accepts plain floats or numpy arrays and returns the same
kind, so they can evaluate a single frame or a whole time series at once.

Typical usage:
    from physics_lab.formulas import mechanics

    mechanics.position(x0=0.0, v0=5.0, a=-2.0, t=1.5)
"""
from . import electromagnetism, mechanics, quantum, thermodynamics, waves
from .thermodynamics import InsufficientParametersError

__all__ = [
    "mechanics",
    "thermodynamics",
    "waves",
    "electromagnetism",
    "quantum",
    "InsufficientParametersError",
]
