# MIT License (see LICENSE)
"""
Physical constants and fixed settings used throughout the simulations.

All values are SI (CODATA 2018 where applicable).
"""
from __future__ import annotations

import math

# Standard gravitational acceleration used as the default g, in m/s².
GRAVITY: float = 9.81

SPEED_OF_LIGHT: float = 299792458.0            # m/s
PLANCK_CONSTANT: float = 6.62607015e-34        # J·s
BOLTZMANN_CONSTANT: float = 1.380649e-23       # J/K
AVOGADRO_NUMBER: float = 6.02214076e23         # 1/mol
VACUUM_PERMITTIVITY: float = 8.8541878128e-12  # F/m
VACUUM_PERMEABILITY: float = 1.25663706212e-6  # H/m
ELEMENTARY_CHARGE: float = 1.602176634e-19     # C
ELECTRON_MASS: float = 9.1093837015e-31        # kg
PROTON_MASS: float = 1.67262192369e-27         # kg

# Molar gas constant, J/(mol·K). Kept at the 4-digit textbook value.
GAS_CONSTANT: float = 8.314

# Coulomb's constant k = 1/(4πε₀), N·m²/C²
# Reference: https://physics.nist.gov/cgi-bin/cuu/Value?k
K_COULOMB: float = 8.9875517923e9

DEG_TO_RAD: float = math.pi / 180.0
RAD_TO_DEG: float = 180.0 / math.pi

# Discrete playback speed multipliers offered by the controls, slowest first.
SPEED_OPTIONS: tuple[float, ...] = (0.25, 0.5, 1.0, 2.0, 4.0)
