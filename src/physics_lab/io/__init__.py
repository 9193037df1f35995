# MIT License (see LICENSE)
"""
Input/output utilities for simulations.

This subpackage provides JSON serialization:
    - load_simulation / save_simulation: Files on disk.
    - simulation_from_json / simulation_to_json: In-memory dicts.
    - load_simulation_raw: Raw JSON without object construction.

Typical usage:
    from physics_lab.io import load_simulation, save_simulation

    sim = load_simulation("presets/moon_pendulum.json")
    save_simulation(sim, "run.json", include_history=True)
"""
from .json_io import (
    load_simulation,
    load_simulation_raw,
    save_simulation,
    simulation_from_json,
    simulation_to_json,
)

__all__ = [
    "load_simulation",
    "load_simulation_raw",
    "save_simulation",
    "simulation_from_json",
    "simulation_to_json",
]
