# MIT License (see LICENSE)
"""
JSON presets and run exports for simulations.

A file stores which simulation to build and its slider values. Exports may
also carry the current state and sample history for external plotting; those
fields are ignored on load, where the state is always rebuilt by reset().

JSON Schema Overview:
---------------------
{
  "id": string,                    # Required, e.g. "pendulum-motion"
  "speed": float,                  # One of 0.25, 0.5, 1, 2, 4. Default: 1
  "parameters": {id: float, ...},  # Optional, missing ids keep defaults
  "integrator": string,            # Pendulum only, "euler" or "rk4"

  # Export-only fields (written by save_simulation, ignored by load)
  "name": string,
  "is_running": bool,
  "current_time": float,
  "time_step": float,
  "state": {...},
  "history": {buffer_name: [sample, ...]}
}
"""
from __future__ import annotations
import json
import logging
from typing import TYPE_CHECKING, Any

import numpy as np

from ..simulations.pendulum_motion import PendulumMotion
from ..simulations.registry import SIMULATIONS, create_simulation

if TYPE_CHECKING:
    from ..simulations.base import Simulation

logger = logging.getLogger(__name__)


def load_simulation_raw(path: str) -> dict[str, Any]:
    """
    Load raw JSON data from a simulation file without object construction.

    Args:
        path: Absolute or relative path to the JSON file.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def simulation_from_json(data: dict[str, Any]) -> "Simulation":
    """
    Build a reset, paused simulation from a parsed JSON dictionary.

    Raises:
        ValueError: If "id" is missing or unknown, a parameter value is not
            numeric, the speed is not a supported option, or an integrator is
            given for a simulation that has none.
        KeyError: If a parameter id does not belong to the simulation.
    """
    if "id" not in data:
        raise ValueError("Simulation definition missing required 'id' field.")

    try:
        kwargs: dict[str, Any] = {"speed": float(data.get("speed", 1.0))}
    except (TypeError, ValueError):
        raise ValueError(f"Non-numeric speed {data.get('speed')!r}") from None
    if "integrator" in data:
        sim_cls = SIMULATIONS.get(data["id"])
        if sim_cls is not None and not issubclass(sim_cls, PendulumMotion):
            raise ValueError(f"'integrator' is only supported by {PendulumMotion.id!r}, not {data['id']!r}")
        kwargs["integrator"] = data["integrator"]

    params = data.get("parameters", {})
    if not isinstance(params, dict):
        raise ValueError("'parameters' must be an object mapping ids to numbers")
    try:
        kwargs["parameters"] = {k: float(v) for k, v in params.items()}
    except (TypeError, ValueError):
        raise ValueError(f"Non-numeric parameter value in {params!r}") from None

    sim = create_simulation(data["id"], **kwargs)
    logger.debug("Loaded %s with %s", sim.id, sim.parameters.values())
    return sim


def simulation_to_json(sim: "Simulation", include_history: bool = False) -> dict[str, Any]:
    """Serialize a simulation (and optionally its history) to a dictionary."""
    data = sim.to_dict(include_history=include_history)
    integrator = getattr(sim, "integrator", None)
    if integrator is not None:
        data["integrator"] = integrator
    return data


def load_simulation(path: str) -> "Simulation":
    """
    Load a simulation preset or export from a JSON file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the definition is invalid (see simulation_from_json).
    """
    return simulation_from_json(load_simulation_raw(path))


def save_simulation(sim: "Simulation", path: str, include_history: bool = False, indent: int = 2) -> None:
    """Save a simulation to a JSON file on disk."""
    data = simulation_to_json(sim, include_history=include_history)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, default=_to_builtin)
    logger.info("Saved %s to %s", sim.id, path)


def _to_builtin(obj: Any) -> Any:
    """json.dump fallback for numpy scalars and arrays."""
    if isinstance(obj, np.generic):
        return obj.item()
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
