# MIT License (see LICENSE)
"""Lookup of simulation classes by id."""
from __future__ import annotations
from typing import Any

from .base import Simulation
from .pendulum_motion import PendulumMotion
from .projectile_motion import ProjectileMotion
from .uniform_motion import UniformMotion

SIMULATIONS: dict[str, type[Simulation]] = {
    cls.id: cls for cls in (UniformMotion, ProjectileMotion, PendulumMotion)
}


def create_simulation(sim_id: str, **kwargs: Any) -> Simulation:
    """
    Instantiate a registered simulation.

    Args:
        sim_id: Registry id, e.g. "pendulum-motion".
        **kwargs: Forwarded to the simulation constructor.

    Raises:
        ValueError: If sim_id is not registered.
    """
    try:
        cls = SIMULATIONS[sim_id]
    except KeyError:
        raise ValueError(
            f"Unknown simulation: {sim_id!r}; available: {', '.join(SIMULATIONS)}"
        ) from None
    return cls(**kwargs)
