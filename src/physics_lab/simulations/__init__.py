# MIT License (see LICENSE)
"""
Simulation topics and their shared playback base class.

    - UniformMotion: constant-acceleration motion on a line.
    - ProjectileMotion: oblique launch with landing detection.
    - PendulumMotion: damped simple pendulum.
"""
from .base import Simulation
from .pendulum_motion import PendulumMotion, PendulumSample
from .projectile_motion import ProjectileMotion, ProjectileSample, TrajectoryPoint
from .registry import SIMULATIONS, create_simulation
from .uniform_motion import EnergySample, TrailPoint, UniformMotion

__all__ = [
    "Simulation",
    "UniformMotion",
    "ProjectileMotion",
    "PendulumMotion",
    # Samples
    "TrailPoint",
    "EnergySample",
    "TrajectoryPoint",
    "ProjectileSample",
    "PendulumSample",
    # Registry
    "SIMULATIONS",
    "create_simulation",
]
