# MIT License (see LICENSE)
"""
physics_lab - Interactive physics simulations for teaching mechanics.

Each simulation keeps a set of bounded parameters, advances once per
animation frame and records capped time series for plotting. Front ends
(3D scenes, charts, sliders) drive it through play/pause/reset/speed and
set_parameter, and read state through renderer adapters.

Main entry points:
    - UniformMotion, ProjectileMotion, PendulumMotion: The simulations.
    - create_simulation: Build a simulation by id.
    - FrameLoop: Drive a simulation from frame timestamps.
    - Parameter, ParameterSet: Slider-backed inputs.
    - History: Capped sample buffer.

Submodules:
    - formulas: Closed-form mechanics, thermodynamics, waves, EM and quantum formulas.
    - core: Integrators and invariant checks.
    - io: JSON presets and exports.
    - renderer: Optional visualization adapters.
    - catalog: Units, topics and page routes.

Example:
    from physics_lab import PendulumMotion, FrameLoop

    sim = PendulumMotion({"length": 2.0, "dampingFactor": 0.0})
    FrameLoop(sim).run(duration=5.0)
    print(sim.state_dict())
"""
from .history import History
from .loop import FrameLoop
from .parameters import Parameter, ParameterSet
from .simulations import (
    PendulumMotion,
    ProjectileMotion,
    Simulation,
    UniformMotion,
    create_simulation,
)

__version__ = "0.1.0"

__all__ = [
    # Simulations
    "Simulation",
    "UniformMotion",
    "ProjectileMotion",
    "PendulumMotion",
    "create_simulation",
    # Driving
    "FrameLoop",
    # Data
    "Parameter",
    "ParameterSet",
    "History",
]
