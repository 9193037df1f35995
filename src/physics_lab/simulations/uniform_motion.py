# MIT License (see LICENSE)
"""
Uniform and uniformly accelerated motion along a line.

The state is evaluated in closed form at every frame:
    x(t) = x0 + v0·t + ½·a·t²
    v(t) = v0 + a·t

A negative acceleration is read as gravity pulling back toward x0, so the
potential energy is m·|a|·(x − x0) in that case and zero otherwise. With
a < 0 the total K + U therefore equals ½·m·v0² at all times.
"""
from __future__ import annotations
from dataclasses import dataclass

from ..formulas import mechanics
from ..history import History
from ..parameters import Parameter, ParameterSet
from .base import Simulation


@dataclass(frozen=True)
class TrailPoint:
    time: float
    position: float
    velocity: float


@dataclass(frozen=True)
class EnergySample:
    time: float
    kinetic: float
    potential: float
    total: float


class UniformMotion(Simulation):
    """Body moving with constant acceleration (zero for uniform motion)."""
    id = "uniform-motion"
    topic_id = "kinematics"
    name = "Uniform and Uniformly Accelerated Motion"
    time_step = 0.016
    max_data_points = 100

    @classmethod
    def default_parameters(cls) -> ParameterSet:
        return ParameterSet([
            Parameter("initialPosition", 0.0, -10.0, 10.0, 0.1, "m", "Initial position"),
            Parameter("initialVelocity", 5.0, -10.0, 10.0, 0.1, "m/s", "Initial velocity"),
            Parameter("acceleration", 0.0, -5.0, 5.0, 0.1, "m/s²", "Acceleration"),
            Parameter("mass", 1.0, 0.1, 10.0, 0.1, "kg", "Mass"),
        ])

    def _reset_state(self) -> None:
        p = self.parameters
        self.position = p.value("initialPosition")
        self.velocity = p.value("initialVelocity")
        self.acceleration = p.value("acceleration")
        self.trail: History[TrailPoint] = History(self.max_data_points)
        self.energy: History[EnergySample] = History(self.max_data_points)

    def _advance(self, dt: float) -> None:
        p = self.parameters
        x0 = p.value("initialPosition")
        v0 = p.value("initialVelocity")
        a = p.value("acceleration")
        m = p.value("mass")

        t = self.current_time + dt
        x = mechanics.position(x0, v0, a, t)
        v = mechanics.velocity(v0, a, t)

        kinetic = mechanics.kinetic_energy(m, v)
        potential = mechanics.potential_energy(m, x - x0, abs(a)) if a < 0 else 0.0

        self.current_time = t
        self.position = x
        self.velocity = v
        self.acceleration = a
        self.trail.append(TrailPoint(time=t, position=x, velocity=v))
        self.energy.append(EnergySample(
            time=t, kinetic=kinetic, potential=potential, total=kinetic + potential
        ))

    def state_dict(self) -> dict[str, float]:
        return {
            "time": self.current_time,
            "position": self.position,
            "velocity": self.velocity,
            "acceleration": self.acceleration,
        }

    def histories(self) -> dict[str, History]:
        return {"trail": self.trail, "energy": self.energy}
